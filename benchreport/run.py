"""Data describing benchmark runs and the machine they ran on."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional

TOMBSTONE_VALUE = 2**63 - 1
"""Marker for a memory statistic that was not measured."""


class TimeUnit(enum.Enum):
    """Unit in which run times are reported."""

    NANOSECOND = "ns"
    MICROSECOND = "us"
    MILLISECOND = "ms"
    SECOND = "s"

    def multiplier(self) -> float:
        """Factor converting seconds into this unit."""
        return _TIME_MULTIPLIERS[self]


_TIME_MULTIPLIERS = {
    TimeUnit.NANOSECOND: 1e9,
    TimeUnit.MICROSECOND: 1e6,
    TimeUnit.MILLISECOND: 1e3,
    TimeUnit.SECOND: 1.0,
}


class RunType(enum.Enum):
    """Whether a run is a single repetition or an aggregate of several."""

    ITERATION = "iteration"
    AGGREGATE = "aggregate"


class StatisticUnit(enum.Enum):
    """Unit of an aggregate statistic."""

    TIME = "time"
    PERCENTAGE = "percentage"


class Complexity(enum.Enum):
    """Asymptotic complexity of a benchmark; str() gives its big-O form."""

    NONE = enum.auto()
    O_1 = enum.auto()
    O_N = enum.auto()
    O_N_SQUARED = enum.auto()
    O_N_CUBED = enum.auto()
    O_LOG_N = enum.auto()
    O_N_LOG_N = enum.auto()
    AUTO = enum.auto()
    LAMBDA = enum.auto()

    def __str__(self) -> str:
        return _BIG_O.get(self, "f(N)")


_BIG_O = {
    Complexity.O_N: "N",
    Complexity.O_N_SQUARED: "N^2",
    Complexity.O_N_CUBED: "N^3",
    Complexity.O_LOG_N: "lgN",
    Complexity.O_N_LOG_N: "NlgN",
    Complexity.O_1: "(1)",
}


class CPUScaling(enum.Enum):
    """State of CPU frequency scaling on the host."""

    UNKNOWN = "unknown"
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass
class CacheInfo:
    """One CPU cache."""

    type: str
    level: int
    size: int
    num_sharing: int


@dataclass
class CPUInfo:
    """Description of the host's processors."""

    num_cpus: int = 1
    cycles_per_second: float = 1.0
    scaling: CPUScaling = CPUScaling.UNKNOWN
    caches: List[CacheInfo] = field(default_factory=list)
    load_avg: List[float] = field(default_factory=list)


@dataclass
class Context:
    """What is reported once, before any run."""

    host_name: str = ""
    cpu_info: CPUInfo = field(default_factory=CPUInfo)
    executable_name: Optional[str] = None
    library_build_type: str = "release"


@dataclass
class MemoryResult:
    """Memory statistics collected for a run."""

    num_allocs: int = 0
    max_bytes_used: int = 0
    total_allocated_bytes: int = TOMBSTONE_VALUE
    net_heap_growth: int = TOMBSTONE_VALUE


@dataclass
class Run:
    """The result of one benchmark run or of an aggregate over runs."""

    run_name: str = ""
    family_index: int = 0
    per_family_instance_index: int = 0
    run_type: RunType = RunType.ITERATION
    aggregate_name: str = ""
    aggregate_unit: StatisticUnit = StatisticUnit.TIME
    report_label: str = ""
    error_occurred: bool = False
    error_message: str = ""
    iterations: int = 1
    threads: int = 1
    repetition_index: int = 0
    repetitions: int = 0
    time_unit: TimeUnit = TimeUnit.NANOSECOND
    real_accumulated_time: float = 0.0
    cpu_accumulated_time: float = 0.0
    complexity: Complexity = Complexity.NONE
    complexity_n: int = 0
    report_big_o: bool = False
    report_rms: bool = False
    counters: Dict[str, float] = field(default_factory=dict)
    memory_result: Optional[MemoryResult] = None
    allocs_per_iter: float = 0.0

    def benchmark_name(self) -> str:
        """The run name, with the aggregate name appended for aggregates."""
        if self.run_type is RunType.AGGREGATE:
            return f"{self.run_name}_{self.aggregate_name}"
        return self.run_name

    def _per_iteration(self, seconds: float) -> float:
        value = seconds * self.time_unit.multiplier()
        if self.iterations != 0:
            value /= float(self.iterations)
        return value

    def adjusted_real_time(self) -> float:
        """Real time per iteration, in the run's time unit."""
        return self._per_iteration(self.real_accumulated_time)

    def adjusted_cpu_time(self) -> float:
        """CPU time per iteration, in the run's time unit."""
        return self._per_iteration(self.cpu_accumulated_time)