"""Writes benchmark results as a JSON document."""

from __future__ import annotations

import math
import sys
from datetime import datetime
from typing import IO, Iterable, Mapping, Optional

from benchreport.run import (
    TOMBSTONE_VALUE,
    Context,
    CPUScaling,
    Run,
    RunType,
    StatisticUnit,
)

_ESCAPES = str.maketrans(
    {
        "\b": "\\b",
        "\f": "\\f",
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\\": "\\\\",
        '"': '\\"',
    }
)


def str_escape(s: str) -> str:
    """Escape the characters that cannot appear raw in a JSON string."""
    return s.translate(_ESCAPES)


def format_kv(key: str, value) -> str:
    """Format one JSON member; the value may be str, bool, int or float."""
    prefix = f'"{str_escape(key)}": '
    if isinstance(value, str):
        return f'{prefix}"{str_escape(value)}"'
    if isinstance(value, bool):
        return prefix + ("true" if value else "false")
    if isinstance(value, int):
        return prefix + str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return prefix + "NaN"
        if math.isinf(value):
            return prefix + ("-Infinity" if value < 0 else "Infinity")
        return prefix + f"{value:.16e}"
    raise TypeError(f"cannot format value of type {type(value).__name__}")


def local_date_time_string() -> str:
    """Current local time with its UTC offset, e.g. 2024-01-02T03:04:05+01:00."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


def _round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(-whole if value < 0 else whole)


class JSONReporter:
    """Streams a context block and benchmark runs as JSON to a text stream."""

    def __init__(
        self,
        out: Optional[IO[str]] = None,
        global_context: Optional[Mapping[str, str]] = None,
    ):
        self.out = out if out is not None else sys.stdout
        self.global_context = global_context
        self._first_report = True

    def report_context(self, context: Context) -> bool:
        """Open the document and write the context block."""
        info = context.cpu_info
        indent = " " * 4
        cache_indent = " " * 6
        member_indent = " " * 8

        members = [
            format_kv("date", local_date_time_string()),
            format_kv("host_name", context.host_name),
        ]
        if context.executable_name:
            members.append(format_kv("executable", context.executable_name))
        members.append(format_kv("num_cpus", int(info.num_cpus)))
        members.append(
            format_kv(
                "mhz_per_cpu", _round_half_away(info.cycles_per_second / 1000000.0)
            )
        )
        if info.scaling is not CPUScaling.UNKNOWN:
            members.append(
                format_kv("cpu_scaling_enabled", info.scaling is CPUScaling.ENABLED)
            )

        parts = ["{\n", '  "context": {\n']
        parts.extend(f"{indent}{m},\n" for m in members)

        parts.append(f'{indent}"caches": [\n')
        cache_blocks = []
        for cache in info.caches:
            fields = [
                format_kv("type", cache.type),
                format_kv("level", int(cache.level)),
                format_kv("size", int(cache.size)),
                format_kv("num_sharing", int(cache.num_sharing)),
            ]
            body = ",\n".join(member_indent + f for f in fields)
            cache_blocks.append(f"{cache_indent}{{\n{body}\n{cache_indent}}}")
        parts.extend(block + ",\n" for block in cache_blocks[:-1])
        if cache_blocks:
            parts.append(cache_blocks[-1] + "\n")
        parts.append(f"{indent}],\n")

        load = ",".join("%g" % v for v in info.load_avg)
        parts.append(f'{indent}"load_avg": [{load}],\n')

        parts.append(indent + format_kv("library_build_type", context.library_build_type))
        if self.global_context is not None:
            for key, value in sorted(self.global_context.items()):
                parts.append(",\n" + indent + format_kv(key, value))
        parts.append("\n")

        parts.append("  },\n")
        parts.append('  "benchmarks": [\n')
        self.out.write("".join(parts))
        return True

    def report_runs(self, reports: Iterable[Run]) -> None:
        """Write a batch of runs into the benchmarks list."""
        reports = list(reports)
        if not reports:
            return
        if not self._first_report:
            self.out.write(",\n")
        self._first_report = False

        indent = " " * 4
        for position, run in enumerate(reports):
            self.out.write(indent + "{\n")
            self.print_run_data(run)
            self.out.write(indent + "}")
            if position != len(reports) - 1:
                self.out.write(",\n")

    def finalize(self) -> None:
        """Close the benchmarks list and the document."""
        self.out.write("\n  ]\n}\n")

    def print_run_data(self, run: Run) -> None:
        """Write the members of one run object."""
        is_aggregate = run.run_type is RunType.AGGREGATE
        fields = [
            format_kv("name", run.benchmark_name()),
            format_kv("family_index", int(run.family_index)),
            format_kv("per_family_instance_index", int(run.per_family_instance_index)),
            format_kv("run_name", run.run_name),
            format_kv("run_type", run.run_type.value),
            format_kv("repetitions", int(run.repetitions)),
        ]
        if not is_aggregate:
            fields.append(format_kv("repetition_index", int(run.repetition_index)))
        fields.append(format_kv("threads", int(run.threads)))
        if is_aggregate:
            fields.append(format_kv("aggregate_name", run.aggregate_name))
            fields.append(format_kv("aggregate_unit", run.aggregate_unit.value))
        if run.error_occurred:
            fields.append(format_kv("error_occurred", True))
            fields.append(format_kv("error_message", run.error_message))

        if not run.report_big_o and not run.report_rms:
            fields.append(format_kv("iterations", int(run.iterations)))
            if not is_aggregate or run.aggregate_unit is StatisticUnit.TIME:
                fields.append(format_kv("real_time", float(run.adjusted_real_time())))
                fields.append(format_kv("cpu_time", float(run.adjusted_cpu_time())))
            else:
                fields.append(format_kv("real_time", float(run.real_accumulated_time)))
                fields.append(format_kv("cpu_time", float(run.cpu_accumulated_time)))
            fields.append(format_kv("time_unit", run.time_unit.value))
        elif run.report_big_o:
            fields.append(format_kv("cpu_coefficient", float(run.adjusted_cpu_time())))
            fields.append(format_kv("real_coefficient", float(run.adjusted_real_time())))
            fields.append(format_kv("big_o", str(run.complexity)))
            fields.append(format_kv("time_unit", run.time_unit.value))
        else:
            fields.append(format_kv("rms", float(run.adjusted_cpu_time())))

        for name, value in sorted(run.counters.items()):
            fields.append(format_kv(name, float(value)))

        if run.memory_result is not None:
            memory = run.memory_result
            fields.append(format_kv("allocs_per_iter", float(run.allocs_per_iter)))
            fields.append(format_kv("max_bytes_used", int(memory.max_bytes_used)))
            for label, value in (
                ("total_allocated_bytes", memory.total_allocated_bytes),
                ("net_heap_growth", memory.net_heap_growth),
            ):
                if value != TOMBSTONE_VALUE:
                    fields.append(format_kv(label, int(value)))

        if run.report_label:
            fields.append(format_kv("label", run.report_label))

        indent = " " * 6
        self.out.write(",\n".join(indent + f for f in fields) + "\n")