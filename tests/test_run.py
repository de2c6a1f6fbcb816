import pytest

from benchreport.run import (
    TOMBSTONE_VALUE,
    Complexity,
    MemoryResult,
    Run,
    RunType,
    StatisticUnit,
    TimeUnit,
)


@pytest.mark.parametrize(
    "unit, expected",
    [
        (TimeUnit.NANOSECOND, 1e9),
        (TimeUnit.MICROSECOND, 1e6),
        (TimeUnit.MILLISECOND, 1e3),
        (TimeUnit.SECOND, 1.0),
    ],
)
def test_time_unit_multiplier(unit, expected):
    assert unit.multiplier() == expected


@pytest.mark.parametrize(
    "text, expected",
    [("ns", 1e9), ("us", 1e6), ("ms", 1e3), ("s", 1.0)],
)
def test_time_unit_from_string(text, expected):
    unit = TimeUnit(text)
    assert unit.value == text
    assert unit.multiplier() == expected


@pytest.mark.parametrize(
    "complexity, text",
    [
        (Complexity.O_1, "(1)"),
        (Complexity.O_N, "N"),
        (Complexity.O_N_SQUARED, "N^2"),
        (Complexity.O_N_CUBED, "N^3"),
        (Complexity.O_LOG_N, "lgN"),
        (Complexity.O_N_LOG_N, "NlgN"),
        (Complexity.LAMBDA, "f(N)"),
        (Complexity.AUTO, "f(N)"),
        (Complexity.NONE, "f(N)"),
    ],
)
def test_big_o_strings(complexity, text):
    assert str(complexity) == text


def test_iteration_name_is_run_name():
    run = Run(run_name="BM_ExplicitRepetitions/repeats:2")
    assert run.benchmark_name() == "BM_ExplicitRepetitions/repeats:2"


@pytest.mark.parametrize("agg", ["mean", "median", "stddev"])
def test_aggregate_name_is_suffixed(agg):
    run = Run(
        run_name="BM_ImplicitRepetitions",
        run_type=RunType.AGGREGATE,
        aggregate_name=agg,
    )
    assert run.benchmark_name() == f"BM_ImplicitRepetitions_{agg}"


def test_adjusted_times_divide_by_iterations():
    run = Run(
        iterations=4,
        real_accumulated_time=2.0,
        cpu_accumulated_time=1.0,
        time_unit=TimeUnit.MILLISECOND,
    )
    assert run.adjusted_real_time() == pytest.approx(500.0)
    assert run.adjusted_cpu_time() == pytest.approx(250.0)


def test_adjusted_time_with_zero_iterations_is_not_divided():
    run = Run(iterations=0, real_accumulated_time=3.0, time_unit=TimeUnit.SECOND)
    assert run.adjusted_real_time() == 3.0


def test_memory_result_defaults_are_tombstones():
    result = MemoryResult(num_allocs=42, max_bytes_used=42000)
    assert result.total_allocated_bytes == TOMBSTONE_VALUE
    assert result.net_heap_growth == TOMBSTONE_VALUE
    assert TOMBSTONE_VALUE == 9223372036854775807


def test_run_defaults():
    run = Run()
    assert run.iterations == 1
    assert run.threads == 1
    assert run.run_type is RunType.ITERATION
    assert run.aggregate_unit is StatisticUnit.TIME
    assert run.time_unit is TimeUnit.NANOSECOND