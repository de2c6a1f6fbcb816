# benchreport

`benchreport` writes the results of micro-benchmark runs as a JSON document. It has two modules.

- `benchreport.run` holds the data that gets reported:
  - `Context` describes the machine: `host_name`, `executable_name`, `library_build_type` (`"release"` by default) and a `CPUInfo`. A `CPUInfo` holds `num_cpus`, `cycles_per_second`, a `CPUScaling` state, a list of `CacheInfo` entries and `load_avg`.
  - `Run` holds one benchmark result. Its fields include the name and indices, a `RunType` (iteration or aggregate), an aggregate name and `StatisticUnit`, iterations, threads, repetitions, accumulated real and CPU seconds, a `TimeUnit`, a `Complexity`, user `counters`, an optional `MemoryResult`, an error flag and message, and a label.
  - `Run.benchmark_name()` gives the run name. For aggregates it appends `_<aggregate_name>`.
  - `Run.adjusted_real_time()` and `Run.adjusted_cpu_time()` turn accumulated seconds into per-iteration times in the run's unit. `TimeUnit.multiplier()` gives the seconds-to-unit factor.
  - `str(Complexity.O_N_LOG_N)` gives the big-O text, here `"NlgN"`. `LAMBDA`, `AUTO` and `NONE` give `"f(N)"`.
  - In a `MemoryResult`, statistics left at `TOMBSTONE_VALUE` count as not measured.
- `benchreport.json_reporter.JSONReporter` writes a context block and the benchmark entries to a text stream. It writes to `sys.stdout` when no stream is given.

## Installation

```
pip install .
```

The `test` extra installs pytest, which the tests need:

```
pip install .[test]
```

## Usage

```python
import io
from benchreport.run import Context, Run
from benchreport.json_reporter import JSONReporter

out = io.StringIO()
reporter = JSONReporter(out, global_context={"compiler": "example"})
reporter.report_context(Context())
reporter.report_runs([Run()])
reporter.finalize()
print(out.getvalue())
```

Call the methods in this order: `report_context` once, `report_runs` once for each batch of runs, then `finalize`. Batches are separated by commas, so together they form a single `"benchmarks"` array.

## Output layout

The `"context"` object holds the following members, in this order:

- `date`: local time with its UTC offset.
- `host_name`.
- `executable`, only when an executable name is set.
- `num_cpus`.
- `mhz_per_cpu`: rounded half away from zero.
- `cpu_scaling_enabled`, only when scaling is not `UNKNOWN`.
- `caches`.
- `load_avg`.
- `library_build_type`.
- The `global_context` entries, sorted by key.

Each entry in `"benchmarks"` holds the following members:

- Always: `name`, `family_index`, `per_family_instance_index`, `run_name`, `run_type`, `repetitions` and `threads`.
- Only for iteration runs: `repetition_index`.
- Only for aggregates: `aggregate_name` and `aggregate_unit`.
- Only when an error occurred: `error_occurred` and `error_message`.
- For plain runs and aggregates: `iterations`, `real_time`, `cpu_time` and `time_unit`. Percentage aggregates report their accumulated values unscaled.
- For a big-O fit (`report_big_o`): `cpu_coefficient`, `real_coefficient`, `big_o` and `time_unit`.
- For an RMS fit (`report_rms`): `rms`.
- User counters, sorted by name.
- When a `MemoryResult` is present: `allocs_per_iter` and `max_bytes_used`, plus `total_allocated_bytes` and `net_heap_growth` when measured.
- `label`, when one is set.

Floats are written in scientific notation with 17 significant digits, such as `1.0000000000000000e+06`. NaN and infinities appear as `NaN`, `Infinity` and `-Infinity`.

The helpers `str_escape`, `format_kv` and `local_date_time_string` in `benchreport.json_reporter` write single key/value pairs and timestamps in the same style. `format_kv` accepts str, bool, int and float values and raises `TypeError` for anything else.

## What it does not do

`benchreport` only formats results that you have already measured:

- It does not register, time or run benchmarks.
- It does not compute aggregates or complexity fits.
- It does not detect CPU or cache information.
- It has no console or CSV output.
- It has no command-line program.