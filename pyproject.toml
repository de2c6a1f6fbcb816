[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchreport"
version = "1.7.0"
description = "JSON reporting of micro-benchmark runs: context, per-run timings, aggregates, complexity fits, counters and memory statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "report", "json", "timing", "performance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["benchreport"]

[tool.pytest.ini_options]
addopts = "-ra"
