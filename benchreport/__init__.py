"""Data types for benchmark runs and a JSON reporter that writes them out."""

__version__ = "1.7.0"
__all__ = ["run", "json_reporter"]