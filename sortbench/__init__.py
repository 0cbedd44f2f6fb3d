"""Classic sorting algorithms with operation counters, timing and a benchmark command."""

__version__ = "0.1.0"