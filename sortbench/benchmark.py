"""Timing a sorting algorithm on a private copy of the input."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from sortbench.stats import SortStats

SortFunction = Callable[[list[int], SortStats], object]


@dataclass(frozen=True)
class BenchmarkResult:
    """Wall-clock time in seconds and the counters gathered during one run."""

    elapsed: float
    stats: SortStats = field(default_factory=SortStats)


def benchmark_sort(sort_func: SortFunction, values: Sequence[int]) -> BenchmarkResult:
    """Run ``sort_func`` on a copy of ``values`` and time it.

    The input is never modified. The counters start from zero for each call.
    """
    work = list(values)
    stats = SortStats()
    start = time.perf_counter()
    sort_func(work, stats)
    elapsed = time.perf_counter() - start
    return BenchmarkResult(elapsed=elapsed, stats=stats)