"""Command line entry point: benchmark every algorithm on one input file."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from sortbench.algorithms import (
    cocktail_shaker_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from sortbench.benchmark import BenchmarkResult, SortFunction, benchmark_sort
from sortbench.loader import load_ints


@dataclass(frozen=True)
class Algorithm:
    """A named sorting function to benchmark."""

    name: str
    sort_func: SortFunction


ALGORITHMS: tuple[Algorithm, ...] = (
    Algorithm("Selection Sort", selection_sort),
    Algorithm("Insertion Sort", insertion_sort),
    Algorithm("Cocktail Shaker Sort", cocktail_shaker_sort),
    Algorithm("Heap Sort", heap_sort),
    Algorithm("Merge Sort", merge_sort),
    Algorithm("Quick Sort", quick_sort),
)


def format_result(name: str, result: BenchmarkResult) -> str:
    """Render one line of the benchmark table."""
    return (
        f"{name:<22} | {result.elapsed:10.6f} s | "
        f"{result.stats.comparisons:15d} comparisons | "
        f"{result.stats.swaps:15d} swaps"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Benchmark every algorithm on the integers in the file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "sortbench"
        print(f"Usage: {program} <input_file>")
        return 1

    path = args[0]
    try:
        data = load_ints(path)
    except OSError as exc:
        print(f"Failed to open file: {exc.strerror or exc}", file=sys.stderr)
        print(f"Error loading input file: {path}", file=sys.stderr)
        return 1

    print(f"Benchmarking file: {path} (Elements: {len(data)})\n")

    for algorithm in ALGORITHMS:
        try:
            result = benchmark_sort(algorithm.sort_func, data)
        except MemoryError:
            print(f"{algorithm.name:<22}: Error during benchmark")
        else:
            print(format_result(algorithm.name, result))

    return 0


if __name__ == "__main__":
    sys.exit(main())