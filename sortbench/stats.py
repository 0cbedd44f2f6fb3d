"""Counters collected while a sorting algorithm runs."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class SortStats:
    """Operation counters filled in by the sorting algorithms."""

    comparisons: int = 0
    swaps: int = 0
    merges: int = 0
    heapify_calls: int = 0
    recursion_depth: int = 0
    allocations: int = 0

    def reset(self) -> None:
        """Set every counter back to zero."""
        for field in fields(self):
            setattr(self, field.name, 0)