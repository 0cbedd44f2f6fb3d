"""In-place sorting algorithms that count the work they do."""

from __future__ import annotations

from sortbench.stats import SortStats


def _stats_or_new(stats: SortStats | None) -> SortStats:
    return SortStats() if stats is None else stats


def selection_sort(values: list[int], stats: SortStats | None = None) -> SortStats:
    """Sort ``values`` in place by repeatedly selecting the minimum."""
    stats = _stats_or_new(stats)
    size = len(values)
    for i in range(size - 1):
        min_idx = min(range(i, size), key=values.__getitem__)
        stats.comparisons += size - i - 1
        if min_idx != i:
            values[i], values[min_idx] = values[min_idx], values[i]
            stats.swaps += 1
    return stats


def insertion_sort(values: list[int], stats: SortStats | None = None) -> SortStats:
    """Sort ``values`` in place by insertion; each placement counts as a swap."""
    stats = _stats_or_new(stats)
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0:
            stats.comparisons += 1
            if values[j] > key:
                values[j + 1] = values[j]
                j -= 1
            else:
                break
        values[j + 1] = key
        stats.swaps += 1
    return stats


def cocktail_shaker_sort(values: list[int], stats: SortStats | None = None) -> SortStats:
    """Sort ``values`` in place with a bidirectional bubble sort."""
    stats = _stats_or_new(stats)
    if not values:
        return stats

    start = 0
    end = len(values) - 1

    while True:
        swapped = False
        last_swap = 0
        for i in range(start, end):
            stats.comparisons += 1
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                stats.swaps += 1
                swapped = True
                last_swap = i
        end = last_swap
        if not swapped:
            break

        swapped = False
        last_swap = 0
        for i in range(end - 1, start - 1, -1):
            stats.comparisons += 1
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                stats.swaps += 1
                swapped = True
                last_swap = i
        start = last_swap + 1
        if not swapped:
            break
    return stats


def heapify(
    values: list[int], length: int, index: int, stats: SortStats | None = None
) -> SortStats:
    """Sift ``values[index]`` down within the max-heap ``values[:length]``."""
    stats = _stats_or_new(stats)
    item = values[index]
    left = 2 * index + 1

    while left < length:
        right = left + 1
        if right < length:
            stats.comparisons += 1
            child = right if values[right] > values[left] else left
        else:
            child = left

        stats.comparisons += 1
        if values[child] <= item:
            break

        values[index] = values[child]
        stats.swaps += 1
        index = child
        left = 2 * index + 1

    if values[index] != item:
        values[index] = item
        stats.swaps += 1
    return stats


def heap_sort(values: list[int], stats: SortStats | None = None) -> SortStats:
    """Sort ``values`` in place with a max-heap."""
    stats = _stats_or_new(stats)
    size = len(values)
    if size == 0:
        return stats

    for i in reversed(range(size // 2)):
        heapify(values, size, i, stats)

    for end in range(size - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        stats.swaps += 1
        heapify(values, end, 0, stats)
    return stats


def _merge(
    source: list[int],
    target: list[int],
    left: int,
    mid: int,
    right: int,
    stats: SortStats,
) -> None:
    stats.merges += 1
    i, j, k = left, mid + 1, left
    while i <= mid and j <= right:
        stats.comparisons += 1
        if source[i] <= source[j]:
            target[k] = source[i]
            i += 1
        else:
            target[k] = source[j]
            j += 1
        k += 1
    rest = source[i : mid + 1] if i <= mid else source[j : right + 1]
    target[k : right + 1] = rest


def _merge_sort_into(
    source: list[int], target: list[int], left: int, right: int, stats: SortStats
) -> None:
    """Leave ``source[left:right+1]`` sorted in ``target``, using both lists alternately."""
    if left >= right:
        target[left] = source[left]
        return

    mid = left + (right - left) // 2
    _merge_sort_into(target, source, left, mid, stats)
    _merge_sort_into(target, source, mid + 1, right, stats)

    stats.comparisons += 1
    if source[mid] <= source[mid + 1]:
        target[left : right + 1] = source[left : right + 1]
        return

    _merge(source, target, left, mid, right, stats)


def merge_sort(values: list[int], stats: SortStats | None = None) -> SortStats:
    """Sort ``values`` in place with a top-down merge sort over one auxiliary list."""
    stats = _stats_or_new(stats)
    if not values:
        return stats
    stats.allocations += 1
    aux = list(values)
    _merge_sort_into(aux, values, 0, len(values) - 1, stats)
    return stats


def _swap(values: list[int], a: int, b: int, stats: SortStats) -> None:
    values[a], values[b] = values[b], values[a]
    stats.swaps += 1


def _median_of_three(values: list[int], low: int, high: int, stats: SortStats) -> int:
    mid = low + (high - low) // 2
    for a, b in ((low, mid), (low, high), (mid, high)):
        stats.comparisons += 1
        if values[a] > values[b]:
            _swap(values, a, b, stats)

    if mid != high and values[mid] != values[high]:
        _swap(values, mid, high, stats)
    return values[high]


def _partition(values: list[int], low: int, high: int, stats: SortStats) -> int:
    pivot = _median_of_three(values, low, high, stats)
    boundary = low
    for j in range(low, high):
        stats.comparisons += 1
        if values[j] < pivot:
            _swap(values, boundary, j, stats)
            boundary += 1
    _swap(values, boundary, high, stats)
    return boundary


def _quick_sort_range(values: list[int], low: int, high: int, stats: SortStats) -> None:
    while low < high:
        pivot_index = _partition(values, low, high, stats)
        if pivot_index - low < high - pivot_index:
            _quick_sort_range(values, low, pivot_index - 1, stats)
            low = pivot_index + 1
        else:
            _quick_sort_range(values, pivot_index + 1, high, stats)
            high = pivot_index - 1


def quick_sort(values: list[int], stats: SortStats | None = None) -> SortStats:
    """Sort ``values`` in place with median-of-three quicksort."""
    stats = _stats_or_new(stats)
    if values:
        _quick_sort_range(values, 0, len(values) - 1, stats)
    return stats