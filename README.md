# sortbench

Run six classic sorting algorithms over the same list of integers and see how
long each takes, along with the number of comparisons and swaps it made.

The algorithms, in the order they are run:

- Selection Sort
- Insertion Sort
- Cocktail Shaker Sort
- Heap Sort
- Merge Sort (top-down, one auxiliary list)
- Quick Sort (median-of-three pivot)

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Put whitespace-separated integers in a text file and pass it to `sortbench`:

```
sortbench numbers.txt
```

The command reads integers from the start of the file and stops at the first
token that is not an integer. Every algorithm sorts its own copy of the data,
and the output has one line per algorithm. Each line gives the name, the
elapsed time in seconds, the number of comparisons and the number of swaps:

```
Benchmarking file: numbers.txt (Elements: 1000)

Selection Sort         |   0.041230 s |          499500 comparisons |             993 swaps
...
```

If no file is given, a usage line is printed and the exit status is 1. A file
that cannot be opened gives an error message on standard error and exit
status 1 as well. If an algorithm runs out of memory, its line reads
`Error during benchmark` and the remaining algorithms still run.

## Library use

```python
from sortbench.algorithms import heap_sort, quick_sort
from sortbench.benchmark import benchmark_sort
from sortbench.loader import load_ints, parse_ints
from sortbench.stats import SortStats

values = parse_ints("5 3 9 1 7")

stats = SortStats()
data = list(values)
heap_sort(data, stats)          # sorts in place
print(data, stats.comparisons, stats.swaps)

result = benchmark_sort(quick_sort, values)   # sorts a copy
print(result.elapsed, result.stats.comparisons)
```

### `sortbench.algorithms`

`selection_sort`, `insertion_sort`, `cocktail_shaker_sort`, `heap_sort`,
`merge_sort` and `quick_sort` each take a mutable list of integers and an
optional `SortStats`. They sort the list in place, add to the counters and
return the `SortStats` they used (a new one if none was given).
`heapify(values, length, index, stats)` sifts one element down within the
max-heap `values[:length]`.

Insertion sort counts each placement of an element as one swap.

### `sortbench.stats`

`SortStats` is a dataclass with the counters `comparisons`, `swaps`,
`merges`, `heapify_calls`, `recursion_depth` and `allocations`, all starting
at zero. `SortStats.reset()` sets them all back to zero. Every algorithm
updates `comparisons` and `swaps`; merge sort also updates `merges` and
`allocations`. No algorithm updates `heapify_calls` or `recursion_depth`;
those fields stay at zero unless you set them.

### `sortbench.benchmark`

`benchmark_sort(sort_func, values)` runs `sort_func` on a copy of `values`
with fresh counters and returns a frozen `BenchmarkResult` holding `elapsed`
(wall-clock seconds) and `stats`. The input is left unchanged.

### `sortbench.loader`

`parse_ints(text)` returns the leading integers of a string, stopping at the
first token that is not an integer. `load_ints(path)` reads a file and parses
it the same way; it raises `OSError` if the file cannot be read.

### `sortbench.cli`

`main(argv=None)` is the `sortbench` command and returns its exit status.
`format_result(name, result)` renders one line of the table, and `ALGORITHMS`
lists the `Algorithm` entries (a name and a sort function) that are run.