import pytest

from sortbench.algorithms import quick_sort, selection_sort
from sortbench.benchmark import BenchmarkResult
from sortbench.cli import ALGORITHMS, Algorithm, format_result, main
from sortbench.stats import SortStats


def test_format_result_pinned():
    result = BenchmarkResult(elapsed=0.5, stats=SortStats(comparisons=3, swaps=2))
    assert format_result("Selection Sort", result) == (
        "Selection Sort         |   0.500000 s |"
        "               3 comparisons |               2 swaps"
    )


def test_format_result_fields():
    result = BenchmarkResult(elapsed=1.25, stats=SortStats(comparisons=42, swaps=17))
    line = format_result("Quick Sort", result)
    parts = [part.strip() for part in line.split("|")]
    assert parts == ["Quick Sort", "1.250000 s", "42 comparisons", "17 swaps"]
    assert line.index("|") == 23


def test_algorithm_names_in_order():
    assert [a.name for a in ALGORITHMS] == [
        "Selection Sort",
        "Insertion Sort",
        "Cocktail Shaker Sort",
        "Heap Sort",
        "Merge Sort",
        "Quick Sort",
    ]
    for algorithm in ALGORITHMS:
        data = [2, 1]
        stats = algorithm.sort_func(data, SortStats())
        assert data == [1, 2]
        assert stats.comparisons > 0


def test_algorithm_holds_function():
    algorithm = Algorithm("Quick Sort", quick_sort)
    assert algorithm.sort_func([3, 1, 2], SortStats()).comparisons > 0


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: ")
    assert "<input_file>" in out


def test_missing_file_reports_error(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 1
    err = capsys.readouterr().err
    assert f"Error loading input file: {missing}" in err


def test_benchmarks_every_algorithm(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("5 3 9 1 7\n2 8\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Benchmarking file: {path} (Elements: 7)"
    assert out[1] == ""
    rows = out[2:]
    assert len(rows) == len(ALGORITHMS)
    for row, algorithm in zip(rows, ALGORITHMS):
        assert row.startswith(f"{algorithm.name:<22} |")


def test_reported_counts_match_algorithm(tmp_path, capsys):
    data = [9, 4, 6, 1, 3]
    path = tmp_path / "input.txt"
    path.write_text(" ".join(map(str, data)))
    main([str(path)])
    first_row = capsys.readouterr().out.splitlines()[2]
    parts = [part.strip() for part in first_row.split("|")]
    expected = selection_sort(list(data), SortStats())
    assert parts[2] == f"{expected.comparisons} comparisons"
    assert parts[3] == f"{expected.swaps} swaps"


@pytest.mark.parametrize("contents", ["", "abc"])
def test_file_without_numbers(tmp_path, capsys, contents):
    path = tmp_path / "input.txt"
    path.write_text(contents)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Benchmarking file: {path} (Elements: 0)"
    assert all(row.endswith(" 0 swaps") for row in out[2:])