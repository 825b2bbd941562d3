import io
import random

import pytest

from parlab.sorting import (
    bubble_sort,
    format_array,
    main,
    merge_sort,
    parallel_bubble_sort,
    parallel_merge_sort,
)

CASES = [
    [],
    [7],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 4, 4],
    [-3, 10, 0, -3, 7, 1, 1],
    list(range(10, 0, -1)),
    list(range(12)),
]


@pytest.mark.parametrize("values", CASES)
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert parallel_bubble_sort(values) == expected
    assert merge_sort(values) == expected
    assert parallel_merge_sort(values) == expected


def test_random_input():
    rng = random.Random(1234)
    values = [rng.randint(-1000, 1000) for _ in range(257)]
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert parallel_bubble_sort(values) == expected
    assert merge_sort(values) == expected
    assert parallel_merge_sort(values) == expected


def test_input_left_untouched():
    values = [3, 1, 2]
    assert bubble_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]
    assert parallel_bubble_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]
    assert merge_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]
    assert parallel_merge_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_accepts_iterables():
    assert bubble_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert parallel_bubble_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert merge_sort(iter((9, 8, 7))) == [7, 8, 9]
    assert parallel_merge_sort(iter((9, 8, 7))) == [7, 8, 9]


def test_merge_sort_is_stable():
    result = merge_sort([1.0, 1, 0])
    assert [type(v) for v in result] == [int, float, int]


def test_parallel_merge_sort_is_stable():
    result = parallel_merge_sort([1.0, 1, 0])
    assert [type(v) for v in result] == [int, float, int]


def test_format_array_trailing_spaces():
    assert format_array([3, 1], "Sorted") == "Sorted: 3 1 "
    assert format_array([], "Empty") == "Empty: "


def test_main_prints_each_algorithm(monkeypatch, capsys):
    values = [5, -2, 9, 0]
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n5 -2 9 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    for label in (
        "Sequential Bubble Sorted array",
        "Parallel Bubble Sorted array",
        "Sequential Merge Sorted array",
        "Parallel Merge Sorted array",
    ):
        assert format_array(sorted(values), label) in out
    assert "Starting parallel merge sort..." in out
    assert out.count("Time taken:") == 4


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1
    assert "missing input" in capsys.readouterr().err