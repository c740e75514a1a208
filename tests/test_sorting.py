import random

import pytest

from arraykata.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

CASES = [
    [],
    [1],
    [4, 1, 3, 9, 7],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, 3, 3],
    [2, -1, 0, -7, 2, 5, -1],
]


@pytest.mark.parametrize("data", CASES)
def test_sorts_match_builtin(data):
    expected = sorted(data)
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected


def test_sorts_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        expected = sorted(data)
        assert insertion_sort(data) == expected
        assert selection_sort(data) == expected
        assert bubble_sort(data) == expected
        assert quick_sort(data) == expected
        assert merge_sort(data) == expected


def test_sorts_leave_input_untouched():
    data = [4, 1, 3, 9, 7]
    results = [
        insertion_sort(data),
        selection_sort(data),
        bubble_sort(data),
        quick_sort(data),
        merge_sort(data),
    ]
    assert data == [4, 1, 3, 9, 7]
    for result in results:
        assert result is not data
        assert result == [1, 3, 4, 7, 9]


def test_sorts_accept_iterables():
    results = [
        insertion_sort(iter([4, 1, 3, 9, 7])),
        selection_sort(iter([4, 1, 3, 9, 7])),
        bubble_sort(iter([4, 1, 3, 9, 7])),
        quick_sort(iter([4, 1, 3, 9, 7])),
        merge_sort(iter([4, 1, 3, 9, 7])),
    ]
    for result in results:
        assert result == [1, 3, 4, 7, 9]


def test_quick_sort_handles_long_sorted_input():
    data = list(range(3000))
    assert quick_sort(data) == data
    assert quick_sort(reversed(data)) == data