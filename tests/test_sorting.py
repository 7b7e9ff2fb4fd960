import random

import pytest

from algobox.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    is_sorted,
    merge,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_INPUTS = [
    [64, 34, 25, 12, 22, 11, 90, 5],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [3, 1, 4, 1, 5, 9, 2, 6, 5],
    [4, 2, 5, 3, 1],
    [64, 25, 12, 22, 11],
    [12, 11, 13, 5, 6, 7],
    [4, 2, 5, 1, 3],
]


def test_merge_sort_documented_example():
    values = [64, 34, 25, 12, 22, 11, 90, 5]
    expected = [5, 11, 12, 22, 25, 34, 64, 90]
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_source_inputs_sorted(values):
    expected = sorted(values)
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected


def test_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        values = [rng.randint(-100, 100) for _ in range(rng.randint(0, 40))]
        expected = sorted(values)
        assert merge_sort(values) == expected
        assert quick_sort(values) == expected
        assert selection_sort(values) == expected
        assert bubble_sort(values) == expected
        assert heap_sort(values) == expected
        assert insertion_sort(values) == expected


def test_does_not_mutate_input():
    values = [3, 1, 4, 1, 5, 9, 2, 6, 5]
    snapshot = list(values)
    assert merge_sort(values) == sorted(snapshot)
    assert values == snapshot
    assert quick_sort(values) == sorted(snapshot)
    assert values == snapshot
    assert selection_sort(values) == sorted(snapshot)
    assert values == snapshot
    assert bubble_sort(values) == sorted(snapshot)
    assert values == snapshot
    assert heap_sort(values) == sorted(snapshot)
    assert values == snapshot
    assert insertion_sort(values) == sorted(snapshot)
    assert values == snapshot


@pytest.mark.parametrize("values", [[], [7]])
def test_trivial_inputs(values):
    assert merge_sort(values) == values
    assert quick_sort(values) == values
    assert selection_sort(values) == values
    assert bubble_sort(values) == values
    assert heap_sort(values) == values
    assert insertion_sort(values) == values


def test_accepts_any_iterable():
    expected = [1, 2, 3, 4, 5]
    source = (5, 4, 3, 2, 1)
    assert merge_sort(iter(source)) == expected
    assert quick_sort(iter(source)) == expected
    assert selection_sort(iter(source)) == expected
    assert bubble_sort(iter(source)) == expected
    assert heap_sort(iter(source)) == expected
    assert insertion_sort(iter(source)) == expected


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected
    assert bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected


def test_merge_two_sorted_lists():
    left, right = [1, 4, 7, 9], [2, 3, 8]
    assert merge(left, right) == [1, 2, 3, 4, 7, 8, 9]


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __le__(self, other):
        return self.key <= other.key

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key


def test_merge_sort_is_stable():
    items = [_Keyed(2, "a"), _Keyed(1, "b"), _Keyed(2, "c"), _Keyed(1, "d"), _Keyed(2, "e")]
    result = merge_sort(items)
    assert [item.tag for item in result] == ["b", "d", "a", "c", "e"]


def test_merge_prefers_left_on_ties():
    left = [_Keyed(1, "left")]
    right = [_Keyed(1, "right")]
    assert [item.tag for item in merge(left, right)] == ["left", "right"]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4, 5], True),
        ([5, 4, 3, 2, 1], False),
        ([1, 1, 2, 2], True),
        ([], True),
        ([42], True),
    ],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_output_is_sorted_permutation():
    values = [3, 1, 4, 1, 5, 9, 2, 6, 5]
    results = [
        merge_sort(values),
        quick_sort(values),
        selection_sort(values),
        bubble_sort(values),
        heap_sort(values),
        insertion_sort(values),
    ]
    for result in results:
        assert is_sorted(result)
        assert sorted(result) == sorted(values)