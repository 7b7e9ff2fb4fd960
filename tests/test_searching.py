import random

import pytest

from algobox.searching import (
    binary_search,
    exponential_search,
    fibonacci_search,
    jump_search,
    linear_search,
)

BINARY_EXAMPLE = [2, 5, 8, 12, 16, 23, 38, 56, 67, 78]
EXPONENTIAL_EXAMPLE = [2, 3, 4, 10, 40, 50, 60]
FIBONACCI_EXAMPLE = [1, 4, 5, 7, 9, 11, 13, 16, 18, 20, 25, 27, 30, 32, 33,
                     36, 39, 41, 44, 47, 51, 53, 55]
JUMP_EXAMPLE = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610]


def test_binary_search_worked_example():
    assert binary_search(BINARY_EXAMPLE, 23) == 5


@pytest.mark.parametrize("target", [2, 23, 78])
def test_sorted_searches_find_present_targets(target):
    expected = BINARY_EXAMPLE.index(target)
    assert binary_search(BINARY_EXAMPLE, target) == expected
    assert exponential_search(BINARY_EXAMPLE, target) == expected
    assert fibonacci_search(BINARY_EXAMPLE, target) == expected
    assert jump_search(BINARY_EXAMPLE, target) == expected


@pytest.mark.parametrize("target", [15, 100, 1, 0])
def test_absent_targets_give_minus_one(target):
    assert binary_search(BINARY_EXAMPLE, target) == -1
    assert exponential_search(BINARY_EXAMPLE, target) == -1
    assert fibonacci_search(BINARY_EXAMPLE, target) == -1
    assert jump_search(BINARY_EXAMPLE, target) == -1
    assert linear_search(BINARY_EXAMPLE, target) == -1


def test_empty_sequence():
    assert binary_search([], 7) == -1
    assert exponential_search([], 7) == -1
    assert fibonacci_search([], 7) == -1
    assert jump_search([], 7) == -1
    assert linear_search([], 7) == -1


def test_single_element():
    assert binary_search([9], 9) == 0
    assert binary_search([9], 4) == -1
    assert exponential_search([9], 9) == 0
    assert exponential_search([9], 4) == -1
    assert fibonacci_search([9], 9) == 0
    assert fibonacci_search([9], 4) == -1
    assert jump_search([9], 9) == 0
    assert jump_search([9], 4) == -1
    assert linear_search([9], 9) == 0
    assert linear_search([9], 4) == -1


def test_exponential_search_example():
    index = exponential_search(EXPONENTIAL_EXAMPLE, 10)
    assert EXPONENTIAL_EXAMPLE[index] == 10
    assert index == EXPONENTIAL_EXAMPLE.index(10)


def test_fibonacci_search_example():
    index = fibonacci_search(FIBONACCI_EXAMPLE, 30)
    assert FIBONACCI_EXAMPLE[index] == 30
    assert index == FIBONACCI_EXAMPLE.index(30)


@pytest.mark.parametrize("target", FIBONACCI_EXAMPLE)
def test_fibonacci_search_finds_every_element(target):
    assert fibonacci_search(FIBONACCI_EXAMPLE, target) == FIBONACCI_EXAMPLE.index(target)


def test_jump_search_example():
    index = jump_search(JUMP_EXAMPLE, 55)
    assert JUMP_EXAMPLE[index] == 55
    assert index == JUMP_EXAMPLE.index(55)


def test_jump_search_with_duplicates_hits_a_match():
    index = jump_search(JUMP_EXAMPLE, 1)
    assert JUMP_EXAMPLE[index] == 1


def test_linear_search_unsorted_input():
    values = [10, 50, 30, 70, 80, 60, 20, 90, 40]
    for key in values:
        assert linear_search(values, key) == values.index(key)
    assert linear_search(values, 35) == -1


def test_linear_search_returns_first_occurrence():
    values = [4, 7, 7, 7, 1]
    index = linear_search(values, 7)
    assert values[index] == 7
    assert 7 not in values[:index]


def _check_result(values, target, index):
    if target in values:
        assert values[index] == target
    else:
        assert index == -1


def test_random_sorted_lists_agree_with_membership():
    rng = random.Random(1234)
    for _ in range(200):
        values = sorted(rng.sample(range(0, 300), rng.randint(0, 40)))
        target = rng.randint(-5, 305)
        _check_result(values, target, binary_search(values, target))
        _check_result(values, target, exponential_search(values, target))
        _check_result(values, target, fibonacci_search(values, target))
        _check_result(values, target, jump_search(values, target))


def test_every_element_of_distinct_lists_is_found():
    for size in range(0, 30):
        values = list(range(0, 3 * size, 3))
        for position, value in enumerate(values):
            assert binary_search(values, value) == position
            assert exponential_search(values, value) == position
            assert fibonacci_search(values, value) == position
            assert jump_search(values, value) == position