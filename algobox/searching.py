"""Searching in sequences: linear, binary, exponential, jump and Fibonacci search.

Every function returns the index of an element equal to ``target``, or -1
when there is none. All but :func:`linear_search` expect ascending input.
"""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt
from typing import Any

__all__ = [
    "binary_search",
    "exponential_search",
    "fibonacci_search",
    "jump_search",
    "linear_search",
]

NOT_FOUND = -1


def _binary_search_range(values: Sequence[Any], target: Any, low: int, high: int) -> int:
    """Binary search for ``target`` within ``values[low:high + 1]``."""
    while low <= high:
        middle = low + (high - low) // 2
        if values[middle] == target:
            return middle
        if values[middle] > target:
            high = middle - 1
        else:
            low = middle + 1
    return NOT_FOUND


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` in ascending ``values`` by repeated halving."""
    return _binary_search_range(values, target, 0, len(values) - 1)


def exponential_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` by doubling a bound, then binary searching below it."""
    size = len(values)
    if size == 0:
        return NOT_FOUND
    if values[0] == target:
        return 0
    bound = 1
    while bound < size and values[bound] <= target:
        bound *= 2
    return _binary_search_range(values, target, bound // 2, min(bound, size - 1))


def _fibonacci_numbers_reaching(n: int) -> list[int]:
    """Fibonacci numbers F0, F1, ... up to the first one that is >= n."""
    numbers = [0, 1]
    while numbers[-1] < n:
        numbers.append(numbers[-1] + numbers[-2])
    return numbers


def fibonacci_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` by splitting the range at Fibonacci offsets.

    The sequence is treated as if padded up to the next Fibonacci length
    with elements larger than ``target``.
    """
    size = len(values)
    fibs = _fibonacci_numbers_reaching(size)
    k = len(fibs) - 1 if size > 1 else 1
    offset = 0
    while k > 0:
        k -= 1
        index = offset + fibs[k]
        if index >= size or target < values[index]:
            continue
        if target > values[index]:
            offset = index
            k -= 1
        else:
            return index
    return NOT_FOUND


def jump_search(values: Sequence[Any], target: Any) -> int:
    """Find ``target`` by jumping ahead in blocks of about sqrt(n), then scanning."""
    size = len(values)
    if size == 0:
        return NOT_FOUND
    block = isqrt(size)
    previous, step = 0, block
    while values[min(step, size) - 1] < target:
        previous = step
        step += block
        if previous >= size:
            return NOT_FOUND
    for index in range(previous, min(step, size)):
        if values[index] == target:
            return index
        if values[index] > target:
            break
    return NOT_FOUND


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return NOT_FOUND