"""Array algorithms: knapsack variants, Kadane, Moore voting, matrix product."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Item",
    "knapsack",
    "fractional_knapsack",
    "max_subarray_sum",
    "find_candidate",
    "majority_element",
    "multiply_matrices",
]


@dataclass(frozen=True)
class Item:
    """An item with a value and a weight, for the fractional knapsack."""

    value: int | float
    weight: int | float

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of a 0/1 knapsack of the given capacity."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def fractional_knapsack(capacity: int | float, items: Iterable[Item]) -> float:
    """Return the best total value when items may be taken in fractions."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    items = list(items)
    if any(item.weight <= 0 for item in items):
        raise ValueError("item weights must be positive")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda item: item.ratio, reverse=True):
        if remaining == 0:
            break
        if item.weight <= remaining:
            remaining -= item.weight
            total += item.value
        else:
            total += item.value * (remaining / item.weight)
            remaining = 0
    return total


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (0 if empty)."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        return 0
    best = current = first
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def find_candidate(values: Sequence[int]) -> int:
    """Return the Boyer-Moore voting candidate for the majority element."""
    if not values:
        raise ValueError("values must not be empty")
    candidate = values[0]
    count = 1
    for value in values[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    return candidate


def majority_element(values: Iterable[int]) -> int | None:
    """Return the element occurring more than n/2 times, or None."""
    items = list(values)
    if not items:
        return None
    candidate = find_candidate(items)
    return candidate if items.count(candidate) > len(items) // 2 else None


def multiply_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the matrix product ``first x second``."""
    inner = len(second)
    if any(len(row) != inner for row in first):
        raise ValueError("columns of the first matrix must equal rows of the second")
    widths = {len(row) for row in second}
    if len(widths) > 1:
        raise ValueError("rows of the second matrix must have equal length")
    columns = list(zip(*second))
    if not columns and inner == 0:
        return [[] for _ in first]
    return [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in first]