"""Classic comparison sorts.

Every function takes any iterable of mutually comparable values and returns
a new ascending list; the input is never modified.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, MutableSequence
from itertools import pairwise
from typing import Any

__all__ = [
    "merge",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "is_sorted",
]


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``left`` comes first, so the merge is stable.
    """
    pending_left, pending_right = deque(left), deque(right)
    merged: list[Any] = []
    while pending_left and pending_right:
        source = pending_left if pending_left[0] <= pending_right[0] else pending_right
        merged.append(source.popleft())
    merged.extend(pending_left)
    merged.extend(pending_right)
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by recursive halving and merging (stable, O(n log n))."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its first element."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the first element of each range as pivot."""
    items = list(values)
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            ranges.append((low, pivot_index - 1))
            ranges.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining element forward."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _sift_down(items: MutableSequence[Any], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` in ``items[:size]``."""
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def is_sorted(values: Iterable[Any]) -> bool:
    """Return True if the values are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))