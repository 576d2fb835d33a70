"""Comparison sorts and quickselect."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] == right[j]:
            merged.append(left[i])
            merged.append(right[j])
            i += 1
            j += 1
        elif left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the items of ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[low]``.

    The pivot ends up at the returned index; everything before it in the
    range is not greater than it, everything after it is greater.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid range [{low}, {high}] for length {len(values)}")
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i <= high and values[i] <= pivot:
            i += 1
        while j >= low and values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def _sort_in_place(values: list[Any], partitioner) -> None:
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            split = partitioner(values, low, high)
            ranges.append((low, split - 1))
            ranges.append((split + 1, high))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list, using quicksort with the first item as pivot."""
    items = list(values)
    _sort_in_place(items, partition)
    return items


def _counting_partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    smaller_or_equal = sum(1 for item in values[low : high + 1] if item <= pivot)
    position = low + smaller_or_equal - 1
    values[position], values[low] = values[low], values[position]
    i, j = low, high
    while i < position and j > position:
        while i < position and values[i] <= pivot:
            i += 1
        while j > position and values[j] > pivot:
            j -= 1
        if i < position and j > position:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    return position


def quick_sort_counting(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list, placing each pivot by counting smaller items."""
    items = list(values)
    _sort_in_place(items, _counting_partition)
    return items


def find_kth_largest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th largest item (k counts from 1) using quickselect."""
    items = list(values)
    n = len(items)
    if not 1 <= k <= n:
        raise ValueError(f"k must be between 1 and {n}, got {k}")
    wanted = n - k
    low, high = 0, n - 1
    while low < high:
        split = partition(items, low, high)
        if split == wanted:
            return items[split]
        if split > wanted:
            high = split - 1
        else:
            low = split + 1
    return items[wanted]