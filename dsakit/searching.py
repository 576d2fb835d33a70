"""Binary searches over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of some element equal to ``target``, or None.

    ``values`` must be sorted in non-decreasing order.
    """
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        current = values[mid]
        if current == target:
            return mid
        if current < target:
            start = mid + 1
        else:
            end = mid - 1
    return None


def first_occurrence(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the smallest index holding ``target``, or None if absent."""
    start, end = 0, len(values) - 1
    found: Optional[int] = None
    while start <= end:
        mid = start + (end - start) // 2
        current = values[mid]
        if current == target:
            found = mid
            end = mid - 1
        elif current < target:
            start = mid + 1
        else:
            end = mid - 1
    return found


def last_occurrence(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the largest index holding ``target``, or None if absent."""
    start, end = 0, len(values) - 1
    found: Optional[int] = None
    while start <= end:
        mid = start + (end - start) // 2
        current = values[mid]
        if current == target:
            found = mid
            start = mid + 1
        elif current < target:
            start = mid + 1
        else:
            end = mid - 1
    return found