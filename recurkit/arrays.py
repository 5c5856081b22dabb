"""Array algorithms: merge sort and zig-zag arrangement."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Sequence[Any]) -> list[Any]:
    """Return a stably sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def zig_zag(values: Sequence[Any]) -> list[Any]:
    """Return ``values`` rearranged so that a0 <= a1 >= a2 <= a3 >= ...

    Each adjacent pair that breaks the pattern is swapped in a single pass.
    """
    result = list(values)
    for j in range(1, len(result)):
        i = j - 1
        rising = j % 2 == 1
        if (rising and result[i] > result[j]) or (not rising and result[i] < result[j]):
            result[i], result[j] = result[j], result[i]
    return result