"""Classic comparison sorts; each returns a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly moving the smallest remaining element forward."""
    items = list(values)
    for i in range(len(items)):
        j = min(range(i, len(items)), key=items.__getitem__)
        if j != i:
            items[i], items[j] = items[j], items[i]
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by swapping neighbours, stopping early once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def _quick_sort(items: list[int], low: int, high: int) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while low < high:
        pivot = _partition(items, low, high)
        if pivot - low < high - pivot:
            _quick_sort(items, low, pivot - 1)
            low = pivot + 1
        else:
            _quick_sort(items, pivot + 1, high)
            high = pivot - 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))