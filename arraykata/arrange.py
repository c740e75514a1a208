"""Rearrangements of integer arrays: rotations, partitions, merges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from heapq import merge


def zero_sum_array(size: int) -> list[int]:
    """Distinct integers of the given count that add up to zero.

    Pairs ``k, -k`` fill the ends.  For an odd size the middle holds ``size``
    and the element just before it is lowered by ``size`` to compensate.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 1:
        return [0]
    half = size // 2
    left = list(range(1, half + 1))
    right = [-k for k in reversed(left)]
    if size % 2:
        left[-1] -= size
        return left + [size] + right
    return left + right


def alternate_signs(values: Iterable[int]) -> list[int]:
    """Interleave non-negative and negative values, starting with a non-negative one.

    Relative order within each sign is kept; whatever is left over from the
    longer group is appended at the end.
    """
    items = list(values)
    positives = [v for v in items if v >= 0]
    negatives = [v for v in items if v < 0]
    result: list[int] = []
    for pos, neg in zip(positives, negatives):
        result.extend((pos, neg))
    result.extend(positives[len(negatives):])
    result.extend(negatives[len(positives):])
    return result


def move_negatives_to_end(values: Iterable[int]) -> list[int]:
    """Non-negative values first, then negative ones, each group in original order."""
    items = list(values)
    return [v for v in items if v >= 0] + [v for v in items if v < 0]


def reversed_array(values: Iterable[int]) -> list[int]:
    """The values in reverse order."""
    return list(reversed(list(values)))


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Rotate the values ``d`` places to the left."""
    items = list(values)
    if not items:
        return []
    shift = d % len(items)
    return items[shift:] + items[:shift]


def _swap_blocks(items: list[int], a: int, b: int, size: int) -> None:
    items[a:a + size], items[b:b + size] = items[b:b + size], items[a:a + size]


def block_swap_rotate(values: Sequence[int], d: int) -> list[int]:
    """Rotate left by ``d`` places using the block swap algorithm.

    ``d`` must lie between 0 and the number of values.
    """
    items = list(values)
    n = len(items)
    if not 0 <= d <= n:
        raise ValueError(f"rotation {d} is outside 0..{n}")
    if d in (0, n):
        return items
    i, j = d, n - d
    while i != j:
        if i < j:
            _swap_blocks(items, d - i, d + j - i, i)
            j -= i
        else:
            _swap_blocks(items, d - i, d, j)
            i -= j
    _swap_blocks(items, d - i, d, j)
    return items


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    return list(merge(first, second))