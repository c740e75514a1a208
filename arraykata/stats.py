"""Summary statistics and simple selections over integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import prod

DEFAULT_MODULUS = 1_000_000_007


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _non_empty(values: Iterable[int], name: str) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{name}() needs at least one value")
    return items


def mean(values: Iterable[int]) -> float:
    """Arithmetic mean of the values."""
    items = _non_empty(values, "mean")
    return sum(items) / len(items)


def product_mod(values: Iterable[int], modulus: int = DEFAULT_MODULUS) -> int:
    """Product of the values, remainder taken toward zero."""
    total = prod(values)
    remainder = abs(total) % modulus
    return -remainder if total < 0 else remainder


def product_sign(values: Iterable[int]) -> int:
    """Sign of the product: 1, -1 or 0."""
    negatives = 0
    for value in values:
        if value == 0:
            return 0
        if value < 0:
            negatives += 1
    return -1 if negatives % 2 else 1


def second_largest(values: Iterable[int]) -> int:
    """Largest value strictly below the maximum, or -1 if there is none.

    Both running maxima start at 0, so only positive values take part.
    """
    largest = second = 0
    for value in values:
        if largest < value:
            second, largest = largest, value
        if second < value < largest:
            second = value
    return second if second < largest else -1


def two_smallest(values: Iterable[int]) -> tuple[int, int | None]:
    """The smallest value and the smallest value strictly above it.

    The second item is None when every value equals the minimum.
    """
    items = _non_empty(values, "two_smallest")
    smallest: int | None = None
    second: int | None = None
    for value in items:
        if smallest is None or value < smallest:
            second, smallest = smallest, value
        if (second is None or value < second) and value > smallest:
            second = value
    assert smallest is not None
    return smallest, second


def average_salary(salaries: Iterable[int]) -> int:
    """Average salary leaving out one minimum and one maximum, truncated."""
    items = list(salaries)
    if len(items) < 3:
        raise ValueError("average_salary() needs at least three salaries")
    remaining = sum(items) - min(items) - max(items)
    return _trunc_div(remaining, len(items) - 2)


def immediate_smaller(values: Sequence[int]) -> list[int]:
    """For each element, the next element if it is smaller, else -1."""
    followers = list(values[1:])
    return [
        nxt if nxt < cur else -1 for cur, nxt in zip(values, followers)
    ] + ([-1] if values else [])


def largest_at_least_twice(values: Iterable[int]) -> int:
    """1 when the maximum is at least twice every other element, else -1."""
    items = _non_empty(values, "largest_at_least_twice")
    top = max(items)
    others = list(items)
    others.remove(top)
    return -1 if any(v * 2 > top for v in others) else 1


def kids_with_candies(candies: Iterable[int], extra: int) -> list[bool]:
    """Whether each kid would have the most candies after receiving ``extra``."""
    items = list(candies)
    if not items:
        return []
    top = max(items)
    return [c + extra >= top for c in items]


def leaders(values: Sequence[int]) -> list[int]:
    """Elements not smaller than anything to their right, listed right to left."""
    result: list[int] = []
    for value in reversed(values):
        if not result or value >= result[-1]:
            result.append(value)
    return result


def average_even_divisible_by_three(values: Iterable[int]) -> int:
    """Truncated average of the values divisible by six."""
    chosen = [v for v in values if v % 6 == 0]
    if not chosen:
        raise ValueError("no value is divisible by six")
    return _trunc_div(sum(chosen), len(chosen))


def duplicates(values: Iterable[int]) -> list[int]:
    """Values occurring more than once, in order of first appearance."""
    return [value for value, count in Counter(values).items() if count > 1]