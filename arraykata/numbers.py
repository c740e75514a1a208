"""Number-theoretic helpers: digit sums, factor sums, sieves and digit arrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def prime_factor_sum(num: int) -> int:
    """Sum of the prime factors of ``num``, counted with multiplicity.

    A remaining cofactor is only added when it is greater than 2, so
    ``prime_factor_sum(2)`` is 0.
    """
    total = 0
    divisor = 2
    while divisor * divisor <= num:
        while num % divisor == 0:
            total += divisor
            num //= divisor
        divisor += 1
    if num > 2:
        total += num
    return total


def digit_sum(num: int) -> int:
    """Sum of the decimal digits of a positive integer; 0 for ``num <= 0``."""
    total = 0
    while num > 0:
        num, digit = divmod(num, 10)
        total += digit
    return total


def is_smith_number(num: int) -> bool:
    """True when ``num`` is a composite whose digit sum equals that of its prime factors."""
    factors = prime_factor_sum(num)
    return digit_sum(num) == digit_sum(factors) and num != factors


def gcd_of_extremes(values: Iterable[int]) -> int:
    """Common divisor of the smallest and largest value, searched from the smallest up.

    Only candidates between the minimum and the maximum are tried; when none
    divides both, the result is 1.
    """
    items = list(values)
    if not items:
        raise ValueError("gcd_of_extremes() needs at least one value")
    low, high = min(items), max(items)
    candidates = (
        c for c in range(low, high + 1) if c and high % c == 0 and low % c == 0
    )
    return next(candidates, 1)


def primes_up_to(limit: int) -> list[int]:
    """Numbers from 1 to ``limit`` left unmarked by the sieve of Eratosthenes.

    The sieve never strikes out 1, so it leads the list.
    """
    if limit < 1:
        return []
    size = limit + 1
    keep = [True] * size
    keep[0] = False
    factor = 2
    while factor * factor < size:
        if keep[factor]:
            for multiple in range(factor * 2, size, factor):
                keep[multiple] = False
        factor += 1
    return [n for n, flag in enumerate(keep) if flag]


def element_digit_difference(values: Iterable[int]) -> int:
    """Absolute difference between the element sum and the digit sum of all elements."""
    items = list(values)
    element_total = sum(items)
    digit_total = sum(digit_sum(v) for v in items)
    return abs(element_total - digit_total)


def array_form_add(digits: Sequence[int], k: int) -> list[int]:
    """Add ``k`` to the number written by ``digits`` and return its digits.

    The result is most significant digit first; a non-positive total gives an
    empty list.
    """
    total = reduce(lambda acc, d: acc * 10 + d, digits, 0) + k
    if total <= 0:
        return []
    return [int(ch) for ch in str(total)]


def single_number(values: Iterable[int]) -> int:
    """The value that appears an odd number of times when all others are paired."""
    return reduce(xor, values, 0)


def reverse_digits(num: int) -> int:
    """Decimal digits of ``num`` in reverse order; 0 for ``num <= 0``."""
    result = 0
    while num > 0:
        num, digit = divmod(num, 10)
        result = result * 10 + digit
    return result


def is_palindromic_array(values: Iterable[int]) -> bool:
    """True when every element reads the same backwards."""
    return all(v == reverse_digits(v) for v in values)