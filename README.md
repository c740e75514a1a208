# arraykata

A small collection of classic array and number exercises, written as plain
Python functions that take sequences of integers and return new values. No
function changes the list it is given.

## Modules

- `arraykata.numbers` holds digit and prime puzzles: `prime_factor_sum`,
  `digit_sum`, `is_smith_number`, `gcd_of_extremes`, `primes_up_to` (a sieve
  of Eratosthenes), `element_digit_difference`, `array_form_add`,
  `single_number`, `reverse_digits` and `is_palindromic_array`.
- `arraykata.stats` holds summaries of a list: `mean`, `product_mod`,
  `product_sign`, `second_largest`, `two_smallest`, `average_salary`,
  `immediate_smaller`, `largest_at_least_twice`, `kids_with_candies`,
  `leaders`, `average_even_divisible_by_three` and `duplicates`.
- `arraykata.arrange` holds rearrangements: `zero_sum_array`,
  `alternate_signs`, `move_negatives_to_end`, `reversed_array`, `rotate_left`,
  `block_swap_rotate` and `merge_sorted`.
- `arraykata.sorting` holds `insertion_sort`, `selection_sort`,
  `bubble_sort`, `quick_sort` and `merge_sort`. Each returns a new ascending
  list.
- `arraykata.cli` holds the `arraykata` command.

## Installation

```
pip install arraykata
```

To run the tests, install the `test` extra and run pytest:

```
pip install "arraykata[test]"
pytest
```

## Usage

```python
from arraykata.sorting import insertion_sort, merge_sort
from arraykata.stats import mean, second_largest, duplicates
from arraykata.arrange import reversed_array, merge_sorted, rotate_left
from arraykata.numbers import digit_sum, single_number, is_smith_number

insertion_sort([4, 1, 3, 9, 7])          # [1, 3, 4, 7, 9]
merge_sort([4, 1, 3, 9, 7])              # [1, 3, 4, 7, 9]
mean([1, 3, 4, 2, 6, 5, 8, 7])           # 4.5
second_largest([12, 35, 1, 10, 34, 1])   # 34
duplicates([2, 3, 1, 2, 3])              # [2, 3]
reversed_array([5, 7, 8, 1, 6, 3])       # [3, 6, 1, 8, 7, 5]
rotate_left([1, 2, 3, 4, 5], 2)          # [3, 4, 5, 1, 2]
merge_sorted([1, 2, 3], [2, 5, 6])       # [1, 2, 2, 3, 5, 6]
digit_sum(1234)                          # 10
single_number([4, 1, 2, 1, 2])           # 4
```

## Behaviour worth knowing

Several functions keep the exact rules of the exercise rather than the
textbook definition:

- `primes_up_to(limit)` returns the numbers the sieve leaves unmarked, so the
  list starts with 1.
- `prime_factor_sum` only adds a leftover cofactor greater than 2, so
  `prime_factor_sum(2)` is 0.
- `second_largest` starts its running maxima at 0, so only positive values
  count; it returns -1 when there is no second largest value.
- `two_smallest` returns a pair whose second item is `None` when every value
  equals the minimum.
- `gcd_of_extremes` looks for a common divisor of the smallest and largest
  value only among the numbers between them, and returns 1 if none is found.
- `immediate_smaller` gives, for each element, the next element if it is
  smaller and -1 otherwise; the last element always gets -1.
- `leaders` lists the leaders from right to left.
- `block_swap_rotate` raises `ValueError` when the rotation is outside
  `0..len(values)`; `rotate_left` accepts any rotation and wraps it.
- `mean`, `two_smallest` and `largest_at_least_twice` raise `ValueError` on an
  empty input, `average_salary` needs at least three salaries, and
  `average_even_divisible_by_three` raises `ValueError` when no value is
  divisible by six.

## Command line

Installing the package also installs the `arraykata` command, which runs three
of the exercises on integers given as arguments:

```
arraykata mean 1 3 4 2
arraykata sort --algorithm quick 4 1 3 9 7
arraykata duplicates 2 3 1 2 3
```

- `mean` prints `mean: <value>`.
- `sort` prints the sorted values separated by commas. `--algorithm` is one of
  `bubble`, `insertion` (the default), `merge`, `quick` or `selection`.
- `duplicates` prints the repeated values in order of first appearance, or
  nothing when there are none.

When no values are given, each subcommand runs on a built-in sample list. The
other functions are available only from Python, not from the command. To see
the options, run:

```
arraykata --help
```