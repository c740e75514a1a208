import pytest

from arraykata.numbers import (
    array_form_add,
    digit_sum,
    element_digit_difference,
    gcd_of_extremes,
    is_palindromic_array,
    is_smith_number,
    prime_factor_sum,
    primes_up_to,
    reverse_digits,
    single_number,
)


@pytest.mark.parametrize("prime", [3, 5, 7, 13, 97])
def test_prime_factor_sum_of_odd_prime_is_itself(prime):
    assert prime_factor_sum(prime) == prime


@pytest.mark.parametrize("p,q", [(3, 5), (7, 11), (13, 13)])
def test_prime_factor_sum_of_semiprime(p, q):
    assert prime_factor_sum(p * q) == p + q


def test_prime_factor_sum_drops_trailing_two():
    assert prime_factor_sum(2) == 0


@pytest.mark.parametrize("n", [1, 9, 45, 123, 98765])
def test_digit_sum_is_congruent_mod_nine(n):
    assert digit_sum(n) % 9 == n % 9
    assert digit_sum(n * 10) == digit_sum(n)


def test_digit_sum_of_non_positive_is_zero():
    assert digit_sum(0) == 0
    assert digit_sum(-15) == 0


def test_smith_number_source_example_is_not_smith():
    assert is_smith_number(13) is False


def test_square_of_two_equals_its_factor_sum_and_is_rejected():
    assert is_smith_number(4) is False


def test_gcd_of_extremes_source_example():
    assert gcd_of_extremes([2, 5, 6, 9, 10]) == 2


def test_gcd_of_extremes_falls_back_to_one():
    assert gcd_of_extremes([4, 6]) == 1


def test_gcd_of_extremes_single_value():
    assert gcd_of_extremes([7]) == 7


def test_gcd_of_extremes_empty_raises():
    with pytest.raises(ValueError):
        gcd_of_extremes([])


def test_primes_up_to_source_limit():
    result = primes_up_to(101)
    assert result[0] == 1
    assert result[-1] == 101
    assert result == sorted(result)
    for n in result[1:]:
        assert all(n % d for d in range(2, n))


def test_primes_up_to_small_limits():
    assert primes_up_to(0) == []
    assert primes_up_to(-5) == []
    assert primes_up_to(1) == [1]


def test_element_digit_difference_single_digits():
    assert element_digit_difference([1, 2, 3]) == 0


def test_element_digit_difference_is_multiple_of_nine():
    assert element_digit_difference([1, 15, 6, 3]) % 9 == 0
    assert element_digit_difference([1, 15, 6, 3]) > 0


def test_array_form_add_source_example():
    assert array_form_add([1, 2, 0, 0], 34) == [1, 2, 3, 4]


def test_array_form_add_zero_is_identity():
    assert array_form_add([4, 0, 7], 0) == [4, 0, 7]


def test_array_form_add_carries():
    assert array_form_add([9, 9], 1) == [1, 0, 0]


def test_array_form_add_zero_total_is_empty():
    assert array_form_add([0], 0) == []


def test_single_number_source_example():
    assert single_number([4, 1, 2, 1, 2]) == 4


def test_single_number_all_paired():
    assert single_number([7, 7, 3, 3]) == 0


@pytest.mark.parametrize("n", [12, 3456, 987])
def test_reverse_digits_round_trip(n):
    assert reverse_digits(reverse_digits(n)) == n


def test_reverse_digits_palindrome():
    assert reverse_digits(121) == 121


def test_is_palindromic_array_source_example():
    assert is_palindromic_array([121, 131, 20]) is False


def test_is_palindromic_array_true():
    assert is_palindromic_array([121, 131, 7]) is True