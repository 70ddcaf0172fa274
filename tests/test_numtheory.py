import math
from itertools import product

import pytest

from dsakit.numtheory import (
    SUPER_POW_MODULUS,
    count_primes,
    gcd,
    inclusion_exclusion,
    lcm,
    num_trees,
    permute,
    phi,
    smallest_repunit_div_by_k,
    super_pow,
)


@pytest.mark.parametrize("n", range(0, 15))
def test_num_trees_is_catalan(n):
    assert num_trees(n) == math.comb(2 * n, n) // (n + 1)


def test_num_trees_rejects_negative():
    with pytest.raises(ValueError):
        num_trees(-1)


@pytest.mark.parametrize("n", range(1, 200))
def test_phi_counts_coprimes(n):
    assert phi(n) == sum(1 for i in range(1, n + 1) if math.gcd(i, n) == 1)


def test_phi_rejects_zero():
    with pytest.raises(ValueError):
        phi(0)


def test_gcd_and_lcm():
    for a, b in product(range(-12, 13), repeat=2):
        assert gcd(a, b) == math.gcd(a, b)
        if a and b:
            assert lcm(a, b) % a == 0 and lcm(a, b) % b == 0
            assert abs(lcm(a, b)) * gcd(a, b) == abs(a * b)
    assert lcm(0, 5) == 0


@pytest.mark.parametrize("n,a,b,c", [(10, 2, 3, 5), (100, 4, 6, 9), (57, 7, 7, 3), (1, 2, 3, 4)])
def test_inclusion_exclusion_matches_brute_force(n, a, b, c):
    expected = sum(1 for i in range(1, n + 1) if i % a == 0 or i % b == 0 or i % c == 0)
    assert inclusion_exclusion(n, a, b, c) == expected


def test_inclusion_exclusion_rejects_zero_divisor():
    with pytest.raises(ValueError):
        inclusion_exclusion(10, 0, 2, 3)


@pytest.mark.parametrize("k", [1, 3, 7, 9, 11, 13, 17, 21, 99])
def test_repunit_is_smallest_divisible(k):
    length = smallest_repunit_div_by_k(k)
    assert int("1" * length) % k == 0
    assert all(int("1" * shorter) % k for shorter in range(1, length))


@pytest.mark.parametrize("k", [2, 4, 5, 10, 25])
def test_repunit_impossible(k):
    assert smallest_repunit_div_by_k(k) == -1


@pytest.mark.parametrize("a,digits", [(2, [3]), (2, [1, 0]), (7, [1, 2, 3]), (2147483647, [2, 0, 0])])
def test_super_pow(a, digits):
    exponent = int("".join(map(str, digits)))
    assert super_pow(a, digits) == pow(a, exponent, SUPER_POW_MODULUS)


def test_super_pow_empty_exponent():
    assert super_pow(5, []) == 1


def test_permute():
    nums = [1, 2, 3, 4]
    result = permute(nums)
    assert len(result) == math.factorial(len(nums))
    assert len({tuple(p) for p in result}) == len(result)
    assert all(sorted(p) == nums for p in result)
    assert result[0] == nums
    assert result[-1] == nums[::-1]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 50, 101, 500])
def test_count_primes_matches_trial_division(n):
    def prime(m):
        return m > 1 and all(m % d for d in range(2, int(m**0.5) + 1))

    assert count_primes(n) == sum(1 for m in range(n) if prime(m))