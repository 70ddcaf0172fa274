"""Number theory and combinatorics: Catalan, totient, gcd, repunits, primes."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from typing import Any

SUPER_POW_MODULUS = 1337


def num_trees(n: int) -> int:
    """Number of structurally distinct binary search trees on n keys."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1] * (n + 1)
    for nodes in range(2, n + 1):
        counts[nodes] = sum(
            counts[root - 1] * counts[nodes - root] for root in range(1, nodes + 1)
        )
    return counts[n]


def phi(n: int) -> int:
    """Euler's totient: how many of 1..n are coprime with n."""
    if n < 1:
        raise ValueError("n must be positive")
    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1
    if n > 1:
        result -= result // n
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of the absolute values."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 when either argument is 0."""
    if a == 0 or b == 0:
        return 0
    return a // gcd(a, b) * b


def inclusion_exclusion(n: int, a: int, b: int, c: int) -> int:
    """How many of 1..n are divisible by a, b or c."""
    if min(a, b, c) <= 0:
        raise ValueError("divisors must be positive")
    ab, bc, ac = lcm(a, b), lcm(b, c), lcm(a, c)
    abc = lcm(a, bc)
    return n // a + n // b + n // c - n // ab - n // bc - n // ac + n // abc


def smallest_repunit_div_by_k(k: int) -> int:
    """Length of the shortest number made only of 1s that k divides; -1 if none."""
    if k < 1:
        raise ValueError("k must be positive")
    if k % 2 == 0 or k % 5 == 0:
        return -1
    remainder, length = 1 % k, 1
    seen: set[int] = set()
    while remainder != 0:
        remainder = (remainder * 10 + 1) % k
        length += 1
        if remainder in seen:
            return -1
        seen.add(remainder)
    return length


def super_pow(a: int, digits: Iterable[int]) -> int:
    """a raised to the exponent whose decimal digits are given, modulo 1337."""
    result = 1
    for digit in digits:
        result = pow(result, 10, SUPER_POW_MODULUS) * pow(a, digit, SUPER_POW_MODULUS)
        result %= SUPER_POW_MODULUS
    return result


def permute(nums: Sequence[Any]) -> list[list[Any]]:
    """Every ordering of nums, in the order positions are chosen by backtracking."""
    return [list(p) for p in itertools.permutations(nums)]


def count_primes(n: int) -> int:
    """Number of primes strictly less than n."""
    if n <= 2:
        return 0
    is_prime = [True] * n
    is_prime[0] = is_prime[1] = False
    for i in range(2, n):
        if is_prime[i]:
            is_prime[2 * i::i] = [False] * len(range(2 * i, n, i))
    return sum(is_prime)