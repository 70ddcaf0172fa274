"""Bit manipulation: bit tests, bit counts, XOR tricks, subsets and toggles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor
from typing import Any

_WORD_BITS = 32


def _check_position(k: int) -> None:
    if k < 1:
        raise ValueError("bit positions start at 1")


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def is_kth_bit_set(n: int, k: int) -> bool:
    """True when bit k of n is set, counting from 1 at the least significant bit."""
    _check_position(k)
    return n & (1 << (k - 1)) != 0


def is_power_of_two(n: int) -> bool:
    """True when n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def count_set_bits_upto(n: int) -> int:
    """Total number of set bits over all integers from 1 to n."""
    _check_non_negative(n)
    total = 0
    while n > 0:
        x = n.bit_length() - 1
        below = x * (1 << (x - 1)) if x > 0 else 0
        leading = n - (1 << x) + 1
        total += below + leading
        n -= 1 << x
    return total


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 to n."""
    _check_non_negative(n)
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = counts[i >> 1] + (i & 1)
    return counts


def find_duplicate(nums: Sequence[int]) -> int:
    """The repeated value among n+1 values drawn from 1..n, by cycle detection."""
    if len(nums) < 2 or not all(1 <= v < len(nums) for v in nums):
        raise ValueError("values must lie in 1..len(nums)-1")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def missing_number_xor(nums: Sequence[int]) -> int:
    """The one value of 0..n missing from n distinct numbers, found by XOR."""
    return reduce(xor, nums, reduce(xor, range(len(nums) + 1), 0))


def single_number(nums: Iterable[int]) -> int:
    """The value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def single_number_ii(nums: Sequence[int]) -> int:
    """The value that appears once when every other appears three times (32-bit)."""
    result = 0
    for bit in range(_WORD_BITS):
        mask = 1 << bit
        if sum(1 for value in nums if value & mask) % 3:
            result |= mask
    if result >= 1 << (_WORD_BITS - 1):
        result -= 1 << _WORD_BITS
    return result


def subsets(nums: Sequence[Any]) -> list[list[Any]]:
    """Every subset of nums, in the order of the bitmasks 0 .. 2**n - 1."""
    return [
        [value for i, value in enumerate(nums) if mask >> i & 1]
        for mask in range(1 << len(nums))
    ]


def toggle_bits_in_range(n: int, low: int, high: int) -> int:
    """n with bits low..high (1-based, inclusive) flipped."""
    _check_position(low)
    if high < low:
        return n
    mask = ((1 << (high - low + 1)) - 1) << (low - 1)
    return n ^ mask