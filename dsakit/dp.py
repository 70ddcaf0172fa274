"""Dynamic programming: Fibonacci, stairs, squares, coins, jumps and strings."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fib_memo(n: int) -> int:
    """The n-th Fibonacci number, computed top-down with a memo."""
    _check_non_negative(n)

    @lru_cache(maxsize=None)
    def fib(i: int) -> int:
        if i <= 1:
            return i
        return fib(i - 1) + fib(i - 2)

    # Filling the memo in increasing order keeps the recursion shallow.
    for i in range(n):
        fib(i)
    return fib(n)


def fib_tab(n: int) -> int:
    """The n-th Fibonacci number, computed bottom-up."""
    _check_non_negative(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the last step, starting on step 0 or 1 and climbing 1 or 2."""
    one_ahead = two_ahead = 0
    for step_cost in reversed(cost):
        one_ahead, two_ahead = step_cost + min(one_ahead, two_ahead), one_ahead
    return min(one_ahead, two_ahead)


def num_squares(n: int) -> int:
    """Fewest perfect squares that add up to n."""
    _check_non_negative(n)
    best = [0] + [math.inf] * n
    for total in range(1, n + 1):
        root = 1
        while root * root <= total:
            best[total] = min(best[total], best[total - root * root] + 1)
            root += 1
    return int(best[n])


def climb_stairs(n: int) -> int:
    """Number of ways to climb n steps taking 1 or 2 at a time."""
    _check_non_negative(n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins adding up to amount, each coin usable any number of times; -1 if impossible."""
    if not coins:
        raise ValueError("no coins given")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    _check_non_negative(amount)
    best = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        best[total] = min(
            (best[total - coin] + 1 for coin in coins if coin <= total),
            default=math.inf,
        )
    return -1 if best[amount] == math.inf else int(best[amount])


def min_jumps(nums: Sequence[int]) -> int:
    """Fewest jumps from the first to the last index; nums[i] is the longest jump from i.

    Raises ValueError when the last index cannot be reached.
    """
    if not nums:
        raise ValueError("no positions given")
    last = len(nums) - 1
    best = [math.inf] * len(nums)
    best[last] = 0
    for index in range(last - 1, -1, -1):
        reach = min(index + nums[index], last)
        best[index] = min(
            (best[target] + 1 for target in range(index + 1, reach + 1)),
            default=math.inf,
        )
    if best[0] == math.inf:
        raise ValueError("the last index is unreachable")
    return int(best[0])


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest sequence that is a subsequence of both strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindrome(text: str) -> str:
    """The longest palindromic substring.

    Among pairs of equal neighbours the last one wins; among longer
    palindromes of the same length the first one wins.
    """
    n = len(text)
    if n < 2:
        return text
    is_pal = [[False] * n for _ in range(n)]
    for i in range(n):
        is_pal[i][i] = True
    start, best = 0, 1
    for i in range(n - 1):
        if text[i] == text[i + 1]:
            is_pal[i][i + 1] = True
            start, best = i, 2
    for length in range(3, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if text[i] == text[j] and is_pal[i + 1][j - 1]:
                is_pal[i][j] = True
                if length > best:
                    start, best = i, length
    return text[start:start + best]