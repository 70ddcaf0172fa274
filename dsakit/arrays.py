"""Array and matrix problems solved with stacks, two pointers and hashing."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Asteroids left after all collisions.

    Positive values move right, negative values move left. When two meet,
    the smaller one explodes; equal sizes destroy each other.
    """
    survivors: list[int] = []
    for rock in asteroids:
        while survivors and rock < 0 < survivors[-1]:
            if survivors[-1] < -rock:
                survivors.pop()
                continue
            if survivors[-1] == -rock:
                survivors.pop()
            break
        else:
            survivors.append(rock)
    return survivors


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none is positive."""
    lowest: int | None = None
    best = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def trap(heights: Sequence[int]) -> int:
    """Units of rain water held between the bars."""
    if not heights:
        return 0
    left_max = accumulate(heights, max)
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - h for left, right, h in zip(left_max, right_max, heights)
    )


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int]:
    """Indices (i, j), i < j, of the first pair found that adds up to target.

    Raises ValueError when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        need = target - value
        if need in seen:
            return seen[need], index
        seen[value] = index
    raise ValueError("no pair found")


def max_area(heights: Sequence[int]) -> int:
    """Largest amount of water a container formed by two of the lines can hold."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list.

    Equal values from first come before those from second.
    """
    return list(heapq.merge(first, second))


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass.

    Any value other than 0 or 1 is treated like 2.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def highest_freq_char(text: str) -> str:
    """The most frequent character; ties go to the one seen first, ' ' for empty text."""
    common = Counter(text).most_common(1)
    return common[0][0] if common else " "


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Distinct values of second that also occur in first, in second's order."""
    pending = set(first)
    result: list[int] = []
    for value in second:
        if value in pending:
            result.append(value)
            pending.discard(value)
    return result


def missing_number(nums: Sequence[int]) -> int:
    """The one value of 0..n missing from n distinct numbers."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def set_matrix_zeros(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """A copy of matrix where every row and column holding a 0 is all zeros."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]