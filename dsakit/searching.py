"""Binary searches: bounds, rotated arrays and searches over the answer."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable, Sequence


def aggressive_cows(stalls: Iterable[int], cows: int) -> int:
    """Largest minimum gap at which cows can be placed in the stalls; 0 if none works."""
    positions = sorted(stalls)
    if not positions:
        raise ValueError("no stalls given")

    def fits(gap: int) -> bool:
        placed, last = 1, positions[0]
        for position in positions[1:]:
            if position - last >= gap:
                placed += 1
                last = position
        return placed >= cows

    low, high = 1, positions[-1] - positions[0]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """The first of versions 1..n that is bad; n when none is."""
    low, high = 1, n
    first = n
    while low <= high:
        mid = (low + high) // 2
        if is_bad_version(mid):
            first = mid
            high = mid - 1
        else:
            low = mid + 1
    return first


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Smallest bananas-per-hour speed that finishes every pile within hours."""
    if not piles:
        raise ValueError("no piles given")

    def finishes(speed: int) -> bool:
        return sum(-(-pile // speed) for pile in piles) <= hours

    low, high = 1, max(piles)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if finishes(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of target in a rotated sorted array of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """True when target is in a rotated sorted array that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def lower_bound(values: Sequence[int], target: int) -> int:
    """First index of a sorted sequence whose value is >= target."""
    return bisect.bisect_left(values, target)


def upper_bound(values: Sequence[int], target: int) -> int:
    """First index of a sorted sequence whose value is > target."""
    return bisect.bisect_right(values, target)