"""Counting and lookup problems solved with hash maps and sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def get_hint(secret: str, guess: str) -> str:
    """Bulls and cows hint in the form "xAyB".

    Bulls are matching characters in matching positions; cows are characters
    of the guess present elsewhere in the secret, each secret character used once.
    """
    if len(secret) != len(guess):
        raise ValueError("secret and guess must have the same length")
    bulls = 0
    remaining: Counter[str] = Counter()
    unmatched: list[str] = []
    for s, g in zip(secret, guess):
        if s == g:
            bulls += 1
        else:
            remaining[s] += 1
            unmatched.append(g)
    cows = 0
    for g in unmatched:
        if remaining[g] > 0:
            remaining[g] -= 1
            cows += 1
    return f"{bulls}A{cows}B"


def count_zero_sum_subarrays(values: Iterable[int]) -> int:
    """Number of contiguous subarrays whose sum is zero."""
    seen: Counter[int] = Counter({0: 1})
    running = 0
    total = 0
    for value in values:
        running += value
        total += seen[running]
        seen[running] += 1
    return total


def longest_zero_sum_subarray(values: Iterable[int]) -> int:
    """Length of the longest contiguous subarray whose sum is zero."""
    first_seen: dict[int, int] = {0: -1}
    running = 0
    best = 0
    for index, value in enumerate(values):
        running += value
        if running in first_seen:
            best = max(best, index - first_seen[running])
        else:
            first_seen[running] = index
    return best


def find_max_length(nums: Iterable[int]) -> int:
    """Length of the longest contiguous subarray with as many 0s as non-zeros."""
    return longest_zero_sum_subarray(-1 if value == 0 else 1 for value in nums)


def longest_consecutive(nums: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among nums, in any order."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        best = max(best, end - value + 1)
    return best


def find_anagrams(text: str, pattern: str) -> list[int]:
    """Start indices of every window of text that is an anagram of pattern."""
    size = len(pattern)
    if len(text) < size:
        return []
    need = Counter(pattern)
    window = Counter(text[:size])
    starts = [0] if window == need else []
    for start in range(1, len(text) - size + 1):
        leaving = text[start - 1]
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        window[text[start + size - 1]] += 1
        if window == need:
            starts.append(start)
    return starts


def is_isomorphic(first: Sequence[str], second: Sequence[str]) -> bool:
    """True when the characters of first map one-to-one onto those of second."""
    if len(first) != len(second):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(first, second):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def is_anagram(first: str, second: str) -> bool:
    """True when second is a rearrangement of first."""
    return len(first) == len(second) and Counter(first) == Counter(second)