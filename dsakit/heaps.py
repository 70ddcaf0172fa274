"""Selection and windowing problems solved with heaps and deques."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Sequence
from typing import Any


def _check_rank(nums: Sequence[Any], k: int) -> None:
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}")


def find_kth_largest(nums: Sequence[Any], k: int) -> Any:
    """The k-th largest value, counting duplicates, using a size-k min-heap."""
    _check_rank(nums, k)
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if heap[0] < value:
            heapq.heapreplace(heap, value)
    return heap[0]


def find_kth_smallest(nums: Sequence[Any], k: int) -> Any:
    """The k-th smallest value, counting duplicates, using a min-heap."""
    _check_rank(nums, k)
    heap = list(nums)
    heapq.heapify(heap)
    for _ in range(k - 1):
        heapq.heappop(heap)
    return heap[0]


def max_sliding_window(nums: Sequence[Any], k: int) -> list[Any]:
    """The maximum of every window of k consecutive values."""
    if k < 1:
        raise ValueError("window size must be positive")
    window: deque[int] = deque()
    result: list[Any] = []
    for index, value in enumerate(nums):
        if window and window[0] == index - k:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(index)
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def top_k_frequent(nums: Sequence[Any], k: int) -> list[Any]:
    """The k most frequent values, most frequent first; ties in first-seen order."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(nums)
    if k > len(counts):
        raise ValueError("k exceeds the number of distinct values")
    ranked = sorted(counts, key=lambda value: -counts[value])
    return ranked[:k]