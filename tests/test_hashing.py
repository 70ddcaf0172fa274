import random

import pytest

from dsakit.hashing import (
    count_zero_sum_subarrays,
    find_anagrams,
    find_max_length,
    get_hint,
    is_anagram,
    is_isomorphic,
    longest_consecutive,
    longest_zero_sum_subarray,
)


def test_get_hint_example():
    assert get_hint("1807", "7810") == "1A3B"


@pytest.mark.parametrize("secret", ["1", "1234", "1123", "9999"])
def test_get_hint_identical(secret):
    assert get_hint(secret, secret) == f"{len(secret)}A0B"


@pytest.mark.parametrize("a,b", [("1123", "0111"), ("1807", "7810"), ("4455", "5544")])
def test_get_hint_symmetric(a, b):
    assert get_hint(a, b) == get_hint(b, a)


def test_get_hint_length_mismatch():
    with pytest.raises(ValueError):
        get_hint("123", "12")


def test_zero_sum_count_positive_values():
    assert count_zero_sum_subarrays([1, 2, 3, 4]) == 0


@pytest.mark.parametrize("values", [[1, 2, 3], [4, -1, 2], [0, 3, -3]])
def test_zero_sum_count_grows_with_balancing_tail(values):
    extended = values + [-sum(values)]
    assert count_zero_sum_subarrays(extended) >= count_zero_sum_subarrays(values) + 1


@pytest.mark.parametrize("values", [[1, 2, 3], [3, -3, 1], [0], [5, 1, -6, 2]])
def test_zero_sum_count_and_length_agree(values):
    has_count = count_zero_sum_subarrays(values) > 0
    has_length = longest_zero_sum_subarray(values) > 0
    assert has_count == has_length


def test_longest_zero_sum_whole_array():
    values = [3, -1, 2, -4]
    assert longest_zero_sum_subarray(values) == len(values)


def test_longest_zero_sum_empty():
    assert longest_zero_sum_subarray([]) == 0


def test_find_max_length_alternating():
    nums = [0, 1] * 3
    assert find_max_length(nums) == len(nums)


def test_find_max_length_all_ones():
    assert find_max_length([1, 1, 1]) == 0


@pytest.mark.parametrize("nums", [[0, 1, 1, 0, 1], [1, 1, 0], [0, 0, 0, 1, 1]])
def test_find_max_length_matches_signed_zero_sum(nums):
    signed = [1 if x else -1 for x in nums]
    assert find_max_length(nums) == longest_zero_sum_subarray(signed)


def test_longest_consecutive_example():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == 0


def test_longest_consecutive_shuffled_range_with_duplicates():
    values = list(range(5, 15))
    shuffled = values + values[:3]
    random.Random(7).shuffle(shuffled)
    assert longest_consecutive(shuffled) == len(values)


def test_find_anagrams_example():
    assert find_anagrams("cbaebabacd", "abc") == [0, 6]


@pytest.mark.parametrize("text,pattern", [("abab", "ab"), ("aaaa", "aa"), ("xyzzyx", "zyx")])
def test_find_anagrams_windows_are_anagrams(text, pattern):
    starts = find_anagrams(text, pattern)
    assert starts
    for start in starts:
        assert sorted(text[start:start + len(pattern)]) == sorted(pattern)


def test_find_anagrams_short_text():
    assert find_anagrams("ab", "abc") == []


def test_find_anagrams_pattern_is_text():
    assert find_anagrams("listen", "silent") == [0]


def test_is_isomorphic_self():
    assert is_isomorphic("paper", "paper") is True


def test_is_isomorphic_rejects_merge():
    assert is_isomorphic("ab", "aa") is False
    assert is_isomorphic("aa", "ab") is False


def test_is_isomorphic_length_mismatch():
    assert is_isomorphic("abc", "ab") is False


def test_is_isomorphic_relabelling():
    assert is_isomorphic("egg", "add") is True


def test_is_anagram_permutation():
    assert is_anagram("listen", "silent") is True


def test_is_anagram_rejects():
    assert is_anagram("ab", "ac") is False
    assert is_anagram("ab", "abb") is False