import pytest

from dsakit.bits import (
    count_bits,
    count_set_bits_upto,
    find_duplicate,
    is_kth_bit_set,
    is_power_of_two,
    missing_number_xor,
    single_number,
    single_number_ii,
    subsets,
    toggle_bits_in_range,
)


@pytest.mark.parametrize("k", range(1, 12))
def test_kth_bit_of_power_of_two(k):
    value = 2 ** (k - 1)
    assert is_kth_bit_set(value, k)
    assert not any(is_kth_bit_set(value, j) for j in range(1, 14) if j != k)


def test_kth_bit_rejects_zero_position():
    with pytest.raises(ValueError):
        is_kth_bit_set(5, 0)


def test_power_of_two():
    powers = {2**k for k in range(12)}
    for n in range(-5, 3000):
        assert is_power_of_two(n) == (n in powers)


def test_count_bits_matches_binary_digits():
    counts = count_bits(300)
    assert len(counts) == 301
    assert all(c == bin(i).count("1") for i, c in enumerate(counts))


def test_count_bits_rejects_negative():
    with pytest.raises(ValueError):
        count_bits(-1)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 8, 17, 64, 100, 1023, 1024])
def test_count_set_bits_upto_agrees_with_count_bits(n):
    assert count_set_bits_upto(n) == sum(count_bits(n))


def test_count_set_bits_upto_rejects_negative():
    with pytest.raises(ValueError):
        count_set_bits_upto(-3)


@pytest.mark.parametrize("dup", [1, 3, 5])
def test_find_duplicate(dup):
    nums = [2, 4, 1, 5, 3]
    nums.insert(2, dup)
    assert find_duplicate(nums) == dup


def test_find_duplicate_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_duplicate([0, 1, 1])


@pytest.mark.parametrize("gone", range(8))
def test_missing_number_xor(gone):
    nums = [v for v in reversed(range(8)) if v != gone]
    assert missing_number_xor(nums) == gone


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([7, -3, 7]) == -3


def test_single_number_ii():
    assert single_number_ii([2, 2, 3, 2]) == 3
    assert single_number_ii([-4, -4, 9, -4]) == 9
    assert single_number_ii([5, -7, 5, 5]) == -7


def test_subsets_cover_power_set():
    nums = [1, 2, 3, 4]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert result[0] == []
    assert result[-1] == nums
    assert len({tuple(s) for s in result}) == len(result)
    for subset in result:
        assert [v for v in nums if v in subset] == subset


def test_toggle_round_trip():
    for n in (0, 5, 123, 4096):
        assert toggle_bits_in_range(toggle_bits_in_range(n, 2, 6), 2, 6) == n


def test_toggle_from_zero_sets_range():
    result = toggle_bits_in_range(0, 3, 7)
    assert all(is_kth_bit_set(result, k) == (3 <= k <= 7) for k in range(1, 12))


def test_toggle_rejects_zero_position():
    with pytest.raises(ValueError):
        toggle_bits_in_range(5, 0, 2)