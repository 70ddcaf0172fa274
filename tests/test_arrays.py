import pytest

from dsakit.arrays import (
    asteroid_collision,
    highest_freq_char,
    intersection,
    max_area,
    max_profit,
    merge_sorted,
    missing_number,
    set_matrix_zeros,
    sort_colors,
    trap,
    two_sum,
)


def _is_subsequence(small, big):
    it = iter(big)
    return all(any(x == y for y in it) for x in small)


def test_asteroids_all_moving_right_survive():
    assert asteroid_collision([1, 2, 3]) == [1, 2, 3]


def test_asteroids_moving_apart_survive():
    assert asteroid_collision([-1, -2, 3]) == [-1, -2, 3]


def test_equal_asteroids_destroy_each_other():
    assert asteroid_collision([8, -8]) == []


@pytest.mark.parametrize(
    "rocks",
    [[5, 10, -5], [10, 2, -5], [1, -2, -2, -2], [-2, -1, 1, 2], [3, 4, -10, 6, -1]],
)
def test_no_collisions_remain(rocks):
    result = asteroid_collision(rocks)
    assert _is_subsequence(result, rocks)
    assert not any(a > 0 > b for a, b in zip(result, result[1:]))


def test_profit_is_achievable_and_nonnegative():
    prices = [7, 1, 5, 3, 6, 4]
    result = max_profit(prices)
    options = {prices[j] - prices[i] for i in range(len(prices)) for j in range(i + 1, len(prices))}
    assert result >= 0
    assert result in options | {0}
    assert all(result >= option for option in options)


def test_profit_increasing_prices():
    prices = [1, 2, 3, 4]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_profit_zero_when_falling_or_empty():
    assert max_profit([5, 4, 3]) == max_profit([]) == max_profit([9])
    assert max_profit([]) <= max_profit([1, 2])


@pytest.mark.parametrize("depth", [1, 2, 5])
def test_trap_single_valley(depth):
    assert trap([depth, 0, depth]) == depth


def test_trap_known_example():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trap_is_mirror_invariant():
    heights = [4, 2, 0, 3, 2, 5]
    assert trap(heights) == trap(heights[::-1])
    assert trap([]) == trap([1, 2, 3])


@pytest.mark.parametrize(
    ("nums", "target"), [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)]
)
def test_two_sum_indices_add_up(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_pair_raises():
    with pytest.raises(ValueError):
        two_sum([1, 2, 3], 100)


def test_max_area_two_lines():
    a, b = 4, 9
    assert max_area([a, b]) == min(a, b)


def test_max_area_known_example():
    assert max_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


@pytest.mark.parametrize(
    ("first", "second"), [([1, 2, 3], [2, 5, 6]), ([], [1]), ([4, 4], []), ([1, 3], [1, 3])]
)
def test_merge_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


def test_sort_colors_in_place():
    nums = [2, 0, 2, 1, 1, 0]
    original = list(nums)
    assert sort_colors(nums) is None
    assert nums == sorted(original)


def test_highest_freq_char():
    assert highest_freq_char("aabbbc") == "b"
    assert highest_freq_char("") == " "


def test_intersection_invariants():
    first, second = [1, 2, 2, 3, 7], [7, 2, 9, 2, 1]
    result = intersection(first, second)
    assert set(result) == set(first) & set(second)
    assert len(result) == len(set(result))
    assert result == sorted(result, key=second.index)


@pytest.mark.parametrize("removed", [0, 3, 6])
def test_missing_number(removed):
    nums = [x for x in range(7) if x != removed]
    assert missing_number(nums) == removed


def test_set_matrix_zeros_invariants():
    matrix = [[1, 2, 3], [4, 0, 6], [7, 8, 9]]
    result = set_matrix_zeros(matrix)
    assert matrix[1][1] == 0 and matrix[0][0] == 1
    assert result[1] == [0, 0, 0]
    assert [row[1] for row in result] == [0, 0, 0]
    for i in (0, 2):
        for j in (0, 2):
            assert result[i][j] == matrix[i][j]