import pytest

from algodrills.arrays import (
    is_rotated_sorted,
    majority_element,
    max_profit,
    merge_intervals,
    merge_sorted,
    missing_number,
    move_zeroes,
    rearrange_by_sign,
    rotate,
    single_number,
    sort_colors,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([3, 4, 5, 1, 2], True),
        ([1, 2, 3], True),
        ([1, 1, 1], True),
        ([2, 1, 3, 4], False),
        ([5], True),
    ],
)
def test_is_rotated_sorted(nums, expected):
    assert is_rotated_sorted(nums) is expected


def test_is_rotated_sorted_every_rotation():
    base = [1, 2, 2, 4, 7, 9]
    for shift in range(len(base)):
        assert is_rotated_sorted(base[shift:] + base[:shift]) is True


def test_is_rotated_sorted_empty_raises():
    with pytest.raises(ValueError):
        is_rotated_sorted([])


def test_majority_element_worked_example():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_single():
    assert majority_element([7]) == 7


def test_majority_element_empty():
    assert majority_element([]) == 0


def test_merge_sorted_worked_example():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_empty_second():
    nums1 = [4, 8]
    merge_sorted(nums1, 2, [], 0)
    assert nums1 == [4, 8]


def test_merge_sorted_no_room_raises():
    with pytest.raises(ValueError):
        merge_sorted([1, 0], 1, [2, 3], 2)


def test_merge_intervals_worked_example():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [
        [1, 6],
        [8, 10],
        [15, 18],
    ]


def test_merge_intervals_touching_and_unsorted():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


def test_merge_intervals_does_not_mutate_input():
    intervals = [[1, 3], [2, 6]]
    merge_intervals(intervals)
    assert intervals == [[1, 3], [2, 6]]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


def test_missing_number_worked_example():
    assert missing_number([0, 1, 2, 4, 5]) == 3


@pytest.mark.parametrize("gone", range(9))
def test_missing_number_finds_each_gap(gone):
    nums = [value for value in range(9) if value != gone]
    assert missing_number(nums) == gone


def test_move_zeroes_keeps_order():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_invariants():
    original = [4, 0, 0, -2, 7, 0, 5, 0]
    nums = list(original)
    move_zeroes(nums)
    assert sorted(nums) == sorted(original)
    nonzero = [value for value in original if value != 0]
    assert nums[: len(nonzero)] == nonzero
    assert all(value == 0 for value in nums[len(nonzero):])


def test_rearrange_by_sign_worked_example():
    assert rearrange_by_sign([3, 1, -2, -5, 2, -4]) == [3, -2, 1, -5, 2, -4]


def test_rearrange_by_sign_zero_counts_as_positive():
    assert rearrange_by_sign([-1, 0]) == [0, -1]


def test_rearrange_by_sign_odd_length():
    assert rearrange_by_sign([5, -1, 6]) == [5, -1, 6]


def test_rearrange_by_sign_unbalanced_raises():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, -3, 4])


def test_rotate_worked_example():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 3)
    assert nums == [5, 6, 7, 1, 2, 3, 4]


def test_rotate_wraps_large_k():
    a = [1, 2, 3, 4, 5]
    b = list(a)
    rotate(a, 2)
    rotate(b, 2 + 3 * len(b))
    assert a == b


def test_rotate_full_cycle_restores():
    nums = [9, 8, 7]
    rotate(nums, 0)
    assert nums == [9, 8, 7]
    rotate(nums, 3)
    assert nums == [9, 8, 7]


def test_rotate_empty_is_noop():
    nums = []
    rotate(nums, 4)
    assert nums == []


def test_single_number_worked_example():
    assert single_number([2, 3, 5, 4, 5, 3, 4]) == 2


def test_single_number_negative():
    assert single_number([-6, 1, 1]) == -6


@pytest.mark.parametrize(
    "nums",
    [[2, 0, 2, 1, 1, 0], [2, 0, 1], [0], [1, 1, 1], [2, 2, 0, 0, 1, 2, 0]],
)
def test_sort_colors_sorts(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_empty():
    nums = []
    sort_colors(nums)
    assert nums == []


def test_max_profit_worked_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_rising_prices():
    prices = [1, 3, 8, 10]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])