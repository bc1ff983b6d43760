"""Everyday array exercises: rotation checks, merging, rearranging and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def is_rotated_sorted(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a rotation of a non-decreasing sequence."""
    if not nums:
        raise ValueError("is_rotated_sorted() requires a non-empty sequence")
    breaks = sum(1 for before, after in zip(nums, nums[1:]) if before > after)
    if nums[-1] > nums[0]:
        breaks += 1
    return breaks <= 1


def majority_element(nums: Iterable[int]) -> int:
    """Return the majority candidate found by Boyer-Moore voting (0 if empty)."""
    candidate = 0
    votes = 0
    for value in nums:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Copy the first ``n`` values of ``nums2`` into ``nums1`` from index ``m``, then sort ``nums1`` in place."""
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    nums1[m : m + n] = nums2[:n]
    nums1.sort()


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def missing_number(nums: Sequence[int]) -> int:
    """Return the value of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Interleave non-negative and negative values, non-negative first.

    Each group keeps its order. The counts must fit the alternating
    layout exactly, otherwise ``ValueError`` is raised.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != (len(nums) + 1) // 2:
        raise ValueError("values cannot alternate by sign")
    result = [0] * len(nums)
    result[0::2] = positives
    result[1::2] = negatives
    return result


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    n = len(nums)
    if n == 0:
        return
    k %= n
    nums[:] = nums[n - k :] + nums[: n - k]


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with one Dutch-flag pass.

    Any value other than 0 or 1 is treated like 2.
    """
    red, white, blue = 0, 0, len(nums) - 1
    while white <= blue:
        if nums[white] == 0:
            nums[white], nums[red] = nums[red], nums[white]
            red += 1
            white += 1
        elif nums[white] == 1:
            white += 1
        else:
            nums[white], nums[blue] = nums[blue], nums[white]
            blue -= 1


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if not prices:
        raise ValueError("max_profit() requires at least one price")
    lowest = prices[0]
    profit = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        profit = max(profit, price - lowest)
    return profit