"""Pair, triplet and quadruplet sums, and the maximum subarray sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of two values that add up to ``target``.

    The pair found first while scanning from the left is returned, with
    the smaller index first. ``None`` means no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct triplet, in ascending order, that sums to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[j] + values[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet, in ascending order, that sums to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j = i + 1
        while j < n:
            p, q = j + 1, n - 1
            while p < q:
                total = first + values[j] + values[p] + values[q]
                if total < target:
                    p += 1
                elif total > target:
                    q -= 1
                else:
                    result.append([first, values[j], values[p], values[q]])
                    p += 1
                    q -= 1
                    while p < q and values[p] == values[p - 1]:
                        p += 1
                    while p < q and values[q] == values[q + 1]:
                        q -= 1
            j += 1
            while j < n and values[j] == values[j - 1]:
                j += 1
    return result


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() requires a non-empty sequence")
    return best