"""Binary searches over sorted, rotated and two-dimensional data."""

from __future__ import annotations

import math
from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1 if absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target``, or where it would be inserted to keep ``nums`` sorted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return left


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return True
        if nums[mid] == nums[left]:
            left += 1
            continue
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
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


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of a value larger than its neighbours, or -1 if none is found."""
    n = len(nums)
    if n == 0:
        raise ValueError("find_peak_element() requires a non-empty sequence")
    if n == 1:
        return 0
    if nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid - 1] < nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted sequence of pairs."""
    n = len(nums)
    if n == 0:
        raise ValueError("single_non_duplicate() requires a non-empty sequence")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    start, end = 1, n - 2
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] != nums[mid - 1] and nums[mid] != nums[mid + 1]:
            return nums[mid]
        if mid % 2 == 0:
            if nums[mid] == nums[mid + 1]:
                start = mid + 2
            else:
                end = mid - 1
        elif nums[mid] == nums[mid - 1]:
            start = mid + 1
        else:
            end = mid - 1
    if start >= n:
        raise ValueError("no value appears exactly once")
    return nums[start]


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    if n1 + n2 == 0:
        raise ValueError("find_median_sorted_arrays() requires at least one value")
    low, high = 0, n1
    half = (n1 + n2 + 1) // 2
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        max_left1 = nums1[cut1 - 1] if cut1 > 0 else -math.inf
        min_right1 = nums1[cut1] if cut1 < n1 else math.inf
        max_left2 = nums2[cut2 - 1] if cut2 > 0 else -math.inf
        min_right2 = nums2[cut2] if cut2 < n2 else math.inf
        if max_left1 <= min_right2 and max_left2 <= min_right1:
            left = max(max_left1, max_left2)
            if (n1 + n2) % 2 == 0:
                return (left + min(min_right1, min_right2)) / 2.0
            return float(left)
        if max_left1 > min_right2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted")


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows, read one after another, form one sorted run."""
    rows = len(matrix)
    if rows == 0:
        return False
    cols = len(matrix[0])
    low, high = 0, rows * cols - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending."""
    rows = len(matrix)
    if rows == 0:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if target == value:
            return True
        if target < value:
            col -= 1
        else:
            row += 1
    return False