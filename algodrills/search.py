"""Searching drills: binary searches over rotated arrays and matrices."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def find_rotated_minimum(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("find_rotated_minimum() needs at least one value")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def search_flat_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix that is sorted when read row by row."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, width)
        element = matrix[row][col]
        if element == target:
            return True
        if element < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def search_rotated(values: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in a rotated ascending sequence, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= key < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < key <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns both ascend."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        element = matrix[row][col]
        if element == target:
            return True
        if element < target:
            row += 1
        else:
            col -= 1
    return False


def search_insert_position(nums: Sequence[int], target: int) -> int:
    """Return where ``target`` is, or where it would go to keep ``nums`` sorted."""
    return bisect_left(nums, target)