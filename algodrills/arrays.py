"""Array drills: subarray maxima, in-place rearrangements and scans."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate, groupby


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one value")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return best


def _running_products(values: Iterable[int]) -> Iterator[int]:
    running = 1
    for value in values:
        running *= value
        yield running
        if running == 0:
            running = 1


def max_product_subarray(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_product_subarray() needs at least one value")
    return max(
        max(_running_products(nums)),
        max(_running_products(reversed(nums))),
    )


def max_water_area(heights: Sequence[int]) -> int:
    """Return the most water two of the lines can hold between them."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] > heights[right]:
            right -= 1
        else:
            left += 1
    return best


def trapped_rain_water(heights: Sequence[int]) -> int:
    """Return the units of water trapped between the bars after rain."""
    if not heights:
        return 0
    left_max = accumulate(heights, max)
    right_max = reversed(list(accumulate(reversed(heights), max)))
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def merge_in_place(target: list[int], source: Sequence[int]) -> None:
    """Merge sorted ``source`` into sorted ``target``, extending ``target``.

    Where values are equal, those already in ``target`` come first.
    """
    target[:] = list(heapq.merge(target, source))


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` into its next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    if len(nums) < 2:
        return
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(
        i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot]
    )
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted ``nums`` to its front.

    Returns how many there are; the slots after them are left as they were.
    """
    distinct = [value for value, _ in groupby(nums)]
    nums[:len(distinct)] = distinct
    return len(distinct)


def repeat_and_missing(nums: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeated, missing)`` for values meant to be 1..n.

    A component that cannot be found is 0.
    """
    size = len(nums)
    if any(not 0 <= value <= size for value in nums):
        raise ValueError(f"values must lie between 1 and {size}")
    counts = Counter(nums)
    repeated = missing = 0
    for value in range(1, size + 1):
        if counts[value] == 0:
            missing = value
        elif counts[value] == 2:
            repeated = value
    return repeated, missing


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1


def three_way_partition(values: list[int], low: int, high: int) -> None:
    """Partition in place: below ``low``, then within range, then above ``high``."""
    index, left, right = 0, 0, len(values) - 1
    while index <= right:
        if values[index] < low:
            values[index], values[left] = values[left], values[index]
            left += 1
            index += 1
        elif values[index] > high:
            values[index], values[right] = values[right], values[index]
            right -= 1
        else:
            index += 1


def min_swaps_to_group(values: Sequence[int], k: int) -> int:
    """Return the fewest swaps that bring all values ``<= k`` together."""
    too_big = [value > k for value in values]
    width = len(too_big) - sum(too_big)
    window = sum(too_big[:width])
    best = window
    for leaving, entering in zip(too_big, too_big[width:]):
        window += entering - leaving
        best = min(best, window)
    return best


def common_elements(
    a: Sequence[int], b: Sequence[int], c: Sequence[int]
) -> list[int]:
    """Return the distinct values found in all three sorted sequences."""
    shared: set[int] = set()
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            shared.add(a[i])
            i += 1
            j += 1
        elif a[i] > b[j]:
            j += 1
        else:
            i += 1
    result: list[int] = []
    for value in c:
        if value in shared and (not result or result[-1] != value):
            result.append(value)
    return result


def is_subset(superset: Iterable[int], subset: Iterable[int]) -> bool:
    """Tell whether ``subset`` fits in ``superset``, counting repeats."""
    return not Counter(subset) - Counter(superset)


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(values)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the longest stretch of non-zero entries."""
    return max(
        (sum(1 for _ in group) for nonzero, group in groupby(nums, bool) if nonzero),
        default=0,
    )


def min_jumps(steps: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last position.

    Each entry is the longest jump allowed from there; -1 means the end
    cannot be reached.
    """
    last = len(steps) - 1
    position = jumps = 0
    while position < last:
        reach = steps[position]
        if reach <= 0:
            return -1
        if reach == 1:
            jumps += 1
            position += 1
            continue
        if position + reach >= last:
            return jumps + 1
        position = max(
            range(position + 1, position + reach + 1),
            key=lambda k: k + steps[k],
        )
        jumps += 1
    return jumps