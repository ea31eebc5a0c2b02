"""Selection drills: triplets, top-k queries and ordering by concatenation."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key


def three_sum(nums: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triplet of values that sums to zero."""
    ordered = sorted(nums)
    last = len(ordered) - 1
    triplets: list[tuple[int, int, int]] = []
    for i, first in enumerate(ordered[:-2]):
        if i and first == ordered[i - 1]:
            continue
        low, high = i + 1, last
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total == 0:
                triplets.append((first, ordered[low], ordered[high]))
                while low < high and ordered[high] == ordered[high - 1]:
                    high -= 1
                high -= 1
            elif total > 0:
                high -= 1
            else:
                low += 1
    return triplets


def has_triplet_with_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether three of the values (at distinct positions) sum to ``target``."""
    ordered = sorted(values)
    for i, first in enumerate(ordered[:-2]):
        low, high = i + 1, len(ordered) - 1
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total == target:
                return True
            if total < target:
                low += 1
            else:
                high -= 1
    return False


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first."""
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must lie between 0 and {len(counts)}, got {k}")
    return [value for value, _ in counts.most_common(k)]


def _check_rank(values: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"k must lie between 1 and {len(values)}, got {k}")


def kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value (1 is the maximum)."""
    _check_rank(nums, k)
    return heapq.nlargest(k, nums)[-1]


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest value (1 is the minimum)."""
    _check_rank(values, k)
    return heapq.nsmallest(k, values)[-1]


def _concatenation_order(left: str, right: str) -> int:
    forward, backward = left + right, right + left
    if forward > backward:
        return -1
    if forward < backward:
        return 1
    return 0


def largest_concatenation(numbers: Iterable[str]) -> str:
    """Arrange decimal strings so that joined together they are the largest."""
    pieces = sorted(numbers, key=cmp_to_key(_concatenation_order))
    if not pieces:
        raise ValueError("largest_concatenation() needs at least one number")
    return "".join(pieces)