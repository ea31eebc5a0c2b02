"""Subarray drills built on prefix sums and sliding windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count index pairs ``i < j`` whose values sum to ``target``."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in values:
        pairs += seen[target - value]
        seen[value] += 1
    return pairs


def longest_zero_sum_subarray(values: Iterable[int]) -> int:
    """Return the length of the longest contiguous run summing to zero."""
    first_seen = {0: -1}
    best = 0
    for index, total in enumerate(accumulate(values)):
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def _check_divisor(k: int) -> None:
    if k == 0:
        raise ValueError("the divisor k must not be zero")


def longest_subarray_divisible_by(values: Iterable[int], k: int) -> int:
    """Return the length of the longest contiguous run whose sum is divisible by ``k``."""
    _check_divisor(k)
    first_seen = {0: -1}
    best = 0
    for index, total in enumerate(accumulate(values)):
        remainder = total % k
        if remainder in first_seen:
            best = max(best, index - first_seen[remainder])
        else:
            first_seen[remainder] = index
    return best


def count_subarrays_divisible_by(values: Iterable[int], k: int) -> int:
    """Count the contiguous runs whose sum is divisible by ``k``."""
    _check_divisor(k)
    remainders: Counter[int] = Counter({0: 1})
    count = 0
    for total in accumulate(values):
        remainder = total % k
        count += remainders[remainder]
        remainders[remainder] += 1
    return count


def has_zero_sum_subarray(values: Iterable[int]) -> bool:
    """Tell whether some non-empty contiguous run sums to zero."""
    seen = {0}
    for total in accumulate(values):
        if total in seen:
            return True
        seen.add(total)
    return False


def smallest_subarray_with_sum_above(
    values: Sequence[int], threshold: int
) -> int | None:
    """Return the length of the shortest run of non-negative values summing above ``threshold``.

    Returns ``None`` when no run does.
    """
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(values):
        total += value
        while total > threshold and left <= right:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= values[left]
            left += 1
    return best


def longest_window_with_at_most_k_evens(values: Sequence[int], k: int) -> int:
    """Return the longest contiguous run holding at most ``k`` even values."""
    best = 0
    evens = 0
    left = 0
    for right, value in enumerate(values):
        if value % 2 == 0:
            evens += 1
        while evens > k:
            if values[left] % 2 == 0:
                evens -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def longest_unique_substring(text: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for end, char in enumerate(text):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        last_seen[char] = end
        best = max(best, end - start + 1)
    return best