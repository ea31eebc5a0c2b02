"""Dynamic programming drills: stairs, frog jumps, robbers and grid paths."""

from __future__ import annotations

import math
from collections.abc import Sequence


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def frog_jump(heights: Sequence[int]) -> int:
    """Return the least energy for a frog to go from the first stone to the last.

    The frog jumps one or two stones ahead; a jump costs the height difference.
    """
    before_previous = previous = 0
    for i in range(1, len(heights)):
        one_step = previous + abs(heights[i] - heights[i - 1])
        two_steps = (
            before_previous + abs(heights[i] - heights[i - 2])
            if i > 1
            else math.inf
        )
        before_previous, previous = previous, min(one_step, two_steps)
    return previous


def _rob_line(values: Sequence[int]) -> int:
    before_previous, previous = 0, values[0]
    for value in values[1:]:
        before_previous, previous = previous, max(value + before_previous, previous)
    return previous


def max_non_adjacent_sum(values: Sequence[int]) -> int:
    """Return the largest sum of values no two of which are neighbours."""
    if not values:
        raise ValueError("max_non_adjacent_sum() needs at least one value")
    return _rob_line(values)


def house_robber_circular(values: Sequence[int]) -> int:
    """Return the largest non-adjacent sum when the first and last are neighbours too."""
    if not values:
        raise ValueError("house_robber_circular() needs at least one value")
    if len(values) == 1:
        return values[0]
    return max(_rob_line(values[1:]), _rob_line(values[:-1]))


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError(f"grid sides must be positive, got {m} and {n}")
    return math.comb(m + n - 2, m - 1)