"""Sorting drills: bubble sort and timing repeated sorts."""

from __future__ import annotations

import time

DEFAULT_REPEATS = 10000


def bubble_sort(values: list[int]) -> None:
    """Sort ``values`` in place in ascending order by repeated neighbour swaps."""
    for unsorted_end in range(len(values) - 1, 0, -1):
        for j in range(unsorted_end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def time_repeated_sort(values: list[int], repeats: int = DEFAULT_REPEATS) -> float:
    """Bubble-sort ``values`` in place ``repeats`` times; return the processor seconds spent."""
    if repeats < 0:
        raise ValueError(f"repeats must not be negative, got {repeats}")
    start = time.process_time()
    for _ in range(repeats):
        bubble_sort(values)
    return time.process_time() - start