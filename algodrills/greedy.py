"""Greedy drills: meetings, job deadlines, platforms and interval merging."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A job that earns ``profit`` if done by the end of slot ``deadline``."""

    deadline: int
    profit: int


def _check_pairs(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("both sequences must have the same length")


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Return how many meetings one room can hold; a meeting must start after the last ends."""
    _check_pairs(starts, ends)
    meetings = sorted(zip(ends, starts))
    if not meetings:
        return 0
    count = 1
    last_end = meetings[0][0]
    for end, start in meetings[1:]:
        if start > last_end:
            count += 1
            last_end = end
    return count


def job_scheduling(jobs: Sequence[Job]) -> tuple[int, int]:
    """Return ``(jobs done, total profit)`` for the most profitable schedule."""
    slots = [False] * len(jobs)
    done = profit = 0
    for job in sorted(jobs, key=lambda j: (j.profit, j.deadline), reverse=True):
        for slot in range(min(job.deadline, len(jobs)) - 1, -1, -1):
            if not slots[slot]:
                slots[slot] = True
                done += 1
                profit += job.profit
                break
    return done, profit


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the fewest platforms that let every train stop without waiting."""
    _check_pairs(arrivals, departures)
    arriving, leaving = sorted(arrivals), sorted(departures)
    i = j = occupied = most = 0
    while i < len(arriving) and j < len(leaving):
        if arriving[i] <= leaving[j]:
            occupied += 1
            i += 1
        else:
            occupied -= 1
            j += 1
        most = max(most, occupied)
    return most


def merge_intervals(
    intervals: Iterable[Sequence[int]],
) -> list[tuple[int, int]]:
    """Merge overlapping or touching intervals, returned in ascending order."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(tuple(interval) for interval in intervals):
        if merged and merged[-1][1] >= start:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged