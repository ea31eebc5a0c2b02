"""Command-line front end that runs the drills on numbers read from input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from algodrills.arrays import (
    longest_consecutive_run,
    max_water_area,
    min_jumps,
    trapped_rain_water,
)
from algodrills.greedy import merge_intervals
from algodrills.numtheory import non_fibonacci_numbers, split_bytes
from algodrills.search import find_rotated_minimum
from algodrills.selection import kth_smallest, three_sum
from algodrills.sorting import DEFAULT_REPEATS, time_repeated_sort
from algodrills.subarrays import longest_window_with_at_most_k_evens

SAMPLE_RUN_VALUES = (1, 9, 3, 10, 4, 20, 2)
SAMPLE_JUMP_STEPS = (9, 10, 1, 2, 3, 4, 8, 0, 0, 0, 0, 0, 0, 0, 1)
SAMPLE_SORT_VALUES = (12, 11, 13, 5, 6, 1, 3, 4, 10, 20) * 20


class InputError(Exception):
    """Raised when the numbers read from input are missing or malformed."""


class _IntReader:
    """Hands out whitespace-separated integers read from a text stream."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def next_int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None
        try:
            return int(token)
        except ValueError:
            raise InputError(f"not an integer: {token!r}") from None

    def count(self) -> int:
        size = self.next_int()
        if size < 0:
            raise InputError(f"a count must not be negative, got {size}")
        return size

    def take(self, size: int) -> list[int]:
        return [self.next_int() for _ in range(size)]

    def counted_list(self) -> list[int]:
        return self.take(self.count())


def _stdin_reader() -> _IntReader:
    return _IntReader(sys.stdin.read())


def _print_rows(rows: Sequence[Sequence[int]]) -> None:
    for row in rows:
        print(" ".join(map(str, row)))


def _write_value(value: int) -> None:
    sys.stdout.write(f"{value}\n")


def _cmd_three_sum(args: argparse.Namespace) -> None:
    _print_rows(three_sum(_stdin_reader().counted_list()))


def _cmd_max_area(args: argparse.Namespace) -> None:
    heights = _stdin_reader().counted_list()
    area = max_water_area(heights)
    _write_value(area)


def _cmd_rotated_min(args: argparse.Namespace) -> None:
    values = _stdin_reader().counted_list()
    smallest = find_rotated_minimum(values)
    _write_value(smallest)


def _cmd_merge_intervals(args: argparse.Namespace) -> None:
    reader = _stdin_reader()
    intervals = [reader.take(2) for _ in range(reader.count())]
    _print_rows(merge_intervals(intervals))


def _cmd_trap(args: argparse.Namespace) -> None:
    heights = _stdin_reader().counted_list()
    water = trapped_rain_water(heights)
    _write_value(water)


def _cmd_kth_smallest(args: argparse.Namespace) -> None:
    reader = _stdin_reader()
    values = reader.counted_list()
    print(kth_smallest(values, reader.next_int()))


def _cmd_even_window(args: argparse.Namespace) -> None:
    reader = _stdin_reader()
    for _ in range(reader.count()):
        size = reader.count()
        k = reader.next_int()
        print(longest_window_with_at_most_k_evens(reader.take(size), k))


def _cmd_longest_run(args: argparse.Namespace) -> None:
    values = args.values or SAMPLE_RUN_VALUES
    print(
        "Length of the Longest contiguous subsequence is "
        f"{longest_consecutive_run(values)}"
    )


def _cmd_min_jumps(args: argparse.Namespace) -> None:
    print(min_jumps(args.steps or SAMPLE_JUMP_STEPS))


def _cmd_bytes(args: argparse.Namespace) -> None:
    value = args.value
    if value is None:
        print("Enter: ", end="", flush=True)
        value = _stdin_reader().next_int()
    for name, byte in zip("abcd", split_bytes(value)):
        print(f"{name} = {byte:02X}")


def _cmd_non_fibonacci(args: argparse.Namespace) -> None:
    print(" ".join(map(str, non_fibonacci_numbers(args.terms))))


def _cmd_time_sort(args: argparse.Namespace) -> None:
    values = list(SAMPLE_SORT_VALUES)
    spent = time_repeated_sort(values, args.repeats)
    print(f"Time taken {spent:f} seconds")
    print(" ".join(map(str, values)))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algodrills",
        description="Run an algorithm drill on integers read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, handler, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.set_defaults(handler=handler)
        return sub

    add("three-sum", _cmd_three_sum, "zero-sum triplets of N values")
    add("max-area", _cmd_max_area, "most water between two of N lines")
    add("rotated-min", _cmd_rotated_min, "minimum of N rotated sorted values")
    add("merge-intervals", _cmd_merge_intervals, "merge N intervals given as pairs")
    add("trap", _cmd_trap, "rain water trapped by N bars")
    add("kth-smallest", _cmd_kth_smallest, "K-th smallest of N values, K read last")
    add(
        "even-window",
        _cmd_even_window,
        "for T cases of N K values: longest window with at most K evens",
    )
    longest = add("longest-run", _cmd_longest_run, "longest run of consecutive integers")
    longest.add_argument("values", nargs="*", type=int)
    jumps = add("min-jumps", _cmd_min_jumps, "fewest jumps to reach the end")
    jumps.add_argument("steps", nargs="*", type=int)
    split = add("bytes", _cmd_bytes, "split a 32-bit value into bytes")
    split.add_argument("value", nargs="?", type=int)
    fib = add("non-fibonacci", _cmd_non_fibonacci, "numbers between Fibonacci steps")
    fib.add_argument("terms", nargs="?", type=int, default=10)
    timing = add("time-sort", _cmd_time_sort, "time repeated bubble sorts")
    timing.add_argument("--repeats", type=int, default=DEFAULT_REPEATS)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the drill named on the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (InputError, ValueError) as exc:
        print(f"algodrills: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())