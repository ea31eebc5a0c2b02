"""Number drills: primes, gaps between Fibonacci numbers and byte splitting."""

from __future__ import annotations

from collections.abc import Iterator

_WORD_MASK = 0xFFFFFFFF
_BYTE_MASK = 0xFF


def prime_range(low: int, high: int) -> list[int]:
    """Return the primes ``p`` with ``low <= p <= high`` (sieve of Eratosthenes)."""
    if high < 2:
        return []
    is_prime = [True] * (high + 1)
    is_prime[0] = is_prime[1] = False
    p = 2
    while p * p <= high:
        if is_prime[p]:
            is_prime[p * p::p] = [False] * len(range(p * p, high + 1, p))
        p += 1
    return [n for n in range(max(low, 2), high + 1) if is_prime[n]]


def _non_fibonacci(terms: int) -> Iterator[int]:
    previous, current = 0, 1
    for _ in range(terms):
        previous, current = current, previous + current
        yield from range(previous + 1, current)


def non_fibonacci_numbers(terms: int = 10) -> list[int]:
    """Return the numbers lying strictly between the first ``terms`` Fibonacci steps."""
    if terms < 0:
        raise ValueError(f"terms must not be negative, got {terms}")
    return list(_non_fibonacci(terms))


def split_bytes(value: int) -> tuple[int, int, int, int]:
    """Split a 32-bit value into its four bytes, least significant first.

    Values outside the unsigned 32-bit range wrap round as they would when stored.
    """
    word = value & _WORD_MASK
    return tuple((word >> shift) & _BYTE_MASK for shift in (0, 8, 16, 24))  # type: ignore[return-value]