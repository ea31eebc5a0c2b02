"""Text drills: odd-number prefixes and palindromes."""

from __future__ import annotations


def largest_odd_prefix(num: str) -> str:
    """Return the longest prefix of a decimal string that is an odd number, or ``""``."""
    return num.rstrip("02468")


def is_palindrome(text: str) -> bool:
    """Tell whether the ASCII letters and digits of ``text`` read the same both ways, ignoring case."""
    cleaned = [char.lower() for char in text if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]