"""String utilities."""

from __future__ import annotations


def is_anagram(first: str, second: str) -> bool:
    """Return True when every character of ``first`` occurs somewhere in ``second``."""
    available = set(second)
    return all(ch in available for ch in first)


def remove_duplicate_characters(text: str) -> str:
    """Return ``text`` keeping only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))