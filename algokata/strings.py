"""Classic string exercises: palindromes, brackets, anagrams and windows."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, MutableSequence

_CLOSING_TO_OPENING = {")": "(", "]": "[", "}": "{"}


def is_palindrome(s: str) -> bool:
    """Return True if *s* reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Return True if every closing bracket matches the most recent open one.

    Any character that is not a closing bracket is treated as an opener.
    """
    stack: list[str] = []
    for ch in s:
        opening = _CLOSING_TO_OPENING.get(ch)
        if opening is None:
            stack.append(ch)
        elif stack and stack[-1] == opening:
            stack.pop()
        else:
            return False
    return not stack


def is_anagram(s: str, t: str) -> bool:
    """Return True if *s* and *t* contain the same characters with the same counts."""
    return sorted(s) == sorted(t)


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse *chars* in place."""
    chars.reverse()


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character obtainable with at most *k* replacements."""
    counts: Counter[str] = Counter()
    left = 0
    max_count = 0
    best = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_count = max(max_count, counts[ch])
        while (right - left + 1) - max_count > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, keeping first-seen order."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def reverse_str(s: str, k: int) -> str:
    """Reverse the first *k* characters of every block of ``2 * k`` characters."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    step = 2 * k
    return "".join(
        s[start : start + k][::-1] + s[start + k : start + step]
        for start in range(0, len(s), step)
    )


def replace_number(s: str) -> str:
    """Replace every ASCII digit in *s* with the word ``number``."""
    return "".join("number" if "0" <= ch <= "9" else ch for ch in s)