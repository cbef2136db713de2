"""Summary: Text normalization and string similarity helpers.

Importance: Gives every matching stage the same view of marker names and addresses.
Alternatives: Use a fuzzy matching library such as rapidfuzz.
"""

from __future__ import annotations

import re


_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Summary: Lowercase, trim, strip punctuation, and collapse whitespace.

    Importance: Makes matching insensitive to case and punctuation.
    Alternatives: Compare raw strings and maintain spelling variants in the tables.
    """

    if not text:
        return ""
    lowered = text.lower().strip()
    return _WHITESPACE.sub(" ", _NON_WORD.sub("", lowered))


def levenshtein_distance(first: str, second: str) -> int:
    """Summary: Count single-character edits needed to turn one string into another.

    Importance: Drives fuzzy business name matching.
    Alternatives: Use a C-accelerated edit distance implementation.
    """

    if len(first) < len(second):
        first, second = second, first
    previous = list(range(len(second) + 1))
    for row, first_char in enumerate(first, start=1):
        current = [row]
        for column, second_char in enumerate(second, start=1):
            if first_char == second_char:
                current.append(previous[column - 1])
            else:
                current.append(
                    min(previous[column - 1], current[column - 1], previous[column]) + 1
                )
        previous = current
    return previous[-1]


def calculate_similarity(first: str, second: str) -> float:
    """Summary: Score two strings between 0.0 and 1.0 using edit distance.

    Importance: Lets near-miss spellings of known businesses still match.
    Alternatives: Use token-set ratios or phonetic keys.
    """

    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(first, second)) / longest
