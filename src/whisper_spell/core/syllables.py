"""Deterministic syllable heuristic for verse line bounds.

Vowel-group counting with a short exception table. The rules are fixed:
changing them changes which verse lines are accepted, so treat them as
frozen once released.
"""

from __future__ import annotations

import re
from typing import Final

_NON_LETTERS = re.compile(r"[^a-z]")
_VOWELS: Final[str] = "aeiou"

SYLLABLE_EXCEPTIONS: Final[dict[str, int]] = {
    "beyond": 2,
    "being": 2,
    "every": 2,
    "quiet": 2,
    "ruin": 2,
    "pale": 1,
    "whole": 1,
    "while": 1,
    "smile": 1,
}


def count_word_syllables(word: str) -> int:
    """Count syllables of one word; tokens without letters count zero."""
    cleaned = _NON_LETTERS.sub("", word.lower())
    if not cleaned:
        return 0
    if cleaned in SYLLABLE_EXCEPTIONS:
        return SYLLABLE_EXCEPTIONS[cleaned]

    count = 0
    previous_vowel = False
    for index, char in enumerate(cleaned):
        is_vowel = char in _VOWELS or (char == "y" and index > 0)
        if is_vowel and not previous_vowel:
            count += 1
        previous_vowel = is_vowel

    # silent final e, but "-le" keeps its syllable
    if cleaned.endswith("e") and not cleaned.endswith("le") and count > 1:
        count -= 1
    if _has_silent_ed(cleaned) and count > 1:
        count -= 1
    return max(count, 1)


def _has_silent_ed(word: str) -> bool:
    if len(word) <= 3 or not word.endswith("ed"):
        return False
    if word[-3] in "td":
        return False
    # kindled, bridled
    if word.endswith("led") and word[-4] not in _VOWELS:
        return False
    return True


def count_line_syllables(line: str) -> int:
    """Sum word syllables over whitespace-separated tokens."""
    return sum(count_word_syllables(token) for token in line.split())
