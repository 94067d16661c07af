"""String drills: reversal, length, anagrams, case and vowel handling."""

from __future__ import annotations

import string
from collections import Counter
from typing import NamedTuple

VOWELS = frozenset("aeiouAEIOU")

_TOGGLE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


class VowelCount(NamedTuple):
    vowels: int
    others: int


def reverse_string(text: str) -> str:
    """The characters of text in reverse order."""
    return text[::-1]


def string_length(text: str) -> int:
    """Number of characters before the first NUL, or of the whole text."""
    return len(text.partition("\0")[0])


def is_anagram(a: str, b: str) -> bool:
    """True when both strings hold the same characters with the same counts."""
    return Counter(a) == Counter(b)


def delete_char(text: str, ch: str) -> str:
    """Text with every occurrence of ch removed."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return text.replace(ch, "")


def remove_spaces(text: str) -> str:
    """Text with every space character removed."""
    return text.replace(" ", "")


def toggle_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving everything else alone."""
    return text.translate(_TOGGLE)


def is_vowel(ch: str) -> bool:
    """True for a single English vowel, in either case."""
    return ch in VOWELS


def count_vowels(text: str) -> VowelCount:
    """Count vowels and all other characters in text."""
    vowels = sum(1 for ch in text if ch in VOWELS)
    return VowelCount(vowels, len(text) - vowels)


def remove_vowels(text: str) -> str:
    """Text with every vowel removed."""
    return "".join(ch for ch in text if ch not in VOWELS)