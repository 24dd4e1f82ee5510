"""Canonical composition helpers for comparing visually identical strings."""

import unicodedata
from typing import List, Tuple


def compose(text: str) -> str:
    """Return the NFC form, folding base letters and marks into precomposed characters."""
    return unicodedata.normalize("NFC", text)


def decompose(text: str) -> str:
    """Return the NFD form, splitting precomposed characters into base plus marks."""
    return unicodedata.normalize("NFD", text)


def renders_same(first: str, second: str) -> bool:
    """Return True if both strings are canonically equivalent."""
    return compose(first) == compose(second)


def combining_marks(text: str) -> List[Tuple[int, int]]:
    marks = []
    for index, char in enumerate(text):
        if unicodedata.combining(char) != 0:
            marks.append((index, ord(char)))
    return marks
