"""Alphabet helpers shared by the game and the solver."""

from __future__ import annotations

import string
from typing import FrozenSet, Iterable

PLACEHOLDER = "*"

_LETTERS = frozenset(string.ascii_letters)


def normalise(text: str) -> str:
    """Uppercase `text`; raise TypeError for non-strings."""
    if not isinstance(text, str):
        raise TypeError("expected a string")
    return text.upper()


def is_letters(text: str) -> bool:
    """True iff `text` is non-empty and made only of A-Z (either case)."""
    return bool(text) and all(ch in _LETTERS for ch in text)


def is_pattern(text: str) -> bool:
    """True iff `text` is non-empty and made only of letters or placeholders."""
    return bool(text) and all(ch == PLACEHOLDER or ch in _LETTERS for ch in text)


def letter_set(chars: Iterable[str]) -> FrozenSet[str]:
    """Uppercase letter set of `chars`, ignoring placeholders."""
    return frozenset(ch.upper() for ch in chars if ch != PLACEHOLDER)
