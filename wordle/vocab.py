from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

import pandas as pd

from wordle.letters import is_letters

log = logging.getLogger(__name__)


class WordVocab:
    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        upper = [w.upper() for w in words]
        if not all(is_letters(w) for w in upper):
            raise ValueError("words must contain only the letters A-Z")
        # Enforce uniqueness (first occurrence policy is handled by the loaders)
        if len(set(upper)) != len(upper):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = upper
        self._members = frozenset(self._words)

    # ---------- Construction helpers ----------

    @classmethod
    def from_text(cls, path: str) -> "WordVocab":
        """
        Load a plain word list, one word per line.

        Each line is read whole (one full-width column, so commas and quotes
        are not delimiters). Lines that are not purely alphabetic are skipped;
        later duplicates (compared case-insensitively) are dropped.
        """
        df = pd.read_fwf(
            path,
            colspecs=[(0, None)],
            header=None,
            names=["word"],
            dtype=str,
            keep_default_na=False,
        )
        return cls._from_values(df["word"].tolist(), source=path)

    @classmethod
    def _from_values(cls, values: Iterable[object], source: str) -> "WordVocab":
        clean: List[str] = []
        seen = set()
        skipped = 0

        for val in values:
            w = str(val).strip().upper()
            if not is_letters(w):
                skipped += 1
                continue
            if w in seen:
                continue
            seen.add(w)
            clean.append(w)

        if not clean:
            raise ValueError(f"no valid words in {source}")

        log.info("loaded %d words from %s (%d lines skipped)", len(clean), source, skipped)
        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        """Iterate words in load order."""
        return iter(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-insensitive)."""
        return isinstance(word, str) and word.upper() in self._members

    def filter_by_length(self, length: int) -> "WordVocab":
        """Return a new vocabulary holding only the words of exactly `length` letters."""
        if not isinstance(length, int) or length <= 0:
            raise ValueError("length must be a positive integer")
        kept = [w for w in self._words if len(w) == length]
        if not kept:
            raise ValueError(f"no words of length {length}")
        log.debug("filtered vocabulary to %d words of length %d", len(kept), length)
        return WordVocab(kept)

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
