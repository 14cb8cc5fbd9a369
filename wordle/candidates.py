"""
candidates.py

Solver mode: list the vocabulary words consistent with a pattern of
confirmed / misplaced / unknown letters and a set of excluded letters.

Pattern symbols, one per position:
- uppercase letter: confirmed at this position   ("green")
- lowercase letter: in the word, not here         ("yellow")
- '*':              nothing known yet
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Dict, FrozenSet, Iterator, Mapping, Optional

from wordle.config import GameConfig
from wordle.errors import (
    ContradictoryConstraintError,
    DuplicateExclusionError,
    FormatError,
    LengthError,
)
from wordle.letters import PLACEHOLDER, is_letters, is_pattern, letter_set, normalise
from wordle.vocab import WordVocab

log = logging.getLogger(__name__)


class CandidateFilter:
    """
    Compiled solver constraints.

    Construction validates the input, in this order:

    1. excluded letters are letters          -> FormatError
    2. excluded letters are unique           -> DuplicateExclusionError
    3. pattern is letters or placeholders    -> FormatError
    4. pattern length within config bounds   -> LengthError
    5. pattern and excluded letters disjoint -> ContradictoryConstraintError

    An empty `excluded` string means no letter has been eliminated yet.
    """

    def __init__(self, pattern: str, excluded: str, config: GameConfig) -> None:
        if not isinstance(pattern, str) or not isinstance(excluded, str):
            raise TypeError("pattern and excluded must be strings")

        if excluded and not is_letters(excluded):
            raise FormatError("--eliminated must contain only letters")
        excluded = normalise(excluded)
        if len(set(excluded)) != len(excluded):
            raise DuplicateExclusionError("--eliminated must contain only unique letters")
        if not is_pattern(pattern):
            raise FormatError(f"--word must contain only letters or '{PLACEHOLDER}'")
        if not config.allows_length(len(pattern)):
            raise LengthError(
                f"--word must contain between {config.min_word_length} "
                f"and {config.max_word_length} letters"
            )
        overlap = sorted(letter_set(pattern) & set(excluded))
        if overlap:
            raise ContradictoryConstraintError(
                f"--eliminated must not contain letters from --word: {','.join(overlap)}"
            )

        self.pattern = pattern
        self.length = len(pattern)
        self.excluded: FrozenSet[str] = frozenset(excluded)
        self.confirmed: Mapping[int, str] = {
            i: ch for i, ch in enumerate(pattern) if ch.isupper()
        }
        self.open_positions: FrozenSet[int] = frozenset(range(self.length)) - set(self.confirmed)
        self.available: Mapping[str, FrozenSet[int]] = self._available_positions()

    def _available_positions(self) -> Dict[str, FrozenSet[int]]:
        """Per misplaced letter: open positions minus every slot it was seen in."""
        seen_at: Dict[str, set] = {}
        for i, ch in enumerate(self.pattern):
            if ch.islower():
                seen_at.setdefault(ch.upper(), set()).add(i)
        return {letter: self.open_positions - spots for letter, spots in seen_at.items()}

    def matches(self, word: str) -> bool:
        """True iff `word` is consistent with the pattern and exclusions."""
        word = word.upper()
        if len(word) != self.length:
            return False

        # Excluded letters anywhere
        if not self.excluded.isdisjoint(word):
            return False

        # Confirmed letters in place
        for pos, letter in self.confirmed.items():
            if word[pos] != letter:
                return False

        # Misplaced letters present, and only where still allowed
        for letter in self.available:
            if letter not in word:
                return False
        for i in self.open_positions:
            allowed = self.available.get(word[i])
            if allowed is not None and i not in allowed:
                return False

        return True

    def search(self, vocab: WordVocab, limit: Optional[int] = None) -> "CandidateSearch":
        return CandidateSearch(self, vocab, limit)


class CandidateSearch:
    """
    Lazy, restartable view of the matching words in vocabulary order.
    Each iteration rescans the vocabulary and stops after `limit` matches.
    """

    def __init__(self, candidate_filter: CandidateFilter, vocab: WordVocab, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        self.filter = candidate_filter
        self.vocab = vocab
        self.limit = limit

    def __iter__(self) -> Iterator[str]:
        matching = (w for w in self.vocab if self.filter.matches(w))
        return islice(matching, self.limit)


def find_candidates(pattern: str, excluded: str, vocab: WordVocab, config: GameConfig) -> CandidateSearch:
    """Validate solver input and return the matches, capped at the configured display limit."""
    candidate_filter = CandidateFilter(pattern, excluded, config)
    log.debug(
        "solver: confirmed=%s misplaced=%s excluded=%s",
        dict(candidate_filter.confirmed),
        {k: sorted(v) for k, v in candidate_filter.available.items()},
        sorted(candidate_filter.excluded),
    )
    return candidate_filter.search(vocab, limit=config.max_displayed_candidates)
