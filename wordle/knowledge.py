"""
knowledge.py

Keeps track of what a player has learned about the target word.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Sequence, Set


class Mark(IntEnum):
    """Per-letter feedback; values match the 0/1/2 gray/yellow/green encoding."""

    ABSENT = 0
    PRESENT = 1
    EXACT = 2


class KnowledgeState:
    """
    Accumulated facts about one target word.

    - discovered: position -> letter confirmed at that position
    - partial:    letters known to be in the word
    - eliminated: letters known not to be in the word

    Read access only; the evaluator folds each scored guess in through
    `apply_feedback`. A letter is never both known-present and eliminated.
    """

    def __init__(self, word_length: int) -> None:
        if not isinstance(word_length, int) or word_length <= 0:
            raise ValueError("word_length must be a positive integer")
        self.word_length = word_length
        self._discovered: Dict[int, str] = {}
        self._partial: Set[str] = set()
        self._eliminated: Set[str] = set()

    @property
    def discovered(self) -> Mapping[int, str]:
        return MappingProxyType(self._discovered)

    @property
    def partial(self) -> FrozenSet[str]:
        return frozenset(self._partial)

    @property
    def eliminated(self) -> FrozenSet[str]:
        return frozenset(self._eliminated)

    def known_present(self) -> FrozenSet[str]:
        """Letters confirmed somewhere in the word, pinned or not."""
        return frozenset(self._partial) | frozenset(self._discovered.values())

    def apply_feedback(self, guess: str, marks: Sequence[Mark]) -> None:
        """
        Update knowledge from a scored guess.
        - Exact   = pin the letter at that slot
        - Present = letter is in the word somewhere
        - Absent  = letter is eliminated, unless another copy of it in this
                    guess (or an earlier one) proved it present
        """
        if not isinstance(guess, str) or len(guess) != self.word_length:
            raise ValueError(f"guess must be a string of length {self.word_length}")
        if len(marks) != self.word_length:
            raise ValueError(f"marks must have length {self.word_length}")

        # Pass 1: greens and yellows
        present_here: Set[str] = set()
        for i, (ch, mark) in enumerate(zip(guess, marks)):
            if mark == Mark.EXACT:
                if self._discovered.get(i, ch) != ch:
                    raise ValueError(f"position {i} already discovered as {self._discovered[i]!r}")
                self._discovered[i] = ch
                present_here.add(ch)
            elif mark == Mark.PRESENT:
                self._partial.add(ch)
                present_here.add(ch)

        # Pass 2: grays only eliminate letters with no green/yellow anywhere
        known = present_here | self.known_present()
        for ch, mark in zip(guess, marks):
            if mark == Mark.ABSENT and ch not in known:
                self._eliminated.add(ch)

    def __repr__(self) -> str:
        return (
            f"KnowledgeState(discovered={dict(sorted(self._discovered.items()))}, "
            f"partial={sorted(self._partial)}, eliminated={sorted(self._eliminated)})"
        )
