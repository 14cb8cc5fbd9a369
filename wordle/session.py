"""
session.py

One interactive game: a hidden target, the knowledge gathered so far and
the guess count.

API
---
submit(guess) -> list[Mark]
    Validates and scores a guess. Invalid guesses raise a WordleInputError
    and leave the session untouched.

hint() -> int
    Reveals one undiscovered position in the view (once per game, costs a guess).

record() -> GuessRecord
    (word, won, guesses) triple for the history store.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from wordle.config import GameConfig
from wordle.errors import HintUnavailableError
from wordle.feedback import evaluate, is_solved
from wordle.knowledge import KnowledgeState, Mark
from wordle.letters import is_letters, normalise
from wordle.validation import GuessValidator

log = logging.getLogger(__name__)

Cell = Optional[Tuple[str, Mark]]


@dataclass(frozen=True)
class GuessRecord:
    word: str
    won: bool
    guesses: int


class GameSession:
    def __init__(
        self,
        target: str,
        config: GameConfig,
        validator: GuessValidator,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not isinstance(target, str) or not is_letters(target):
            raise ValueError("target must be a non-empty alphabetic string")
        if not isinstance(config, GameConfig):
            raise TypeError("config must be a GameConfig")

        self._target = normalise(target)
        self.config = config
        self.validator = validator
        self._rng = rng if rng is not None else random.Random()

        # Session state
        self._knowledge = KnowledgeState(len(self._target))
        self._view: List[Cell] = [None] * len(self._target)
        self._history: List[Tuple[str, List[Mark]]] = []
        self._guesses: int = 0
        self._hint_used: bool = False
        self._hinted_position: Optional[int] = None
        self._finished: bool = False
        self._won: bool = False

    # -------------------------
    # Core API
    # -------------------------
    def submit(self, guess: str) -> List[Mark]:
        """Validate, score and record a guess; return its marks."""
        if self._finished:
            raise RuntimeError("the game is already over")

        self.validator.validate(guess, self._knowledge)
        guess = normalise(guess)

        marks = evaluate(self._target, guess, self._knowledge)
        self._history.append((guess, marks))
        self._guesses += 1
        self._update_view(guess, marks)
        log.debug("guess %d: %s -> %s", self._guesses, guess, [int(m) for m in marks])

        if is_solved(marks):
            self._won = True
            self._finished = True
        else:
            self._check_out_of_guesses()
        return marks

    def hint(self) -> int:
        """Reveal a random hidden position; return its index."""
        if self._finished:
            raise RuntimeError("the game is already over")
        if self._hint_used:
            raise HintUnavailableError("You have already used a hint!")
        hidden = [i for i, cell in enumerate(self._view) if cell is None or cell[1] != Mark.EXACT]
        if len(hidden) <= 1:
            raise HintUnavailableError("There is only one letter left to guess!")

        pos = self._rng.choice(hidden)
        self._view[pos] = (self._target[pos], Mark.EXACT)
        self._hint_used = True
        self._hinted_position = pos
        self._guesses += 1
        log.debug("hint revealed position %d", pos)
        self._check_out_of_guesses()
        return pos

    def record(self) -> GuessRecord:
        return GuessRecord(word=self._target, won=self._won, guesses=self._guesses)

    # -------------------------
    # Helpers
    # -------------------------
    def _update_view(self, guess: str, marks: List[Mark]) -> None:
        for i, (ch, mark) in enumerate(zip(guess, marks)):
            if mark == Mark.EXACT and i == self._hinted_position:
                self._hinted_position = None  # now discovered by a guess
            cell = self._view[i]
            if cell is not None and cell[1] == Mark.EXACT:
                continue
            if mark != Mark.ABSENT:
                self._view[i] = (ch, mark)

    def _check_out_of_guesses(self) -> None:
        if self._guesses >= self.config.guess_limit:
            self._finished = True
            log.info("out of guesses, the word was %s", self._target)

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def target(self) -> str:
        return self._target

    @property
    def knowledge(self) -> KnowledgeState:
        return self._knowledge

    @property
    def view(self) -> List[Cell]:
        return list(self._view)

    @property
    def history(self) -> List[Tuple[str, List[Mark]]]:
        return [(g, list(m)) for g, m in self._history]

    @property
    def guesses(self) -> int:
        return self._guesses

    @property
    def remaining_guesses(self) -> int:
        return max(0, self.config.guess_limit - self._guesses)

    @property
    def hint_used(self) -> bool:
        return self._hint_used

    @property
    def hinted_position(self) -> Optional[int]:
        """Position shown only because of the hint, if not since guessed."""
        return self._hinted_position

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def won(self) -> bool:
        return self._won
