"""
validation.py

Decides whether a guess may be submitted given what is already known.
"""

from __future__ import annotations

from typing import Protocol

from wordle.errors import (
    DiscoveredMismatchError,
    EliminatedLetterError,
    FormatError,
    LengthError,
    PartialMismatchError,
    UnknownWordError,
)
from wordle.knowledge import KnowledgeState
from wordle.letters import is_letters, normalise
from wordle.vocab import WordVocab


class GuessValidator(Protocol):
    def validate(self, guess: str, knowledge: KnowledgeState) -> None:
        """Raise a WordleInputError subclass if `guess` may not be played."""
        ...


class VocabularyValidator:
    """
    Production validator. Checks run in a fixed order and the first failure
    is raised:

    1. letters only                -> FormatError
    2. same length as the target   -> LengthError
    3. no eliminated letters       -> EliminatedLetterError
    4. a word in the vocabulary    -> UnknownWordError
    5. keeps discovered letters    -> DiscoveredMismatchError
    6. uses every partial letter   -> PartialMismatchError
    """

    def __init__(self, vocab: WordVocab, word_length: int) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        self.vocab = vocab
        self.word_length = int(word_length)

    def validate(self, guess: str, knowledge: KnowledgeState) -> None:
        if not is_letters(guess):
            raise FormatError("Input must contain only letters")
        guess = normalise(guess)

        if len(guess) != self.word_length:
            raise LengthError(f"Input must contain {self.word_length} letters")

        reused = sorted(set(guess) & knowledge.eliminated)
        if reused:
            raise EliminatedLetterError(f"Letters already eliminated: {','.join(reused)}")

        if not self.vocab.contains(guess):
            raise UnknownWordError(f"{guess} is not a recognised word")

        for pos, letter in sorted(knowledge.discovered.items()):
            if guess[pos] != letter:
                raise DiscoveredMismatchError(
                    f"You have to keep the discovered letter {letter} at position {pos + 1}"
                )

        missing = sorted(knowledge.partial - set(guess))
        if missing:
            raise PartialMismatchError(
                f"You have to use the partially discovered letters: {','.join(missing)}"
            )
