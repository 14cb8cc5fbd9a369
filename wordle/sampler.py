from __future__ import annotations

import random
from wordle.vocab import WordVocab


class WordSampler:
    """Picks target words from a vocabulary; deterministic when seeded."""

    def __init__(self, vocab: WordVocab, seed: int | None = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")

        self._vocab = vocab
        self._rng = random.Random(seed)

    @property
    def rng(self) -> random.Random:
        """Shared with the session so hints follow the same seed."""
        return self._rng

    def choice_word(self) -> str:
        return self._vocab.word_at(self._rng.randrange(len(self._vocab)))
