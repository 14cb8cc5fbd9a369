"""
config.py

Game parameters shared by the interactive game and the solver.
"""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("resources") / "config.properties"

# properties key -> GameConfig field
_PROPERTY_KEYS = {
    "GUESSES": "guess_limit",
    "MIN_WORD_LENGTH": "min_word_length",
    "MAX_WORD_LENGTH": "max_word_length",
    "DISPLAY_SOLUTIONS": "max_displayed_candidates",
}


@dataclass(frozen=True)
class GameConfig:
    """Immutable game parameters.

    Attributes
    ----------
    guess_limit : int
        Number of guesses allowed before the game is lost.
    min_word_length, max_word_length : int
        Inclusive bounds for the target word / solver pattern length.
    max_displayed_candidates : int
        The solver stops after this many matching words.
    """

    guess_limit: int = 6
    min_word_length: int = 4
    max_word_length: int = 8
    max_displayed_candidates: int = 20

    def __post_init__(self) -> None:
        for name in ("guess_limit", "min_word_length", "max_word_length", "max_displayed_candidates"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.min_word_length > self.max_word_length:
            raise ValueError("min_word_length must not exceed max_word_length")

    def allows_length(self, length: int) -> bool:
        return self.min_word_length <= length <= self.max_word_length

    @classmethod
    def from_properties(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "GameConfig":
        """
        Load a Java-style ``KEY=VALUE`` properties file.

        Raises
        ------
        FileNotFoundError if `path` does not exist, KeyError if a key is missing,
        ValueError if a value is not an integer.
        """
        path = Path(path)
        text = path.read_text(encoding="utf-8")

        # properties files have no section header
        parser = configparser.ConfigParser(comment_prefixes=("#", "!"))
        parser.optionxform = str  # keep key case
        parser.read_string("[wordle]\n" + text, source=str(path))
        section = parser["wordle"]

        values = {}
        for key, field in _PROPERTY_KEYS.items():
            if key not in section:
                raise KeyError(f"missing property '{key}' in {path}")
            try:
                values[field] = int(section[key])
            except ValueError:
                raise ValueError(f"property '{key}' must be an integer, got {section[key]!r}") from None

        config = cls(**values)
        log.debug("loaded %s from %s", config, path)
        return config
