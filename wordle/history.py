"""
history.py

Append-only log of finished games and the summary shown after each game.
Rows are header-less CSV: WORD,victory,guesses
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from wordle.session import GuessRecord

log = logging.getLogger(__name__)

DEFAULT_HISTORY_PATH = Path.home() / ".cache" / "wordle" / "history.txt"
COLUMNS = ["word", "victory", "guesses"]


@dataclass(frozen=True)
class HistorySummary:
    games: int
    win_rate: float         # percent
    average_guesses: float

    def describe(self) -> str:
        return (
            f"your stats: {self.games} games with {self.win_rate:.2f}% win rate "
            f"and {self.average_guesses:.2f} average guesses"
        )


class HistoryStore:
    def __init__(self, path: str | Path = DEFAULT_HISTORY_PATH) -> None:
        self.path = Path(path)

    def _ensure(self) -> Path:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        return self.path

    def append(self, record: GuessRecord) -> None:
        """Append one finished game."""
        if not isinstance(record, GuessRecord):
            raise TypeError("record must be a GuessRecord")
        row = pd.DataFrame([[record.word, record.won, record.guesses]], columns=COLUMNS)
        row.to_csv(self._ensure(), mode="a", header=False, index=False)
        log.info("saved %s to %s", record, self.path)

    def read(self) -> pd.DataFrame:
        """All records, oldest first; empty frame when nothing was saved yet."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            return pd.DataFrame(columns=COLUMNS)
        df = pd.read_csv(
            self.path,
            header=None,
            names=COLUMNS,
            dtype={"word": str, "guesses": int},
            keep_default_na=False,
        )
        df["victory"] = df["victory"].astype(str).str.lower() == "true"
        return df

    def summary(self) -> HistorySummary:
        df = self.read()
        if df.empty:
            return HistorySummary(games=0, win_rate=0.0, average_guesses=0.0)
        return HistorySummary(
            games=len(df),
            win_rate=100.0 * float(df["victory"].mean()),
            average_guesses=float(df["guesses"].mean()),
        )

    def drop(self) -> None:
        """Delete the history file if it exists."""
        self.path.unlink(missing_ok=True)
