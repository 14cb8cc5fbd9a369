"""
solver/solver_cli.py

Given a partial word, list dictionary words that could complete it.

Suppose the word is PILOT and you tried PLACE: A, C and E are eliminated,
P is confirmed in the first slot, and L is in the word but not in the second
slot. Ask for candidates with:

  python -m solver.solver_cli -w "Pl***" -e "ACE"

Capital letters are confirmed ("green") letters, lowercase letters are
misplaced ("yellow") letters and '*' marks an unknown slot. -e lists the
eliminated letters in any order, without separators.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordle.candidates import find_candidates
from wordle.config import DEFAULT_CONFIG_PATH, GameConfig
from wordle.errors import WordleInputError
from wordle.vocab import WordVocab

DEFAULT_VOCAB_PATH = "resources/words.txt"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Suggest words matching a partially solved puzzle",
        epilog='example: python -m solver.solver_cli -w "Pl***" -e "ACE"',
    )
    ap.add_argument("-w", "--word", required=True,
                    help="Discovered letters; caps=green, lower=yellow, asterisk=undiscovered")
    ap.add_argument("-e", "--eliminated", default="",
                    help="Eliminated letters (in any order, no separators)")
    ap.add_argument("--vocab", default=DEFAULT_VOCAB_PATH, help="Word list, one word per line")
    ap.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to config.properties")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    config = GameConfig.from_properties(args.config)
    vocab = WordVocab.from_text(args.vocab)

    print("\nSolving...\n")
    try:
        candidates = list(find_candidates(args.word, args.eliminated, vocab, config))
    except WordleInputError as e:
        print(e)
        print("Invalid input\n")
        return 1

    print("Candidates:\n")
    for word in candidates:
        print(word.lower())
    if not candidates:
        print("(no matching words)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
