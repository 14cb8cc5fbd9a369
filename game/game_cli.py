"""
game/game_cli.py

Play a word-guessing game in the terminal.

Run:
  python -m game.game_cli --vocab resources/words.txt

Commands at the guess prompt:
  :HELP  :QUIT  :HINT  :DEBUG
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordle.config import DEFAULT_CONFIG_PATH, GameConfig
from wordle.errors import WordleInputError
from wordle.history import DEFAULT_HISTORY_PATH, HistoryStore
from wordle.knowledge import Mark
from wordle.sampler import WordSampler
from wordle.session import GameSession
from wordle.validation import VocabularyValidator
from wordle.vocab import WordVocab

DEFAULT_VOCAB_PATH = "resources/words.txt"

HELP_STRING = ":HELP"
QUIT_STRING = ":QUIT"
HINT_STRING = ":HINT"
DEBUG_STRING = ":DEBUG"

# ANSI colours
RESET = "\u001B[0m"
HIDDEN = "\u001B[44m\u001B[30m"   # blue
CORRECT = "\u001B[42m\u001B[30m"  # green
PARTIAL = "\u001B[43m\u001B[30m"  # yellow

WELCOME_TEXT = """
Welcome to Wordle!
Guess the hidden word in {guesses} tries.
Type {help} for help, {quit} to leave or {hint} to reveal a letter.
"""

HELP_TEXT = """
Pick a word length between {min_len} and {max_len}, then guess the word.
You have {guesses} guesses. After each guess:
  green  - the letter is in the right place
  yellow - the letter is in the word, somewhere else
Letters that are not in the word are listed as eliminated and may not be
used again. Discovered letters must stay in place and misplaced letters
must be reused.
{hint} reveals one letter once per game and costs a guess.
"""


def render_view(session: GameSession) -> str:
    """Coloured line for the current view: hidden slots show '*', a hinted letter is uncoloured."""
    parts: List[str] = []
    for i, cell in enumerate(session.view):
        if cell is None:
            parts.append(HIDDEN + "*" + RESET)
        elif i == session.hinted_position:
            parts.append(cell[0])
        else:
            letter, mark = cell
            colour = CORRECT if mark == Mark.EXACT else PARTIAL
            parts.append(colour + letter + RESET)
    return "".join(parts)


def eliminated_string(session: GameSession) -> str:
    return ",".join(sorted(session.knowledge.eliminated))


def show(session: GameSession) -> None:
    print(render_view(session))
    print("Eliminated letters: " + eliminated_string(session))


def debug(session: GameSession) -> None:
    print("Current state: ")
    print("------------------------------")
    print("Word: " + session.target)
    print("Knowledge: " + repr(session.knowledge))
    print("Eliminated: " + eliminated_string(session))
    print(f"Guesses: {session.guesses}")
    print("------------------------------")


def choose_length(config: GameConfig) -> int:
    """Prompt until the player picks a valid word length."""
    prompt = f"Choose word length (between {config.min_word_length} and {config.max_word_length} inclusive): "
    while True:
        raw = input(prompt).strip()
        try:
            length = int(raw)
        except ValueError:
            print("Please enter a number.")
            continue
        if config.allows_length(length):
            return length
        print("Invalid word length. Please try again.")


def play(session: GameSession) -> bool:
    """Run the guess loop; return False if the player quit."""
    config = session.config
    while not session.finished:
        print()
        show(session)
        raw = input("Enter a guess: ").strip()

        if raw == QUIT_STRING:
            return False
        if raw == HELP_STRING:
            print(HELP_TEXT.format(min_len=config.min_word_length, max_len=config.max_word_length,
                                   guesses=config.guess_limit, hint=HINT_STRING))
            continue
        if raw == DEBUG_STRING:
            debug(session)
            continue

        try:
            if raw == HINT_STRING:
                session.hint()
                print("We have revealed a letter for you")
            else:
                session.submit(raw)
        except WordleInputError as e:
            print(e)
            continue

    if session.won:
        show(session)
        print("Victory!")
    else:
        print("You are out of guesses! The word was: " + session.target)
    return True


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Play Wordle in the terminal")
    ap.add_argument("--vocab", default=DEFAULT_VOCAB_PATH, help="Word list, one word per line")
    ap.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="Path to config.properties")
    ap.add_argument("--history", default=str(DEFAULT_HISTORY_PATH), help="Where finished games are recorded")
    ap.add_argument("--length", type=int, default=None, help="Word length (skips the prompt)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for picking the word")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    config = GameConfig.from_properties(args.config)
    vocab = WordVocab.from_text(args.vocab)
    store = HistoryStore(args.history)

    print(WELCOME_TEXT.format(guesses=config.guess_limit, help=HELP_STRING,
                              quit=QUIT_STRING, hint=HINT_STRING))

    length = args.length
    while True:
        if length is None or not config.allows_length(length):
            length = choose_length(config)
        try:
            words = vocab.filter_by_length(length)
            break
        except ValueError:
            print(f"The word list has no words of length {length}. Please try again.")
            length = None

    sampler = WordSampler(words, seed=args.seed)
    session = GameSession(
        sampler.choice_word(),
        config,
        VocabularyValidator(words, length),
        rng=sampler.rng,
    )

    if not play(session):
        print("Bye!")
        return 0

    store.append(session.record())
    print(store.summary().describe())
    print("Bye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
