"""
Feedback utilities: score a guess against the target word.
"""

from collections import Counter
from typing import List, Sequence

from wordle.knowledge import KnowledgeState, Mark
from wordle.letters import is_letters


def score_pattern(guess: str, target: str) -> List[Mark]:
    """
    Compute per-position feedback for `guess` against `target`.

    Both words must be uppercase A-Z strings of equal length.

    Duplicate handling (two-pass rule)
    ----------------------------------
    1) Exact matches are marked first and consume one copy of their letter.
    2) Left to right, a remaining letter is PRESENT while unconsumed copies
       of it are left in the target, otherwise ABSENT.

    So 'PAPER' against 'PILOT' is [EXACT, ABSENT, ABSENT, ABSENT, ABSENT]:
    the target's single P is used up by the exact match.
    """
    if not isinstance(guess, str) or not isinstance(target, str):
        raise TypeError("guess and target must be strings")
    if len(guess) != len(target):
        raise ValueError(f"guess length ({len(guess)}) != target length ({len(target)})")
    if not is_letters(guess) or not is_letters(target):
        raise ValueError("guess and target must be alphabetic")
    if not guess.isupper() or not target.isupper():
        raise ValueError("guess and target must be uppercase")

    pattern: List[Mark] = [Mark.ABSENT] * len(guess)
    remaining = Counter(target)

    # Pass 1: exact matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = Mark.EXACT
            remaining[g] -= 1

    # Pass 2: misplaced where counts allow
    for i, g in enumerate(guess):
        if pattern[i] == Mark.ABSENT and remaining[g] > 0:
            pattern[i] = Mark.PRESENT
            remaining[g] -= 1

    return pattern


def evaluate(target: str, guess: str, knowledge: KnowledgeState) -> List[Mark]:
    """Score `guess` and fold the result into `knowledge`."""
    marks = score_pattern(guess, target)
    knowledge.apply_feedback(guess, marks)
    return marks


def is_solved(marks: Sequence[Mark]) -> bool:
    return bool(marks) and all(m == Mark.EXACT for m in marks)
