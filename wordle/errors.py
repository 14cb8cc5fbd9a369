"""
errors.py

Input errors raised by the guess validator and the solver.

All of them derive from `WordleInputError` (a ValueError) so callers can
catch the whole family, print the message and ask for new input.
"""


class WordleInputError(ValueError):
    """A guess, pattern or command was rejected; no state was changed."""


class FormatError(WordleInputError):
    pass


class LengthError(WordleInputError):
    pass


class EliminatedLetterError(WordleInputError):
    pass


class UnknownWordError(WordleInputError):
    pass


class DiscoveredMismatchError(WordleInputError):
    pass


class PartialMismatchError(WordleInputError):
    pass


class ContradictoryConstraintError(WordleInputError):
    pass


class DuplicateExclusionError(WordleInputError):
    pass


class HintUnavailableError(WordleInputError):
    pass
