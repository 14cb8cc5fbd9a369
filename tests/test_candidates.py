import pytest

from wordle.candidates import CandidateFilter, find_candidates
from wordle.config import GameConfig
from wordle.errors import (
    ContradictoryConstraintError,
    DuplicateExclusionError,
    FormatError,
    LengthError,
)
from wordle.vocab import WordVocab


@pytest.fixture
def config():
    return GameConfig(guess_limit=6, min_word_length=4, max_word_length=8, max_displayed_candidates=20)


@pytest.fixture
def vocab():
    # Small controlled pool so the tests don't depend on the shipped word list
    return WordVocab(["pilot", "plane", "plots", "poult", "proud", "split", "pills", "pilots"])


def test_pilot_after_place(vocab, config):
    remaining = list(find_candidates("Pl***", "ACE", vocab, config))

    # PILOT keeps L at index 2, which is still open to L
    assert remaining == ["PILOT", "POULT", "PILLS"]
    assert "PLANE" not in remaining   # excluded A and E
    assert "PLOTS" not in remaining   # L back in the slot it was seen in
    assert "PROUD" not in remaining   # no L at all
    assert "SPLIT" not in remaining   # P not confirmed in place
    assert "PILOTS" not in remaining  # wrong length


def test_results_are_restartable_and_stable(vocab, config):
    search = find_candidates("Pl***", "ACE", vocab, config)
    assert list(search) == list(search)
    assert list(search) == list(find_candidates("Pl***", "ACE", vocab, config))


def test_results_truncated_to_display_limit(vocab):
    config = GameConfig(max_displayed_candidates=2)
    assert list(find_candidates("Pl***", "ACE", vocab, config)) == ["PILOT", "POULT"]


def test_search_stops_once_limit_reached(config):
    class CountingVocab:
        def __init__(self, words):
            self.words = words
            self.seen = 0

        def __iter__(self):
            for w in self.words:
                self.seen += 1
                yield w

    pool = CountingVocab(["PILOT", "POULT", "PILLS", "PLANE"])
    candidate_filter = CandidateFilter("P****", "", config)
    assert list(candidate_filter.search(pool, limit=1)) == ["PILOT"]
    assert pool.seen == 1


def test_empty_exclusions_allowed(vocab, config):
    assert list(find_candidates("Pl***", "", vocab, config)) == ["PILOT", "POULT", "PILLS"]
    assert list(find_candidates("P*L**", "", vocab, config)) == ["PILOT", "PILLS"]


def test_confirmed_letter_also_misplaced(config):
    # L confirmed at 0 and seen misplaced at 2: other copies may go to 1, 3 or 4
    candidate_filter = CandidateFilter("L*l**", "", config)
    assert candidate_filter.matches("LOYAL")
    assert candidate_filter.matches("lemon")
    assert not candidate_filter.matches("LILAC")


def test_misplaced_letter_seen_twice(config):
    candidate_filter = CandidateFilter("*l*l*", "", config)
    assert candidate_filter.available == {"L": frozenset({0, 2, 4})}
    assert candidate_filter.matches("LOYAL")
    assert not candidate_filter.matches("ALLOT")


@pytest.mark.parametrize(
    "pattern, excluded, expected",
    [
        ("P****", "P", ContradictoryConstraintError),
        ("p****", "P", ContradictoryConstraintError),
        ("P****", "A1", FormatError),
        ("P****", "AA", DuplicateExclusionError),
        ("P****", "Aa", DuplicateExclusionError),
        ("P?***", "A", FormatError),
        ("P**", "A", LengthError),
        ("P********", "A", LengthError),
        # first failing check wins
        ("P?", "AA", DuplicateExclusionError),
        ("P?", "A", FormatError),
        ("PA*", "A", LengthError),
    ],
)
def test_invalid_solver_input(config, pattern, excluded, expected):
    with pytest.raises(expected):
        CandidateFilter(pattern, excluded, config)
