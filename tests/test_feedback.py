import pytest

from wordle.feedback import evaluate, is_solved, score_pattern
from wordle.knowledge import KnowledgeState, Mark

E, P, A = Mark.EXACT, Mark.PRESENT, Mark.ABSENT


def test_exact_guess_is_all_exact():
    knowledge = KnowledgeState(5)
    marks = evaluate("PILOT", "PILOT", knowledge)
    assert marks == [E, E, E, E, E]
    assert is_solved(marks)
    assert dict(knowledge.discovered) == {0: "P", 1: "I", 2: "L", 3: "O", 4: "T"}
    assert knowledge.eliminated == frozenset()


def test_place_against_pilot():
    knowledge = KnowledgeState(5)
    marks = evaluate("PILOT", "PLACE", knowledge)
    assert marks == [E, P, A, A, A]
    assert not is_solved(marks)
    assert dict(knowledge.discovered) == {0: "P"}
    assert knowledge.partial == {"L"}
    assert knowledge.eliminated == {"A", "C", "E"}


def test_evaluate_is_deterministic():
    k1, k2 = KnowledgeState(5), KnowledgeState(5)
    assert evaluate("PILOT", "PLOTS", k1) == evaluate("PILOT", "PLOTS", k2)
    assert dict(k1.discovered) == dict(k2.discovered)
    assert k1.partial == k2.partial
    assert k1.eliminated == k2.eliminated


def test_surplus_copy_of_exact_letter_is_not_eliminated():
    # PILOT has one P: the exact match consumes it, the second P is absent
    # but P must not be eliminated since it is in the word.
    knowledge = KnowledgeState(5)
    marks = evaluate("PILOT", "PAPER", knowledge)
    assert marks == [E, A, A, A, A]
    assert "P" not in knowledge.eliminated
    assert knowledge.eliminated == {"A", "E", "R"}
    assert dict(knowledge.discovered) == {0: "P"}


def test_repeated_letter_marked_present_once_per_copy():
    # only one L in PILOT (exact at index 2): the other Ls are absent
    knowledge = KnowledgeState(5)
    marks = evaluate("PILOT", "LOLLY", knowledge)
    assert marks == [A, P, E, A, A]
    assert knowledge.partial == {"O"}
    assert knowledge.eliminated == {"Y"}


def test_classic_duplicate_cases():
    assert score_pattern("ALLOT", "TOTAL") == [P, P, A, P, P]
    assert score_pattern("ABBEY", "CABIN") == [P, A, E, A, A]
    assert score_pattern("PRESS", "SPREE") == [P, P, P, P, A]


def test_eliminated_letters_never_reappear_as_hits():
    knowledge = KnowledgeState(5)
    for guess in ["PLACE", "PRINT", "POLIO", "PILOT"]:
        marks = evaluate("PILOT", guess, knowledge)
        for ch, mark in zip(guess, marks):
            if mark != A:
                assert ch not in knowledge.eliminated
        assert knowledge.eliminated.isdisjoint(knowledge.known_present())
    assert knowledge.eliminated.isdisjoint(set("PILOT"))


def test_knowledge_views_are_read_only():
    knowledge = KnowledgeState(5)
    evaluate("PILOT", "PLACE", knowledge)
    with pytest.raises(TypeError):
        knowledge.discovered[1] = "I"
    assert not hasattr(knowledge.partial, "add")


def test_score_pattern_rejects_bad_input():
    with pytest.raises(ValueError):
        score_pattern("PILOTS", "PILOT")
    with pytest.raises(ValueError):
        score_pattern("pilot", "PILOT")
    with pytest.raises(ValueError):
        score_pattern("P1LOT", "PILOT")
    with pytest.raises(TypeError):
        score_pattern(None, "PILOT")
