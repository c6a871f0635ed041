import pytest

from wordhint.clues import Clue, Verdict, clues_from_feedback, validate_feedback, validate_letter
from wordhint.dictionary import Dictionary
from wordhint.errors import InputLengthMismatch, InvalidCharacter

M, A, O = Verdict.MATCH, Verdict.ABSENT, Verdict.ALLOWED


def test_crane_wacwa_produces_exact_clue_sequence():
    clues = clues_from_feedback("crane", "wacwa")
    assert clues == [
        Clue("a", 1, (O, O, M, O, O)),
        Clue("c", 1, (A, O, O, O, O)),
        Clue("e", 0, (A, A, A, A, A)),
        Clue("n", 1, (O, O, O, A, O)),
        Clue("r", 0, (A, A, A, A, A)),
    ]


def test_one_clue_per_distinct_letter_in_ascending_order():
    clues = clues_from_feedback("geese", "xxxxx")
    assert [c.letter for c in clues] == ["e", "g", "s"]


def test_absent_copy_closes_every_other_position():
    # e at 0 correct, the two other e's absent: no further e anywhere
    (e, i, r) = clues_from_feedback("eerie", "cxxxx")
    assert e.letter == "e"
    assert e.verdicts == (M, A, A, A, A)
    assert e.min_occurrences == 1
    assert e.is_resolved
    assert i.is_resolved and r.is_resolved


def test_wrong_place_plus_absent_copy_rejects_every_word():
    # the absent second e closes every position, including the open ones
    clues = {c.letter: c for c in clues_from_feedback("speed", "xxwxx")}
    e = clues["e"]
    assert e == Clue("e", 1, (A, A, A, A, A))
    assert e.is_resolved

    d = Dictionary(["ethos", "geese", "lever", "abbey"])
    d.filter(e)
    assert len(d) == 0
    assert "e" in d.resolved_letters


def test_double_wrong_place_only_requires_one_occurrence():
    # known heuristic: two 'w' reports for a doubled letter still give min 1
    clues = {c.letter: c for c in clues_from_feedback("speed", "xxwwx")}
    e = clues["e"]
    assert e.min_occurrences == 1
    assert e.verdicts == (O, O, A, A, O)
    assert not e.is_resolved


def test_correct_plus_wrong_place_counts_both():
    clues = {c.letter: c for c in clues_from_feedback("speed", "xxcwx")}
    assert clues["e"].min_occurrences == 2
    assert clues["e"].verdicts == (O, O, M, A, O)


def test_input_is_lowercased():
    assert clues_from_feedback("CRANE", "WACWA") == clues_from_feedback("crane", "wacwa")


def test_length_mismatch_is_rejected():
    with pytest.raises(InputLengthMismatch):
        clues_from_feedback("cran", "wacw")
    with pytest.raises(InputLengthMismatch):
        clues_from_feedback("crane", "wacw")


def test_padded_input_is_rejected():
    with pytest.raises(InputLengthMismatch):
        clues_from_feedback(" crane", "wacwa")
    with pytest.raises(InputLengthMismatch):
        clues_from_feedback("crane", "wacwa ")
    with pytest.raises(InputLengthMismatch):
        validate_feedback("\tcxwxx")
    with pytest.raises(InputLengthMismatch):
        validate_letter(" s")


def test_non_letter_guess_is_rejected():
    with pytest.raises(InvalidCharacter):
        clues_from_feedback("cr4ne", "wacwa")


def test_unknown_feedback_code_strict_vs_lenient():
    with pytest.raises(InvalidCharacter):
        clues_from_feedback("crane", "wzcwz")
    assert clues_from_feedback("crane", "wzcwz", lenient=True) == clues_from_feedback("crane", "wacwa")


def test_validate_feedback_accepts_all_absent_codes():
    assert validate_feedback("ax-.b") == "ax-.b"


def test_validate_letter():
    assert validate_letter("S") == "s"
    with pytest.raises(InputLengthMismatch):
        validate_letter("st")
    with pytest.raises(InvalidCharacter):
        validate_letter("7")


def test_seed_clue_pins_first_position():
    clue = Clue.seed("s")
    assert clue.letter == "s"
    assert clue.min_occurrences == 1
    assert clue.verdicts == (M, O, O, O, O)
    assert not clue.is_resolved


def test_clue_rejects_unresolved_or_missing_verdicts():
    with pytest.raises(TypeError):
        Clue("a", 1, (M, None, O, O, O))
    with pytest.raises(InputLengthMismatch):
        Clue("a", 1, (M, O, O))
    with pytest.raises(InvalidCharacter):
        Clue("ab", 1, (M, O, O, O, O))
