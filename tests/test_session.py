import pytest

from wordhint.config import SolverConfig
from wordhint.dictionary import Dictionary
from wordhint.errors import InputLengthMismatch, InvalidCharacter
from wordhint.feedback import feedback_for
from wordhint.session import Session, Status

C_WORDS = ["crane", "crate", "caddy", "cabin"]

MIXED = [
    "crane", "crate", "caddy", "cabin", "cigar", "crepe", "slate", "shard",
    "stare", "spine", "speed", "geese", "eerie", "ethos", "lever", "abbey",
]


@pytest.fixture
def session():
    return Session(Dictionary(C_WORDS + ["slate"]))


def test_next_guess_before_reset_has_no_candidates():
    assert Session(Dictionary(C_WORDS)).next_guess().status is Status.NO_CANDIDATES


def test_reset_anchors_on_first_letter(session):
    s = session.reset("c")
    assert s.status is Status.GUESS
    # crane scores highest against the four c-words
    assert s.word == "crane"
    assert sorted(session.answers.texts()) == sorted(C_WORDS)
    assert sorted(session.guess_pool.texts()) == sorted(C_WORDS)
    assert s.remaining == 4


def test_reset_with_single_or_no_match(session):
    s = session.reset("s")
    assert s.status is Status.SOLVED
    assert s.word == "slate"
    assert session.reset("z").status is Status.NO_CANDIDATES


def test_feedback_narrows_to_target(session):
    session.reset("c")
    s = session.apply_feedback("crane", "cxwxx")
    assert s.status is Status.SOLVED
    assert s.word == "caddy"
    assert session.answers.texts() == ["caddy"]
    assert {"e", "n", "r"} <= session.answers.resolved_letters
    assert session.history == [("crane", "cxwxx")]


def test_submit_feedback_is_an_alias(session):
    session.reset("c")
    assert session.submit_feedback("crane", "cccxc").word == "crate"


def test_single_answer_skips_guess_pool():
    session = Session(Dictionary(C_WORDS))
    session.answers = Dictionary(["crane"])
    session.guess_pool = Dictionary()  # ranking an empty pool would raise
    s = session.next_guess()
    assert s.status is Status.SOLVED
    assert s.word == "crane"


def test_no_candidates_persists_until_reset(session):
    session.reset("c")
    assert session.apply_feedback("crane", "xxxxx").status is Status.NO_CANDIDATES
    assert session.next_guess().status is Status.NO_CANDIDATES
    assert session.apply_feedback("cabin", "ccccc").status is Status.NO_CANDIDATES
    assert session.reset("c").status is Status.GUESS


def test_invalid_input_leaves_state_unchanged(session):
    session.reset("c")
    before = session.answers.texts()
    with pytest.raises(InputLengthMismatch):
        session.apply_feedback("cran", "cccc")
    with pytest.raises(InvalidCharacter):
        session.apply_feedback("crane", "cczcc")
    with pytest.raises(InvalidCharacter):
        session.reset("?")
    assert session.answers.texts() == before
    assert session.history == []


def test_lenient_feedback_treats_unknown_codes_as_absent():
    session = Session(Dictionary(C_WORDS), SolverConfig(lenient_feedback=True))
    session.reset("c")
    assert session.apply_feedback("crane", "czwzz").word == "caddy"


def test_guess_pool_is_not_narrowed_by_default(session):
    session.reset("c")
    session.apply_feedback("crane", "cxwxx")
    assert len(session.answers) < len(session.guess_pool)
    assert "crane" in session.guess_pool
    assert "crane" not in session.answers


def test_guess_pool_narrowed_when_configured():
    session = Session(Dictionary(C_WORDS), SolverConfig(narrow_guess_pool=True))
    session.reset("c")
    session.apply_feedback("crane", "cxwxx")
    assert session.guess_pool.texts() == ["caddy"]


def test_answers_shrink_monotonically():
    session = Session(Dictionary(MIXED))
    s = session.reset("c")
    sizes = [s.remaining]
    while s.status is Status.GUESS and len(sizes) < 10:
        s = session.apply_feedback(s.word, feedback_for(s.word, "cigar"))
        sizes.append(s.remaining)
    assert sizes == sorted(sizes, reverse=True)


@pytest.mark.parametrize("target", MIXED)
def test_target_is_never_filtered_out(target):
    session = Session(Dictionary(MIXED))
    s = session.reset(target[0])
    assert target in session.answers
    for _ in range(10):
        if s.status is not Status.GUESS:
            break
        s = session.apply_feedback(s.word, feedback_for(s.word, target))
        assert target in session.answers
    assert s.status is not Status.NO_CANDIDATES
    if s.status is Status.SOLVED:
        assert s.word == target


@pytest.mark.parametrize("target", MIXED)
def test_narrowed_pool_always_ends_on_target(target):
    session = Session(Dictionary(MIXED), SolverConfig(narrow_guess_pool=True))
    s = session.reset(target[0])
    for _ in range(len(MIXED)):
        if s.status is not Status.GUESS:
            break
        s = session.apply_feedback(s.word, feedback_for(s.word, target))
    assert s.status is Status.SOLVED
    assert s.word == target
    assert session.answers.texts() == [target]


def test_suggestion_carries_candidate_count(session):
    s = session.reset("c")
    assert s.remaining == len(session.answers) == 4
    s = session.apply_feedback("crane", "cxwxx")
    assert (s.status, s.remaining) == (Status.SOLVED, 1)
    s = session.apply_feedback("caddy", "xxxxx")
    assert (s.status, s.remaining) == (Status.NO_CANDIDATES, 0)
    assert session.next_guess().remaining == 0
