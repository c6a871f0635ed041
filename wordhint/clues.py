"""
clues.py

Turns a guess plus its per-position feedback codes into clues, one per distinct
letter of the guess.

Feedback codes
--------------
- 'c' : the letter is at this exact position
- 'w' : the letter is in the word, but not at this position
- 'a' / 'x' / 'b' / '-' / '.' : the letter is absent at this position
  (with lenient=True any other character also means absent)

Clue semantics
--------------
A Clue carries one letter, a lower bound on its number of occurrences, and a
verdict for every position:
- MATCH   : the letter must be at this position
- ABSENT  : the letter must not be at this position
- ALLOWED : nothing is known here; the letter may or may not be present

Occurrence bound
----------------
min_occurrences = correct + (1 if any 'w' was reported for the letter)

This is a conservative lower bound, not an exact count: two 'w' reports for a
doubled letter still only require one unplaced occurrence. Filtering and scoring
downstream are tuned to this bound, so it is kept as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from wordhint.config import ABSENT_CODES, CORRECT, WORD_LEN, WRONG_PLACE
from wordhint.errors import InputLengthMismatch, InvalidCharacter


class Verdict(Enum):
    MATCH = "match"
    ABSENT = "absent"
    ALLOWED = "allowed"


def _is_az(s: str) -> bool:
    return all("a" <= ch <= "z" for ch in s)


def validate_word(word: str) -> str:
    """Lowercase `word` and check it is exactly WORD_LEN letters a-z."""
    if not isinstance(word, str):
        raise TypeError(f"word must be a string, got {type(word)}")
    w = word.lower()
    if len(w) != WORD_LEN:
        raise InputLengthMismatch(f"word must be {WORD_LEN} letters, got {len(w)}: '{word}'")
    if not _is_az(w):
        raise InvalidCharacter(f"word must contain only letters a-z: '{word}'")
    return w


def validate_feedback(feedback: str, lenient: bool = False) -> str:
    """Lowercase `feedback` and check its length and (unless lenient) its codes."""
    if not isinstance(feedback, str):
        raise TypeError(f"feedback must be a string, got {type(feedback)}")
    fb = feedback.lower()
    if len(fb) != WORD_LEN:
        raise InputLengthMismatch(f"feedback must be {WORD_LEN} codes, got {len(fb)}: '{feedback}'")
    if not lenient:
        for i, code in enumerate(fb):
            if code not in (CORRECT, WRONG_PLACE) and code not in ABSENT_CODES:
                raise InvalidCharacter(
                    f"feedback[{i}] must be 'c', 'w' or one of {''.join(sorted(ABSENT_CODES))!r}, got {code!r}"
                )
    return fb


def validate_letter(letter: str) -> str:
    """Lowercase a single seed letter and check it is a-z."""
    if not isinstance(letter, str):
        raise TypeError(f"letter must be a string, got {type(letter)}")
    ch = letter.lower()
    if len(ch) != 1:
        raise InputLengthMismatch(f"expected a single letter, got '{letter}'")
    if not _is_az(ch):
        raise InvalidCharacter(f"letter must be a-z, got '{letter}'")
    return ch


@dataclass(frozen=True)
class Clue:
    letter: str
    min_occurrences: int
    verdicts: Tuple[Verdict, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.letter, str) or len(self.letter) != 1 or not _is_az(self.letter):
            raise InvalidCharacter(f"clue letter must be a single a-z letter, got {self.letter!r}")
        if not isinstance(self.min_occurrences, int) or self.min_occurrences < 0:
            raise ValueError(f"min_occurrences must be a non-negative int, got {self.min_occurrences!r}")
        verdicts = tuple(self.verdicts)
        if len(verdicts) != WORD_LEN:
            raise InputLengthMismatch(f"clue needs {WORD_LEN} verdicts, got {len(verdicts)}")
        for i, v in enumerate(verdicts):
            if not isinstance(v, Verdict):
                raise TypeError(f"verdicts[{i}] must be a Verdict, got {type(v)}: {v!r}")
        object.__setattr__(self, "verdicts", verdicts)

    @property
    def is_resolved(self) -> bool:
        """True when every position has a definite MATCH/ABSENT verdict."""
        return Verdict.ALLOWED not in self.verdicts

    @classmethod
    def seed(cls, letter: str) -> "Clue":
        """Clue pinning `letter` to the first position and leaving the rest open."""
        return cls(
            letter=letter,
            min_occurrences=1,
            verdicts=(Verdict.MATCH,) + (Verdict.ALLOWED,) * (WORD_LEN - 1),
        )


def _build_clue(letter: str, guess: str, feedback: str) -> Clue:
    # None marks a position not yet resolved; it never leaves this function
    slots: List[Optional[Verdict]] = [None] * WORD_LEN
    correct = wrong_place = wrong = 0

    for i, (g, code) in enumerate(zip(guess, feedback)):
        if g != letter:
            continue
        if code == CORRECT:
            correct += 1
            slots[i] = Verdict.MATCH
        elif code == WRONG_PLACE:
            wrong_place += 1
            slots[i] = Verdict.ABSENT
        else:
            wrong += 1
            slots[i] = Verdict.ABSENT

    # One confirmed-absent copy means no further copy can exist anywhere else
    fill = Verdict.ABSENT if wrong > 0 else Verdict.ALLOWED
    verdicts = tuple(fill if v is None else v for v in slots)

    occur = correct + (1 if wrong_place > 0 else 0)
    return Clue(letter=letter, min_occurrences=occur, verdicts=verdicts)


def clues_from_feedback(guess: str, feedback: str, lenient: bool = False) -> List[Clue]:
    """
    Build one clue per distinct letter of `guess`, in ascending letter order.

    Raises InputLengthMismatch / InvalidCharacter before doing any work.

    Example
    -------
    guess 'crane', feedback 'wacwa' ->
      'a': min 1, [ALLOWED, ALLOWED, MATCH, ALLOWED, ALLOWED]
      'c': min 1, [ABSENT, ALLOWED, ALLOWED, ALLOWED, ALLOWED]
      'e': min 0, [ABSENT] * 5
      'n': min 1, [ALLOWED, ALLOWED, ALLOWED, ABSENT, ALLOWED]
      'r': min 0, [ABSENT] * 5
    """
    g = validate_word(guess)
    fb = validate_feedback(feedback, lenient=lenient)
    return [_build_clue(ch, g, fb) for ch in sorted(set(g))]
