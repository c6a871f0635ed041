"""
game.py

Plays a Session against a known target word, typing honest feedback for every
suggestion. Used by the starting-letter benchmark and by the tests.

API
---
SolverGame(session, max_guesses=...).play(target) -> GameResult

A game ends when:
  - the suggested word is the target (solved; that guess is counted)
  - the session reports NO_CANDIDATES or SOLVED with another word (failed)
  - max_guesses suggestions have been made without success (failed)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from wordhint.clues import validate_word
from wordhint.feedback import feedback_for
from wordhint.session import Session, Status

logger = logging.getLogger(__name__)

DEFAULT_MAX_GUESSES = 12


@dataclass
class GameResult:
    target: str
    solved: bool
    guesses: int
    status: Status
    history: List[Tuple[str, str]] = field(default_factory=list)


class SolverGame:
    def __init__(self, session: Session, *, max_guesses: int = DEFAULT_MAX_GUESSES) -> None:
        if not isinstance(session, Session):
            raise TypeError("session must be a Session")
        if int(max_guesses) <= 0:
            raise ValueError("max_guesses must be positive")
        self.session = session
        self.max_guesses = int(max_guesses)

    def play(self, target: str) -> GameResult:
        t = validate_word(target)
        suggestion = self.session.reset(t[0])
        history: List[Tuple[str, str]] = []

        while len(history) < self.max_guesses:
            if suggestion.status is Status.NO_CANDIDATES:
                break

            guess: Optional[str] = suggestion.word
            fb = feedback_for(guess, t)
            history.append((guess, fb))

            if guess == t:
                return GameResult(t, True, len(history), suggestion.status, history)
            if suggestion.status is Status.SOLVED:
                # the session is sure of a word that is not the target
                break

            suggestion = self.session.apply_feedback(guess, fb)

        logger.debug("failed on %s after %d guesses (%s)", t, len(history), suggestion.status.value)
        return GameResult(t, False, len(history), suggestion.status, history)
