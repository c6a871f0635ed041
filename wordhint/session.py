"""
session.py

One solving session: the full source dictionary, the words that can still be the
answer, and the pool guesses are drawn from.

API
---
reset(letter) -> Suggestion
    Start over with the answer known to begin with `letter`.
apply_feedback(guess, feedback) -> Suggestion      (alias: submit_feedback)
    Narrow the answers with the feedback for `guess` and suggest the next guess.
next_guess() -> Suggestion
    NO_CANDIDATES if nothing is left, SOLVED if exactly one word is left,
    otherwise GUESS with the best-scoring word of the guess pool.

Every public call holds the session lock for its whole duration, and input is
validated before anything is mutated.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from wordhint.clues import Clue, clues_from_feedback, validate_feedback, validate_letter, validate_word
from wordhint.config import SolverConfig
from wordhint.dictionary import Dictionary

logger = logging.getLogger(__name__)


class Status(Enum):
    GUESS = "guess"
    SOLVED = "solved"
    NO_CANDIDATES = "no_candidates"


@dataclass(frozen=True)
class Suggestion:
    status: Status
    word: Optional[str] = None
    remaining: int = 0

    @property
    def done(self) -> bool:
        return self.status is not Status.GUESS


class Session:
    def __init__(self, source: Dictionary, config: Optional[SolverConfig] = None) -> None:
        if not isinstance(source, Dictionary):
            raise TypeError("source must be a Dictionary")

        self.config = config if config is not None else SolverConfig()
        self.source = source
        self.answers = Dictionary()
        self.guess_pool = Dictionary()
        self._history: List[Tuple[str, str]] = []
        self._lock = threading.Lock()

    # -------------------------
    # Core API
    # -------------------------
    def reset(self, letter: str) -> Suggestion:
        """Start a new session whose answer is known to begin with `letter`."""
        ch = validate_letter(letter)
        with self._lock:
            words = self.source.clone()
            words.filter(Clue.seed(ch))

            self.answers = words
            self.guess_pool = words.clone()
            self._history = []
            logger.info("reset on %r: %d candidates", ch, len(self.answers))
            return self._next_guess()

    def apply_feedback(self, guess: str, feedback: str) -> Suggestion:
        """Apply the feedback reported for `guess` and return the next suggestion."""
        g = validate_word(guess)
        fb = validate_feedback(feedback, lenient=self.config.lenient_feedback)
        clues = clues_from_feedback(g, fb, lenient=self.config.lenient_feedback)
        with self._lock:
            for clue in clues:
                self.answers.filter(clue)
                if self.config.narrow_guess_pool:
                    self.guess_pool.filter(clue)
            self._history.append((g, fb))
            return self._next_guess()

    submit_feedback = apply_feedback

    def next_guess(self) -> Suggestion:
        with self._lock:
            return self._next_guess()

    # -------------------------
    # Helpers
    # -------------------------
    def _next_guess(self) -> Suggestion:
        n = len(self.answers)
        if n == 0:
            return Suggestion(Status.NO_CANDIDATES, remaining=0)
        if n == 1:
            return Suggestion(Status.SOLVED, self.answers.first().text, remaining=1)

        freq = self.answers.char_frequency()
        best = self.guess_pool.rank_best(freq, self.config.exact_weight)
        logger.debug("suggesting %s (%d candidates left)", best.text, n)
        return Suggestion(Status.GUESS, best.text, remaining=n)

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def history(self) -> List[Tuple[str, str]]:
        return list(self._history)
