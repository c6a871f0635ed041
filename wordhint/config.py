"""
config.py

Fixed constants of the solver plus the few runtime switches a caller may flip.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Word length is a system-wide constant; every word and feedback string has it.
WORD_LEN = 5

# Positional weight used by the guess scoring heuristic.
EXACT_WEIGHT = 4

# Feedback codes
CORRECT = "c"
WRONG_PLACE = "w"
ABSENT_CODES = frozenset("axb-.")

DEFAULT_DICTIONARY = "words_alpha.txt"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SolverConfig:
    """
    Runtime switches for a solving session.

    exact_weight : int
        Multiplier applied when a frequent letter sits where it is frequent.
    narrow_guess_pool : bool
        If True, the guess pool is filtered with every clue as well. By default it
        is seeded at reset and left alone, so guesses come from the reset-time
        candidate space.
    lenient_feedback : bool
        If True, any feedback code other than 'c'/'w' counts as absent.
        If False, only the recognized absent codes are accepted.
    dictionary_path : str
        Word list loaded by the CLI and the HTTP server.
    """

    exact_weight: int = EXACT_WEIGHT
    narrow_guess_pool: bool = False
    lenient_feedback: bool = False
    dictionary_path: str = DEFAULT_DICTIONARY

    def __post_init__(self) -> None:
        if not isinstance(self.exact_weight, int) or self.exact_weight < 1:
            raise ValueError(f"exact_weight must be a positive integer, got {self.exact_weight!r}")

    @classmethod
    def from_env(cls) -> "SolverConfig":
        """Build a config from WORDHINT_* environment variables, falling back to defaults."""
        return cls(
            narrow_guess_pool=_env_flag("WORDHINT_NARROW_POOL", False),
            lenient_feedback=_env_flag("WORDHINT_LENIENT", False),
            dictionary_path=os.getenv("WORDHINT_DICT", DEFAULT_DICTIONARY),
        )
