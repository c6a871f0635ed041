"""
words.py

A single dictionary entry and the two checks the solver runs against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from wordhint.clues import Clue, Verdict, validate_word
from wordhint.config import EXACT_WEIGHT


@dataclass(frozen=True)
class CandidateWord:
    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", validate_word(self.text))

    def __str__(self) -> str:
        return self.text

    def satisfies(self, clue: Clue) -> bool:
        """
        True iff this word is consistent with `clue`:
        - every MATCH position holds clue.letter
        - no ABSENT position holds clue.letter
        - clue.letter occurs at least clue.min_occurrences times
        """
        occur = 0
        for c, verdict in zip(self.text, clue.verdicts):
            if c == clue.letter:
                occur += 1
            if verdict is Verdict.MATCH and c != clue.letter:
                return False
            if verdict is Verdict.ABSENT and c == clue.letter:
                return False
        return occur >= clue.min_occurrences

    def score(self, freq: Mapping[str, Sequence[int]], exact_weight: int = EXACT_WEIGHT) -> int:
        """
        Heuristic value of guessing this word against a positional letter-frequency table.

        For each distinct letter c of the word and each position i:
          exact_weight * freq[c][i]  if this word has c at position i
          freq[c][i]                 otherwise
        Letters missing from `freq` add nothing.
        """
        total = 0
        for c in set(self.text):
            counts: Optional[Sequence[int]] = freq.get(c)
            if counts is None:
                continue
            for i, count in enumerate(counts):
                if self.text[i] == c:
                    total += int(count) * exact_weight
                else:
                    total += int(count)
        return total
