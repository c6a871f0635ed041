"""
dictionary.py

An ordered set of candidate words plus the letters already fully resolved.

Supports
--------
- in-place filtering by a clue
- positional letter-frequency statistics over the remaining words
- ranking by the guess score heuristic
- loading from a newline-delimited word list or a CSV with a word column
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set, Union

import numpy as np
import pandas as pd

from wordhint.clues import Clue
from wordhint.config import EXACT_WEIGHT, WORD_LEN
from wordhint.errors import DictionaryLoadFailure
from wordhint.words import CandidateWord

logger = logging.getLogger(__name__)

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def _li(c: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(c) - 97


class LetterFrequency(Mapping):
    """
    Read-only letter -> per-position counts view over a (26, WORD_LEN) matrix.

    freq['e'][2] is the number of words with 'e' at position 2.
    """

    def __init__(self, counts: np.ndarray) -> None:
        if counts.shape != (len(ALPHABET), WORD_LEN):
            raise ValueError(f"counts must have shape (26, {WORD_LEN}), got {counts.shape}")
        self._counts = counts
        self._counts.setflags(write=False)

    def __getitem__(self, letter: str) -> np.ndarray:
        if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
            raise KeyError(letter)
        return self._counts[_li(letter)]

    def __iter__(self) -> Iterator[str]:
        return iter(ALPHABET)

    def __len__(self) -> int:
        return len(ALPHABET)


class Dictionary:
    def __init__(
        self,
        words: Iterable[Union[CandidateWord, str]] = (),
        resolved_letters: Iterable[str] = (),
    ) -> None:
        self._words: List[CandidateWord] = [
            w if isinstance(w, CandidateWord) else CandidateWord(w) for w in words
        ]
        self.resolved_letters: Set[str] = set(resolved_letters)

    # ---------- Construction helpers ----------

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Dictionary":
        """
        Build a dictionary from raw lines, keeping file order.

        A line is kept if, once trimmed and lowercased, it is exactly WORD_LEN
        letters a-z. Everything else is ignored.
        """
        words: List[CandidateWord] = []
        for line in lines:
            w = line.strip().lower()
            if len(w) != WORD_LEN:
                continue
            if not all(ch in ALPHABET for ch in w):
                continue
            words.append(CandidateWord(w))
        return cls(words)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Dictionary":
        """
        Load a newline-delimited word list.

        Raises
        ------
        DictionaryLoadFailure
            If the file cannot be read or contains no usable word.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                d = cls.from_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadFailure(f"cannot read word list {path}: {e}") from e
        return cls._checked(d, path)

    @classmethod
    def from_csv(cls, path: Union[str, Path], column: str = "word") -> "Dictionary":
        """
        Load words from column `column` of a CSV file.

        Values are kept as strings ('null', 'nan' are words too) and go through the
        same trimming and length filter as from_lines.
        """
        path = Path(path)
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise DictionaryLoadFailure(f"cannot read word list {path}: {e}") from e
        if column not in df.columns:
            raise DictionaryLoadFailure(f"column '{column}' not found in {path}")
        d = cls.from_lines(df[column].tolist())
        return cls._checked(d, path)

    @classmethod
    def load(cls, path: Union[str, Path], column: str = "word") -> "Dictionary":
        """Load `path` as CSV if it has a .csv suffix, else as a plain word list."""
        path = Path(path)
        if path.suffix.lower() == ".csv":
            return cls.from_csv(path, column=column)
        return cls.from_file(path)

    @classmethod
    def _checked(cls, d: "Dictionary", path: Path) -> "Dictionary":
        if len(d) == 0:
            raise DictionaryLoadFailure(f"no valid {WORD_LEN}-letter words found in {path}")
        logger.info("loaded %d words from %s", len(d), path)
        return d

    def clone(self) -> "Dictionary":
        """Independent copy: filtering or sorting the copy leaves this one untouched."""
        return Dictionary(list(self._words), self.resolved_letters)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[CandidateWord]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        if isinstance(word, CandidateWord):
            return word in self._words
        if isinstance(word, str):
            return any(w.text == word for w in self._words)
        return False

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, resolved={sorted(self.resolved_letters)})"

    def texts(self) -> List[str]:
        return [w.text for w in self._words]

    # ---------- Solver operations ----------

    def filter(self, clue: Clue) -> None:
        """
        Keep only the words satisfying `clue`.

        If the clue leaves no position open, its letter is recorded as resolved and
        stops counting towards letter frequencies.
        """
        if clue.is_resolved:
            self.resolved_letters.add(clue.letter)

        before = len(self._words)
        self._words = [w for w in self._words if w.satisfies(clue)]
        logger.debug("clue %r: %d -> %d words", clue.letter, before, len(self._words))

    def char_frequency(self) -> LetterFrequency:
        """
        Count, for every letter and position, how many words have that letter there.

        Rows of resolved letters are zeroed: guessing them again tells nothing new.
        """
        codes = np.array(
            [[_li(c) for c in w.text] for w in self._words], dtype=np.int64
        ).reshape(-1, WORD_LEN)

        counts = np.zeros((len(ALPHABET), WORD_LEN), dtype=np.int64)
        for pos in range(WORD_LEN):
            counts[:, pos] = np.bincount(codes[:, pos], minlength=len(ALPHABET))

        for c in self.resolved_letters:
            counts[_li(c), :] = 0

        return LetterFrequency(counts)

    def rank_best(self, freq: Mapping, exact_weight: int = EXACT_WEIGHT) -> CandidateWord:
        """
        Sort the words by descending score (stable, in place) and return the best.

        Membership is unchanged; only the order is. Ties keep their current order.
        """
        if not self._words:
            raise ValueError("cannot rank an empty dictionary")
        self._words.sort(key=lambda w: -w.score(freq, exact_weight))
        return self._words[0]

    def first(self) -> Optional[CandidateWord]:
        return self._words[0] if self._words else None
