from __future__ import annotations

import random

from wordhint.dictionary import Dictionary


class WordSampler:
    def __init__(self, dictionary: Dictionary, seed: int | None = None) -> None:
        if not isinstance(dictionary, Dictionary):
            raise TypeError("dictionary must be a Dictionary")
        if len(dictionary) == 0:
            raise ValueError("dictionary is empty")

        self._texts = dictionary.texts()

        # Deterministic if seed provided
        self._rng = random.Random(seed)

    def choice_word(self) -> str:
        return self._texts[self._rng.randrange(len(self._texts))]

    def sample_words(self, k: int) -> list[str]:
        """Up to `k` distinct words, in random order."""
        if not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        return self._rng.sample(self._texts, min(k, len(self._texts)))
