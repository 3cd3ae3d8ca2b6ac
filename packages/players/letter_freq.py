"""
Letter-Frequency guesser (document frequency over consistent words).

Idea:
  - Rebuild the candidate set from public information: dictionary words of
    the round's length that render to the current pattern under the letters
    guessed so far.
  - For every unguessed letter, count how many of those words contain it
    at least once. Guess the letter with the highest count; break ties with
    the seeded RNG.

Why it works:
  - The letter in the most candidates is the one most likely to be revealed,
    whatever family the adversary keeps.

Notes:
  - The presence matrix is (words x letters) booleans; column sums are the
    document frequencies.
  - When no word is consistent (the dictionary given to the guesser differs
    from the manager's), fall back to a random unguessed letter.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .base import BaseGuesser, register
from packages.engine.constraints import filter_candidates


@register
class LetterFreqGuesser(BaseGuesser):
    id = "letter_freq"
    name = "Letter Frequency (per word)"
    version = "1.0.0"

    def _presence_counts(self, words: List[str], letters: List[str]) -> np.ndarray:
        """counts[j] = number of words containing letters[j]."""
        index = {ch: j for j, ch in enumerate(letters)}
        present = np.zeros((len(words), len(letters)), dtype=bool)
        for i, w in enumerate(words):
            for ch in set(w):
                j = index.get(ch)
                if j is not None:
                    present[i, j] = True
        return present.sum(axis=0)

    def next_guess(self, state: dict) -> str:
        guessed = state["guessed"]
        pool: List[str] = self.unguessed(guessed)
        if not pool:
            raise ValueError("every letter has already been guessed")

        consistent = filter_candidates(
            state.get("words", self.words), state["pattern"], guessed, self.length)
        if not consistent:
            return pool[self.rng.randrange(len(pool))]

        counts = self._presence_counts(consistent, pool)
        best = np.flatnonzero(counts == counts.max())

        # Deterministic tie-break using the guesser RNG.
        return pool[int(best[self.rng.randrange(len(best))])]
