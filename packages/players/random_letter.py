"""
Random Letter guesser.

Strategy:
  - Choose uniformly at random among the letters not guessed yet.

Notes:
  - Deterministic across runs with the same seed (via BaseGuesser.rng).
  - A baseline to exercise the pipeline; it ignores the pattern entirely.
"""

from __future__ import annotations

from typing import List
from .base import BaseGuesser, register


@register
class RandomLetterGuesser(BaseGuesser):
    id = "random_letter"
    name = "Random Letter"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "guessed": letters guessed so far this round (set)

        Returns:
            A single unguessed letter.
        """
        pool: List[str] = self.unguessed(state["guessed"])
        if not pool:
            raise ValueError("every letter has already been guessed")
        return pool[self.rng.randrange(len(pool))]
