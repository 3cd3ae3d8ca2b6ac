"""
Candidate filtering from public information.

Given:
  - a pool of words (e.g., the whole dictionary)
  - the current pattern shown to the player
  - the set of letters guessed so far
  - target word length N

Return:
  - words that are consistent with what the player can see: every revealed
    slot matches, and no blank slot hides an already-guessed letter.

The round state machine never needs this (it tracks the live candidates
itself). Guessers do: they only see the pattern and the guessed letters, and
rebuild the candidate set from the dictionary on every turn.
"""

from typing import AbstractSet, Iterable, List

from .pattern import render_pattern


def filter_candidates(
        words: Iterable[str],
        pattern: str,
        guessed: AbstractSet[str],
        N: int,
) -> List[str]:
    """
    Keep only words (length == N) that would display exactly `pattern`
    under the letters in `guessed`.

    Args:
      words   : iterable of candidate words
      pattern : pattern currently shown (length N)
      guessed : every letter guessed this round
      N       : expected word length

    Returns:
      List[str] of consistent words (order preserved as in `words`).
    """
    out: List[str] = []
    revealed = frozenset(guessed)

    for w in words:
        if len(w) != N:
            continue

        # Rendering the word under the same guesses must reproduce the pattern;
        # a guessed letter hiding behind a blank would render as itself.
        if render_pattern(w, revealed) == pattern:
            out.append(w)

    return out
