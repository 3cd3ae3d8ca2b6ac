"""
Candidate partitioner.

Given:
  - the current candidate set (words of uniform length N)
  - the letters guessed before this turn
  - the new guess

Return:
  - a mapping pattern -> family, where the family is every candidate that
    would display that pattern once the new guess is revealed.

The families partition the candidates exactly: every candidate lands in one
family, no family is empty, and their union is the input set. The function is
pure; the same inputs always give the same grouping.
"""

from __future__ import annotations

from collections import defaultdict
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Mapping

from .pattern import render_pattern

Families = Dict[str, FrozenSet[str]]


def partition(
        candidates: Iterable[str],
        guessed_letters: AbstractSet[str],
        new_guess: str,
) -> Families:
    """
    Group `candidates` by the pattern each would produce.

    Args:
      candidates      : live words (all the same length)
      guessed_letters : letters guessed before this turn
      new_guess       : the letter being guessed now

    Returns:
      Dict[pattern, frozenset of words]. Empty input gives an empty dict.

    Example:
      partition({"bat", "bet", "bit"}, set(), "a")
        -> {"-a-": {"bat"}, "---": {"bet", "bit"}}
    """
    revealed = frozenset(guessed_letters) | {new_guess}

    buckets: Dict[str, List[str]] = defaultdict(list)
    # localize for speed; this loop runs once per live candidate per guess
    _render = render_pattern
    for word in candidates:
        buckets[_render(word, revealed)].append(word)

    return {patt: frozenset(words) for patt, words in buckets.items()}


def family_sizes(families: Mapping[str, AbstractSet[str]]) -> Dict[str, int]:
    """
    Size-per-pattern breakdown, keys in ascending pattern order.
    This is what a guess reports back for testing and debugging.
    """
    return {patt: len(families[patt]) for patt in sorted(families)}
