"""
Family ranker and selector.

Ranking (most adversarial first):
  1) larger family first          (more ambiguity survives)
  2) more blank slots first       (less information revealed)
  3) pattern string ascending     (makes the order total and deterministic)

Difficulty policy, applied on top of the ranking:
  - HARD   : always the top-ranked family.
  - EASY   : the second-ranked family when turn_index % 2 == 0.
  - MEDIUM : the second-ranked family when turn_index % 4 == 0.
On a mercy turn with a single family there is nothing to give up, so the
top-ranked family is returned.

turn_index is the number of distinct letters guessed BEFORE the current guess
is recorded (0 on the first guess of a round).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Mapping, Sized, Tuple, Union

from .pattern import count_blanks


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: Union[str, "Difficulty"]) -> "Difficulty":
        """Accept a Difficulty or its (case-insensitive) name."""
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError as e:
            raise ValueError(
                f"Unknown difficulty: {name!r}. Available: {[d.value for d in cls]}") from e


# How often each difficulty shows mercy. HARD never does.
MERCY_MODULUS: Dict[Difficulty, int] = {
    Difficulty.EASY: 2,
    Difficulty.MEDIUM: 4,
}

RankedFamily = Tuple[str, int]  # (pattern, size)


def family_rank_key(pattern: str, size: int) -> Tuple[int, int, str]:
    """Sort key: ascending order of this tuple == most adversarial first."""
    return -size, -count_blanks(pattern), pattern


def _size(family: Union[int, Sized]) -> int:
    return family if isinstance(family, int) else len(family)


def rank_families(families: Mapping[str, Union[int, Sized]]) -> List[RankedFamily]:
    """
    Order families from most to least adversarial.

    `families` maps pattern -> word set, or pattern -> size (the breakdown
    returned by a guess); both rank the same way.
    """
    ranked = [(patt, _size(fam)) for patt, fam in families.items()]
    ranked.sort(key=lambda pf: family_rank_key(pf[0], pf[1]))
    return ranked


def is_mercy_turn(difficulty: Difficulty, turn_index: int) -> bool:
    modulus = MERCY_MODULUS.get(difficulty)
    if modulus is None:
        return False
    return turn_index % modulus == 0


def choose_rank(difficulty: Difficulty, turn_index: int, num_families: int) -> int:
    """Index into the ranked families that the difficulty policy picks."""
    if is_mercy_turn(difficulty, turn_index) and num_families > 1:
        return 1
    return 0


def select_family(
        families: Mapping[str, Union[int, Sized]],
        difficulty: Difficulty,
        turn_index: int,
) -> str:
    """
    Pick the pattern of the family the round moves to.

    Raises:
      ValueError if `families` is empty (there is nothing to choose from).
    """
    if not families:
        raise ValueError("cannot select from an empty set of families")
    ranked = rank_families(families)
    return ranked[choose_rank(difficulty, turn_index, len(ranked))][0]
