"""
Round state machine for evil hangman.

The manager never commits to a secret word. It keeps every dictionary word
that is still consistent with the guesses (the live candidates) and, on each
guess:
  1) partitions the candidates into families by the pattern they would show,
  2) ranks the families adversarially and applies the difficulty policy,
  3) adopts the chosen family and its pattern,
  4) charges a wrong guess only if the adopted pattern does not show the letter.

Step 4 is checked against the adopted pattern, not against any single word:
a letter can "miss" even though some discarded candidates contained it.

Lifecycle:
  - Uninitialized until prep_for_round() is called.
  - In a round afterwards; make_guess() is the only mutator.
  - Won / lost are for the caller to observe (pattern fully revealed, or
    guesses_left == 0); the manager only refuses invalid operations.

Each manager owns its round. Hosting several sessions means one manager per
session; nothing here is shared or locked.
"""

from __future__ import annotations

import random
import sys
from typing import Dict, FrozenSet, Iterable, List, TextIO, Tuple

from packages.engine.errors import (
    AlreadyGuessedError,
    EmptyCandidateSetError,
    InvalidGuessError,
    InvalidRoundSetupError,
    RoundNotStartedError,
)
from packages.engine.partition import partition, family_sizes
from packages.engine.pattern import blank_pattern, shows_letter
from packages.engine.selection import Difficulty, choose_rank, is_mercy_turn, rank_families
from packages.engine.validation import validate_letter


class HangmanManager:
    """
    Keeps track of the possible words from a dictionary during a round of
    hangman, based on the guesses so far.

    Args:
        words:  the dictionary for every round this manager hosts (non-empty)
        debug:  print a trace line per decision to `trace`
        rng:    anything with randrange(n); used once per get_secret_word()
        trace:  text stream for debug output (default: sys.stdout)
    """

    def __init__(self, words: Iterable[str], debug: bool = False, *,
                 rng=None, trace: TextIO | None = None):
        self._words: FrozenSet[str] = frozenset(words)
        if not self._words:
            raise InvalidRoundSetupError("the dictionary must contain at least one word")
        self.debug = bool(debug)
        self.rng = rng if rng is not None else random.Random()
        self._trace = trace

        # Round state; None until prep_for_round()
        self._candidates: FrozenSet[str] | None = None
        self._pattern: str = ""
        self._guessed: List[str] = []
        self._guesses_left: int = 0
        self._difficulty: Difficulty | None = None
        self._length: int = 0

    # -------------------------
    # Dictionary
    # -------------------------

    @property
    def dictionary(self) -> FrozenSet[str]:
        """Every word this manager was built with."""
        return self._words

    def num_words(self, length: int) -> int:
        """Number of words in the original dictionary with the given length."""
        return sum(1 for w in self._words if len(w) == length)

    # -------------------------
    # Round setup
    # -------------------------

    def prep_for_round(self, length: int, num_guesses: int, difficulty: Difficulty) -> None:
        """
        Get ready for a new round. Think of a round as one complete game.

        Args:
            length:      word length for this round; num_words(length) > 0
            num_guesses: wrong guesses allowed before the player loses; >= 1
            difficulty:  fixed for the whole round

        Raises:
            InvalidRoundSetupError, leaving any previous round untouched.
        """
        if length <= 0:
            raise InvalidRoundSetupError(f"word length must be positive; got {length}")
        if num_guesses <= 0:
            raise InvalidRoundSetupError(f"guess budget must be positive; got {num_guesses}")
        try:
            difficulty = Difficulty.parse(difficulty)
        except ValueError as e:
            raise InvalidRoundSetupError(str(e)) from e

        candidates = frozenset(w for w in self._words if len(w) == length)
        if not candidates:
            raise InvalidRoundSetupError(f"no dictionary words of length {length}")

        self._candidates = candidates
        self._pattern = blank_pattern(length)
        self._guessed = []
        self._guesses_left = int(num_guesses)
        self._difficulty = difficulty
        self._length = length

    def _require_round(self) -> FrozenSet[str]:
        if self._candidates is None:
            raise RoundNotStartedError("prep_for_round() must be called before playing")
        return self._candidates

    # -------------------------
    # Read-only state
    # -------------------------

    @property
    def guesses_left(self) -> int:
        """Wrong guesses the player has left in this round."""
        self._require_round()
        return self._guesses_left

    @property
    def pattern(self) -> str:
        """Current pattern: '-' for unrevealed slots, letters elsewhere."""
        self._require_round()
        return self._pattern

    @property
    def difficulty(self) -> Difficulty:
        self._require_round()
        return self._difficulty  # type: ignore[return-value]

    @property
    def word_length(self) -> int:
        self._require_round()
        return self._length

    @property
    def candidates(self) -> FrozenSet[str]:
        """Snapshot of the live candidates (never mutated in place)."""
        return self._require_round()

    @property
    def letters_guessed(self) -> Tuple[str, ...]:
        """Letters guessed this round, in the order they were guessed."""
        self._require_round()
        return tuple(self._guessed)

    def num_words_current(self) -> int:
        """Number of words still possible given the guesses so far."""
        return len(self._require_round())

    def guesses_made(self) -> str:
        """Guessed letters in alphabetical order, e.g. "[a, c, e, s, t, z]"."""
        self._require_round()
        return "[" + ", ".join(sorted(self._guessed)) + "]"

    def already_guessed(self, letter: str) -> bool:
        self._require_round()
        return letter in self._guessed

    # -------------------------
    # Guessing
    # -------------------------

    def make_guess(self, letter: str) -> Dict[str, int]:
        """
        Update pattern, budget and live words based on the guess.

        Args:
            letter: one character, not the blank, not guessed yet this round.
                    Case-sensitive: "B" and "b" are different guesses, so
                    fold case before calling if the dictionary is lowercase.

        Returns:
            pattern -> family size for every family this guess produced
            (ascending pattern order); for testing and debugging.

        Raises:
            InvalidGuessError, AlreadyGuessedError; the round is unchanged.
        """
        candidates = self._require_round()
        if not validate_letter(letter):
            raise InvalidGuessError(letter)
        if letter in self._guessed:
            raise AlreadyGuessedError(letter)

        # No state changes until the family is chosen
        turn_index = len(self._guessed)
        families = partition(candidates, frozenset(self._guessed), letter)
        ranked = rank_families(families)
        rank = choose_rank(self._difficulty, turn_index, len(ranked))
        chosen = ranked[rank][0]

        if self.debug:
            self._trace_choice(ranked, rank, turn_index)

        self._candidates = families[chosen]
        self._pattern = chosen
        self._guessed.append(letter)
        if not shows_letter(chosen, letter):
            self._guesses_left -= 1

        return family_sizes(families)

    def _trace_choice(self, ranked: List[Tuple[str, int]], rank: int, turn_index: int) -> None:
        out = self._trace if self._trace is not None else sys.stdout
        mercy = is_mercy_turn(self._difficulty, turn_index)
        if mercy and len(ranked) == 1:
            print("DEBUGGING: Should pick second hardest family this turn, "
                  "but only one family available.", file=out)
        label = "second hardest" if rank == 1 else "hardest"
        pattern, size = ranked[rank]
        print(f"DEBUGGING: Picking {label} family of {len(ranked)}. "
              f"New pattern is: {pattern}. New family has {size} words.", file=out)
        if rank == 1:
            hardest, hardest_size = ranked[0]
            print(f"DEBUGGING: Mercy cost {hardest_size - size} words "
                  f"(hardest family was {hardest} with {hardest_size}).", file=out)

    # -------------------------
    # End of round
    # -------------------------

    def get_secret_word(self) -> str:
        """
        The secret word this round finally settled on. With several words
        left one is chosen at random; it stays in the live set, so repeated
        calls may return different words.

        Raises:
            EmptyCandidateSetError if no live words remain.
        """
        candidates = self._require_round()
        if not candidates:
            raise EmptyCandidateSetError("the set of live words is empty")
        # Sort first so a seeded rng gives the same word across runs
        pool = sorted(candidates)
        return pool[self.rng.randrange(len(pool))]
