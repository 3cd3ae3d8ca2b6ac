"""
Round harness: play one complete round between a manager and a guesser.

- play_round: prepare the round, let the guesser guess until the pattern is
  fully revealed or the wrong-guess budget is spent, then materialize the
  secret word.

The guesser only sees public information (pattern, guessed letters, budget,
dictionary words of the round's length), never the manager's live candidates.
This function is UI-agnostic so the CLI, a notebook, or tests can reuse it.
"""

from __future__ import annotations
import time
from typing import Dict, List, Tuple

from packages.engine import Difficulty, is_revealed

# Default wrong-guess budget for a round, as in the classic paper game.
DEFAULT_GUESSES = 6


def play_round(
        manager,
        guesser,
        *,
        length: int,
        num_guesses: int = DEFAULT_GUESSES,
        difficulty: Difficulty = Difficulty.HARD,
        seed: int | None = None,
) -> Dict:
    """
    Execute one round until the player wins or runs out of wrong guesses.

    Args:
        manager:     a HangmanManager holding the dictionary
        guesser:     an object implementing BaseGuesser with next_guess(state)
        length:      word length for the round
        num_guesses: wrong-guess budget (> 0)
        difficulty:  manager difficulty for the round
        seed:        RNG seed to make guesser tie-breaks reproducible

    Returns:
        dict with keys:
            won (bool), guesses (int), guesses_left (int), pattern (str),
            secret (str), difficulty (str), time_ms (float),
            history (list[(letter, pattern, guesses_left, num_words)])
    """
    manager.prep_for_round(length, num_guesses, difficulty)

    # The guesser gets the same dictionary, filtered to this round's length
    words = sorted(w for w in manager.dictionary if len(w) == length)
    guesser.reset(words=words, length=length, seed=seed)

    # History accumulates one row per guess for logging and display
    history: List[Tuple[str, str, int, int]] = []

    t0 = time.time()
    turn = 0
    while manager.guesses_left > 0 and not is_revealed(manager.pattern):
        if not guesser.unguessed(set(manager.letters_guessed)):
            break  # alphabet exhausted; nothing left to try
        turn += 1
        state = {
            "turn": turn,
            "length": length,
            "pattern": manager.pattern,
            "guessed": set(manager.letters_guessed),
            "guesses_left": manager.guesses_left,
            "words": words,
        }

        letter = guesser.next_guess(state)
        manager.make_guess(letter)
        history.append(
            (letter, manager.pattern, manager.guesses_left, manager.num_words_current()))

    dt = (time.time() - t0) * 1000.0
    return {
        "won": is_revealed(manager.pattern),
        "guesses": len(history),
        "guesses_left": manager.guesses_left,
        "pattern": manager.pattern,
        "secret": manager.get_secret_word(),
        "difficulty": manager.difficulty.value,
        "time_ms": dt,
        "history": history,
    }
