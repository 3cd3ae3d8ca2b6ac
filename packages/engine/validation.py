"""
Lightweight guess validation.

A guess is acceptable iff:
  - it is a string
  - it is exactly one character
  - that character is not the blank marker

Any other character is fair game: dictionary words may hold digits or
apostrophes, and those slots must stay revealable. Restricting play to a
particular alphabet is the dictionary loader's job (see load_dictionary).

"Already guessed" is a property of the round, not of the letter, so the round
state machine checks it separately (see HangmanManager.already_guessed).
"""

from .pattern import BLANK


def validate_letter(letter) -> bool:
    """Return True if `letter` is a valid hangman guess per the rules above."""
    if not isinstance(letter, str):
        return False
    return len(letter) == 1 and letter != BLANK
