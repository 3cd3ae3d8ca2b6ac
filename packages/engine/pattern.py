"""
Hangman patterns: the display string shown to the player.

Conventions:
  - a pattern is a plain str of length N (the round's word length)
  - '-'    : blank = slot not revealed yet
  - letter : revealed = that letter sits in this slot of every live candidate

Patterns compare and sort as ordinary strings. Because '-' sorts before any
letter, "-a-" < "a--"; the family ranker relies on that for its last tie-break.
"""

from __future__ import annotations

from typing import AbstractSet

# Single source of truth for the blank slot marker.
BLANK = "-"


def blank_pattern(length: int) -> str:
    """Return the all-blank pattern a round starts with."""
    if length <= 0:
        raise ValueError(f"pattern length must be positive; got {length}")
    return BLANK * length


def render_pattern(word: str, revealed: AbstractSet[str]) -> str:
    """
    Show `word` as the player would see it if exactly `revealed` letters
    had been guessed.

    Examples:
      render_pattern("bat", {"a"})      -> "-a-"
      render_pattern("bet", {"b", "t"}) -> "b-t"
    """
    return "".join(ch if ch in revealed else BLANK for ch in word)


def count_blanks(pattern: str) -> int:
    return pattern.count(BLANK)


def is_revealed(pattern: str) -> bool:
    """True once no blank slot is left (the player has won)."""
    return BLANK not in pattern


def shows_letter(pattern: str, letter: str) -> bool:
    return letter in pattern


def display_pattern(pattern: str) -> str:
    """Space the slots out for terminals: "b-t" -> "b - t"."""
    return " ".join(pattern)
