"""
Error types for a round of evil hangman.

All of them are caller precondition violations: they are raised synchronously
from the call that broke the rule, and the round state is left exactly as it
was before that call. They subclass ValueError so callers that only care
about "bad argument" can keep catching that.
"""


class HangmanError(ValueError):
    """Base class for every error raised by the round state machine."""


class AlreadyGuessedError(HangmanError):
    def __init__(self, letter: str):
        super().__init__(f"The letter {letter!r} has already been guessed.")
        self.letter = letter


class InvalidGuessError(HangmanError):
    def __init__(self, guess):
        super().__init__(f"A guess must be a single character other than the blank; got {guess!r}.")
        self.guess = guess


class EmptyCandidateSetError(HangmanError):
    pass


class InvalidRoundSetupError(HangmanError):
    pass


class RoundNotStartedError(HangmanError):
    pass
