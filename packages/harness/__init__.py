from .core import play_round, DEFAULT_GUESSES

__all__ = ["play_round", "DEFAULT_GUESSES"]
