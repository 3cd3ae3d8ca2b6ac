from .manager import HangmanManager

__all__ = ["HangmanManager"]
