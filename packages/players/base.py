from __future__ import annotations
import random
import string
from typing import AbstractSet, Dict, List, Type

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["BaseGuesser"]] = {}


def register(cls: Type["BaseGuesser"]) -> Type["BaseGuesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


# ---- Base class that guessers inherit ----
class BaseGuesser:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.length: int = 0
        self.words: List[str] = []
        self.alphabet: List[str] = list(string.ascii_lowercase)
        self.rng = random.Random()

    def reset(self, *, words: List[str], length: int,
              seed: int | None = None) -> None:
        self.length = int(length)
        self.words = [w for w in words if len(w) == self.length]
        # Guess from the letters the dictionary actually uses, in stable order
        letters = sorted({ch for w in self.words for ch in w})
        self.alphabet = letters or list(string.ascii_lowercase)
        if seed is not None:
            self.rng.seed(seed)

    def unguessed(self, guessed: AbstractSet[str]) -> List[str]:
        return [ch for ch in self.alphabet if ch not in guessed]

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
