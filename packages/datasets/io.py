from __future__ import annotations
from pathlib import Path
from typing import Set


def load_dictionary(p: Path | str) -> Set[str]:
    """
    Load a one-word-per-line UTF-8 dictionary as a set of lowercase words.
    Blank lines and tokens with non-alphabetic characters are skipped
    (validate_dictionary reports them). Raises FileNotFoundError if the
    path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    words: Set[str] = set()
    for ln in p.read_text(encoding="utf-8").splitlines():
        w = ln.strip().lower()
        if w and w.isalpha():
            words.add(w)
    return words
