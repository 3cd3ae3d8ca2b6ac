from .pattern import BLANK, blank_pattern, render_pattern, count_blanks, is_revealed, display_pattern
from .partition import partition, family_sizes
from .selection import Difficulty, rank_families, select_family
from .constraints import filter_candidates
from .validation import validate_letter

__all__ = [
    "BLANK", "blank_pattern", "render_pattern", "count_blanks", "is_revealed", "display_pattern",
    "partition", "family_sizes",
    "Difficulty", "rank_families", "select_family",
    "filter_candidates", "validate_letter",
]
