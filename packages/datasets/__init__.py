from .validator import validate_dictionary, pretty_summary
from .io import load_dictionary

__all__ = ["validate_dictionary", "pretty_summary", "load_dictionary"]
