"""
Normalized Edit Distance
========================

Edit distance between two strings, scaled into [0, 1] by the length of
the longer one.

    score("levenshtein", "char", "kitten", "sitting") → 0.428...  (3 / 7)
    score("osa", "char", "ab", "ba")                  → 0.5      (1 / 2)
    score("levenshtein", "char", "ab", "ba")          → 1.0      (2 / 2)

Two edit operation sets:
  • Levenshtein — insert, delete, substitute
  • OSA         — the above plus adjacent transposition

Three token granularities:
  • byte — UTF-8 bytes
  • char — Unicode codepoints
  • word — whitespace-delimited words
"""

from normdist.core import (
    edit_distance,
    levenshtein,
    optimal_string_alignment,
)
from normdist.formats import (
    Atom, tokenize, to_bytes, to_chars, to_words,
)
from normdist.metrics import Metric, kernel_for, normalize, scorer, score

__version__ = "0.1.0"
__all__ = [
    "edit_distance", "levenshtein", "optimal_string_alignment",
    "Atom", "tokenize", "to_bytes", "to_chars", "to_words",
    "Metric", "kernel_for", "normalize", "scorer", "score",
]
