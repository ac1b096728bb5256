"""
normdist.metrics — Bind a (metric, atom) configuration to a scorer.

    score = scorer(Metric.OSA, Atom.CHAR)
    score("ab", "ba")          → 0.5
    score("kitten", "sitting") → 0.42857142857142855

A scorer tokenizes both inputs, runs the matching kernel, and divides
by the length of the longer token sequence.  The result is 0.0 for
identical inputs and at most 1.0.
"""

from enum import Enum
from typing import Any, Callable, Sequence, Union

from .core import levenshtein, optimal_string_alignment
from .formats import Atom, Text, tokenize

Kernel = Callable[[Sequence[Any], Sequence[Any]], int]
Scorer = Callable[[Text, Text], float]


class Metric(str, Enum):
    """Edit operation set."""
    LEVENSHTEIN = "levenshtein"
    OSA = "osa"


_KERNELS: dict[Metric, Kernel] = {
    Metric.LEVENSHTEIN: levenshtein,
    Metric.OSA: optimal_string_alignment,
}


def kernel_for(metric: Union[Metric, str]) -> Kernel:
    """Integer distance routine for `metric`.  Raises ValueError if unknown."""
    return _KERNELS[Metric(metric)]


def normalize(d: int, x_len: int, y_len: int) -> float:
    """
    Scale a raw distance by the longer sequence length.

    Two empty sequences are identical, so 0/0 is defined as 0.0.
    """
    longest = max(x_len, y_len)
    if longest == 0:
        return 0.0
    return d / longest


def scorer(metric: Union[Metric, str], atom: Union[Atom, str]) -> Scorer:
    """
    Return a pure function ``(x, y) -> float`` for this configuration.

    `metric` and `atom` may be enum members or their string values.
    Unknown names raise ValueError here, not on the first call.
    """
    kernel = kernel_for(metric)
    atom = Atom(atom)

    def score(x: Text, y: Text) -> float:
        xs = tokenize(x, atom)
        ys = tokenize(y, atom)
        return normalize(kernel(xs, ys), len(xs), len(ys))

    return score


def score(metric: Union[Metric, str], atom: Union[Atom, str], x: Text, y: Text) -> float:
    """Normalized distance between `x` and `y` in one call."""
    return scorer(metric, atom)(x, y)
