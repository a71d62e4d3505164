"""
valpass Mathematical Utilities
===============================

Statistical primitives used by the passphrase analyzers: empirical
Shannon entropy over an arbitrary symbol sequence, the arithmetic mean of
byte values and alphabet coverage.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] Walker, J. (2008). ENT: A Pseudorandom Number Sequence Test
        Program. https://www.fourmilab.ch/random/
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Hashable, Sequence

import numpy as np


# ========================== Entropy Measures ===============================


def shannon_entropy(symbols: Sequence[Hashable]) -> float:
    """Compute the empirical Shannon entropy of a symbol sequence.

    .. math::

        H = -\\sum_{s} p_s \\, \\log_2(p_s)

    where the sum runs over the symbols actually present and :math:`p_s`
    is the relative frequency of symbol *s*. Symbols may be byte values,
    codepoints or any other hashable value, so the histogram is a mapping
    sized to the observed alphabet rather than a fixed lookup table.

    Reference:
        Shannon, C. E. (1948). A Mathematical Theory of Communication.

    Args:
        symbols: Sequence of symbols (``bytes`` iterates as ints).

    Returns:
        Entropy in bits per symbol. Returns 0.0 for empty input.
    """
    length = len(symbols)
    if length == 0:
        return 0.0

    entropy = 0.0
    for count in Counter(symbols).values():
        p = count / length
        entropy -= p * math.log2(p)
    return entropy


# ========================== Descriptive Statistics =========================


def arithmetic_mean(data: bytes) -> float:
    """Arithmetic mean of the byte values in *data*.

    For uniformly random bytes the mean approaches 127.5; ENT [2] uses it
    as a cheap first randomness check. Returns 0.0 for empty input.
    """
    if not data:
        return 0.0
    return float(np.frombuffer(data, dtype=np.uint8).mean())


def coverage_percent(distinct: int, alphabet_size: int) -> float:
    """Percentage of an alphabet of *alphabet_size* symbols covered by
    *distinct* different symbols.
    """
    return distinct * 100.0 / alphabet_size
