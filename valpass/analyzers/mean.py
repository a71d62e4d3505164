"""
Mean Analyzer
==============

Arithmetic mean of the passphrase's byte values, a cheap randomness sanity
check borrowed from the ENT test suite.

The reference center is 80 rather than the naive midpoint 63 of the 7-bit
range: printable passphrases lean towards the upper half of the space,
where the lower-case letters (97-122) sit. Upper-case-and-digit
strings land well below the center and fail a tight band.

Reference:
    - Walker, J. (2008). ENT: A Pseudorandom Number Sequence Test Program.
"""

from __future__ import annotations

from shared.math_utils import arithmetic_mean
from valpass.core.alphabet import Passphrase, to_bytes

MEAN_CENTER: float = 80.0


class MeanAnalyzer:
    """Byte-value mean and its deviation band check."""

    def __init__(self, center: float = MEAN_CENTER) -> None:
        self.center: float = center

    def analyze(self, passphrase: Passphrase) -> float:
        """Mean of the byte values; 0.0 for empty input."""
        return arithmetic_mean(to_bytes(passphrase))

    def passes(self, mean: float, deviation: float) -> bool:
        """True when *mean* lies within ``center +/- deviation``."""
        return self.center - deviation <= mean <= self.center + deviation
