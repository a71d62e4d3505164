"""
Distribution Analyzer
======================

Measures symbol-space coverage: how many distinct symbols of the chosen
alphabet a passphrase uses, as a percentage of the alphabet size. This is
about breadth, not frequency balance; ``abc`` and ``aaaaabc`` score the
same.
"""

from __future__ import annotations

from shared.math_utils import coverage_percent
from valpass.core.alphabet import (
    Passphrase,
    alphabet_size,
    is_printable,
    to_symbols,
)
from valpass.core.models import AlphabetMode


class DistributionAnalyzer:
    """Computes alphabet coverage for ASCII-printable or Unicode symbols."""

    def analyze(self, passphrase: Passphrase, mode: AlphabetMode) -> float:
        """Coverage of *mode*'s alphabet by *passphrase*, in percent.

        In ASCII mode bytes outside the printable range are not part of the
        alphabet and are not counted.

        Raises:
            InputError: In Unicode mode, if bytes are not valid UTF-8.
        """
        distinct = set(to_symbols(passphrase, mode))
        if mode is AlphabetMode.ASCII_PRINTABLE:
            distinct = {symbol for symbol in distinct if is_printable(symbol)}
        return coverage_percent(len(distinct), alphabet_size(mode))

    @staticmethod
    def passes(distribution: float, threshold: float) -> bool:
        return distribution > threshold
