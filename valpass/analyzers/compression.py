"""
Compression Analyzer
=====================

Estimates the redundancy of a passphrase by compressing it with DEFLATE at
maximum effort and comparing the compressed size with the original size.

Random data does not compress: DEFLATE output of a short random string is
at least as long as its input, and the ratio is reported as 0 %. Repeated
structure (``aaaaaaaa``, ``abcabcabc``) lets the LZ77 stage replace runs
with back-references, so the output shrinks and the ratio grows.

References:
    - Deutsch, P. (1996). RFC 1951: DEFLATE Compressed Data Format
      Specification version 1.3.
    - Li, M., & Vitanyi, P. (2008). An Introduction to Kolmogorov
      Complexity and Its Applications. Springer.
"""

from __future__ import annotations

import zlib

from valpass.core.alphabet import Passphrase, to_bytes


class CompressionAnalyzer:
    """Measures how much a passphrase shrinks under DEFLATE.

    Attributes:
        level: zlib compression level (9 is maximum effort).
    """

    # Negative window bits select a raw DEFLATE stream without the zlib
    # header and Adler-32 trailer.
    WBITS: int = -15

    def __init__(self, level: int = 9) -> None:
        self.level: int = level

    def analyze(self, passphrase: Passphrase) -> int:
        """Compression rate of *passphrase* in percent.

        Returns 0 for empty input and for input that DEFLATE cannot make
        smaller; never negative.
        """
        data = to_bytes(passphrase)
        length = len(data)
        if length == 0:
            return 0

        compressor = zlib.compressobj(self.level, zlib.DEFLATED, self.WBITS)
        compressed = len(compressor.compress(data) + compressor.flush())

        if compressed >= length:
            return 0

        return int(round(100 - 100 * compressed / length))

    @staticmethod
    def passes(ratio: int, threshold: int) -> bool:
        """The threshold is the ceiling for acceptable compressibility."""
        return ratio < threshold
