"""
Entropy Analyzer
=================

Computes the empirical Shannon entropy of a passphrase in bits per symbol,
over the histogram of the symbols that actually occur (not over the whole
alphabet).

For a passphrase drawn uniformly from ``N`` symbols with roughly equal
frequencies the value approaches ``log2(N)``: about 6.57 bits for the 95
printable ASCII characters, 4.7 bits for lower-case letters only. A
passphrase of one repeated character has entropy 0.

In ASCII-printable mode every byte must lie in 32..126. A control
character or a non-ASCII byte makes the measurement meaningless for that
alphabet and is reported as an input error that aborts validation. In
Unicode mode any codepoint is a valid symbol.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
      Bell System Technical Journal, 27(3), 379-423.
    - Cover, T. M., & Thomas, J. A. (2006). Elements of Information
      Theory (2nd ed.). Wiley. Chapter 2.
"""

from __future__ import annotations

from shared.math_utils import shannon_entropy
from valpass.core.alphabet import Passphrase, is_printable, to_symbols
from valpass.core.errors import InputError
from valpass.core.models import AlphabetMode


class EntropyAnalyzer:
    """Shannon entropy of a passphrase under an alphabet mode."""

    def analyze(self, passphrase: Passphrase, mode: AlphabetMode) -> float:
        """Entropy of *passphrase* in bits per symbol.

        Args:
            passphrase: Text or raw bytes.
            mode: Symbol domain.

        Returns:
            Entropy in bits per symbol; 0.0 for empty input.

        Raises:
            InputError: In ASCII mode on a byte outside 32..126; in Unicode
                mode on bytes that are not valid UTF-8.
        """
        symbols = to_symbols(passphrase, mode)

        if mode is AlphabetMode.ASCII_PRINTABLE:
            for position, symbol in enumerate(symbols):
                if not is_printable(symbol):
                    raise InputError(
                        f"non-printable character encountered: byte 0x{symbol:02x} "
                        f"at position {position}"
                    )

        return shannon_entropy(symbols)

    @staticmethod
    def passes(entropy: float, threshold: float) -> bool:
        return entropy > threshold
