"""
valpass Core Data Models
=========================

Pydantic models for the passphrase validator: the alphabet mode, the
caller-owned word list, the per-call configuration and the aggregate
metric result.

All models are frozen. A configuration is read-only for the duration of
a validation call and a result never changes after construction, which
keeps :func:`valpass.validate` a pure function of its inputs.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63B (2017). Digital Identity Guidelines, section 5.1.1.2
      (comparison against lists of commonly-used or compromised values).
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from shared.config import ValidatorConfig


# ===================================================================== #
#  Defaults
# ===================================================================== #

MIN_COMPRESS: int = 10
MIN_DIST: float = 10.0
MIN_ENTROPY: float = 3.0


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class AlphabetMode(str, enum.Enum):
    """Symbol domain the distribution and entropy metrics are computed over."""

    ASCII_PRINTABLE = "ascii_printable"      # bytes 32..126, 95 symbols
    UNICODE_CODEPOINT = "unicode_codepoint"  # any codepoint


# ===================================================================== #
#  Input Models
# ===================================================================== #


class WordList(BaseModel):
    """A dictionary of words supplied by the caller.

    Matching is always case-insensitive. With ``allow_substring_match``
    a passphrase that occurs inside a word counts as a hit, e.g. ``foo``
    matches ``foobar``.

    Attributes:
        words: Words in caller order; the first match wins.
        allow_substring_match: Enable substring matching.
    """

    model_config = ConfigDict(frozen=True)

    words: tuple[str, ...] = ()
    allow_substring_match: bool = False

    def __len__(self) -> int:
        return len(self.words)


class Configuration(BaseModel):
    """Which checks run and their thresholds.

    A zero threshold (or a missing word list) disables a check, so a bare
    ``Configuration()`` runs nothing and accepts every passphrase. Use
    :meth:`defaults` for the recommended thresholds.

    Attributes:
        compression_min_percent: Fail when the passphrase compresses by at
            least this many percent.
        distribution_min_percent: Fail when the alphabet coverage is at or
            below this percentage.
        entropy_min_bits_per_symbol: Fail when the Shannon entropy is at or
            below this value.
        mean_allowed_deviation: Fail when the byte mean leaves the band
            ``80 +/- deviation``.
        alphabet_mode: Symbol domain for distribution and entropy.
        word_list: Optional dictionary to reject known words.
    """

    model_config = ConfigDict(frozen=True)

    compression_min_percent: int = Field(default=0, ge=0)
    distribution_min_percent: float = Field(default=0.0, ge=0.0)
    entropy_min_bits_per_symbol: float = Field(default=0.0, ge=0.0)
    mean_allowed_deviation: float = Field(default=0.0, ge=0.0)
    alphabet_mode: AlphabetMode = AlphabetMode.ASCII_PRINTABLE
    word_list: Optional[WordList] = None

    @classmethod
    def defaults(
        cls,
        word_list: Optional[WordList] = None,
        alphabet_mode: AlphabetMode = AlphabetMode.ASCII_PRINTABLE,
    ) -> Configuration:
        """Recommended thresholds: 10 % compression, 10 % distribution,
        3.0 bits/symbol entropy, mean check off.
        """
        return cls(
            compression_min_percent=MIN_COMPRESS,
            distribution_min_percent=MIN_DIST,
            entropy_min_bits_per_symbol=MIN_ENTROPY,
            alphabet_mode=alphabet_mode,
            word_list=word_list,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ValidatorConfig,
        word_list: Optional[WordList] = None,
    ) -> Configuration:
        """Build a configuration from the ``[validator]`` settings section.

        The word list is passed separately because loading it is the
        caller's business (see :mod:`valpass.collectors.wordlist`).
        """
        return cls(
            compression_min_percent=settings.compression_min_percent,
            distribution_min_percent=settings.distribution_min_percent,
            entropy_min_bits_per_symbol=settings.entropy_min_bits_per_symbol,
            mean_allowed_deviation=settings.mean_allowed_deviation,
            alphabet_mode=AlphabetMode(settings.alphabet_mode),
            word_list=word_list,
        )


# ===================================================================== #
#  Result Model
# ===================================================================== #


class MetricResult(BaseModel):
    """Outcome of one validation call.

    Fields of metrics that did not run keep their zero value.

    Attributes:
        ok: Overall verdict; false when any enabled check failed.
        dictionary_match: True if the passphrase matched a dictionary word.
        compression: Compression rate in percent.
        distribution: Alphabet coverage in percent.
        entropy: Shannon entropy in bits per symbol.
        mean: Arithmetic mean of the byte values.
        failed_checks: Names of the failed checks in evaluation order.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool = True
    dictionary_match: bool = False
    compression: int = 0
    distribution: float = 0.0
    entropy: float = 0.0
    mean: float = 0.0
    failed_checks: tuple[str, ...] = ()

    @property
    def redundancy(self) -> float:
        """Share of the alphabet *not* used, ``100 - distribution``.

        Zero when no distribution was measured.
        """
        if self.distribution <= 0.0:
            return 0.0
        return 100.0 - self.distribution
