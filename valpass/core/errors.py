"""
valpass Errors
===============

Exception hierarchy for the validator. Per-metric threshold failures are
*not* errors; they are recorded in :class:`~valpass.core.models.MetricResult`.
An exception means the input or the configuration was unusable and no
verdict exists.
"""

from __future__ import annotations


class ValpassError(Exception):
    """Base class for every error raised by valpass."""

    pass


class InputError(ValpassError):
    """The passphrase content is incompatible with the selected alphabet
    mode, e.g. a non-printable byte in ASCII-printable mode.
    """

    pass


class ConfigurationError(ValpassError):
    """The configuration cannot be used, e.g. a word list below the
    minimum size.
    """

    pass


class WordListLoadError(ValpassError):
    """A word-list file could not be read."""

    pass
