"""
valpass Core Module
====================

Data models, error types, alphabet helpers and the validation engine.
"""

from valpass.core.models import (
    MIN_COMPRESS,
    MIN_DIST,
    MIN_ENTROPY,
    AlphabetMode,
    Configuration,
    MetricResult,
    WordList,
)
from valpass.core.errors import (
    ConfigurationError,
    InputError,
    ValpassError,
    WordListLoadError,
)
from valpass.core.engine import Validator, validate

__all__ = [
    "MIN_COMPRESS",
    "MIN_DIST",
    "MIN_ENTROPY",
    "AlphabetMode",
    "Configuration",
    "ConfigurationError",
    "InputError",
    "MetricResult",
    "Validator",
    "ValpassError",
    "WordList",
    "WordListLoadError",
    "validate",
]
