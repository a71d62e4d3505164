"""
valpass -- Passphrase Quality Validator
========================================

Estimates the quality of a candidate passphrase with independent
statistical metrics (compressibility, character distribution, Shannon
entropy, byte mean, dictionary membership), compares each against a
caller-supplied threshold and returns an aggregate verdict together with
the raw values.

Modules:
    - valpass.core.engine: Validation orchestrator
    - valpass.core.models: Pydantic data models
    - valpass.analyzers: Individual metric analyzers
    - valpass.collectors: Word-list loading
    - valpass.output: Console and JSON output
    - valpass.cli: Click-based command-line interface

Usage::

    from valpass import Configuration, validate

    result = validate("correct horse battery staple", Configuration.defaults())
    result.ok, result.entropy

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

import logging

from valpass.core import (
    MIN_COMPRESS,
    MIN_DIST,
    MIN_ENTROPY,
    AlphabetMode,
    Configuration,
    ConfigurationError,
    InputError,
    MetricResult,
    Validator,
    ValpassError,
    WordList,
    WordListLoadError,
    validate,
)

__version__ = "1.0.0"
__tool_name__ = "valpass"

logging.getLogger("valpass").addHandler(logging.NullHandler())

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
