"""
valpass Shared Module
======================

Common utilities shared by the valpass packages: settings management,
structured logging, console presentation and statistical helpers.
"""

from shared.config import GlobalConfig, ValidatorConfig, ValpassSettings

__all__ = ["GlobalConfig", "ValidatorConfig", "ValpassSettings"]
