"""
valpass Collectors
===================

Loaders that turn external data into validator inputs.

- ``wordlist`` -- newline-separated dictionary files
"""

from valpass.collectors.wordlist import load_wordlist

__all__ = ["load_wordlist"]
