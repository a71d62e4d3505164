"""
valpass Analyzers
==================

Independent, stateless metric analyzers. Each one computes a single raw
value for a passphrase and knows its own pass/fail predicate.
"""

from valpass.analyzers.compression import CompressionAnalyzer
from valpass.analyzers.dictionary import MIN_DICT_LEN, DictionaryMatcher
from valpass.analyzers.distribution import DistributionAnalyzer
from valpass.analyzers.entropy import EntropyAnalyzer
from valpass.analyzers.mean import MEAN_CENTER, MeanAnalyzer

__all__ = [
    "CompressionAnalyzer",
    "DictionaryMatcher",
    "DistributionAnalyzer",
    "EntropyAnalyzer",
    "MeanAnalyzer",
    "MEAN_CENTER",
    "MIN_DICT_LEN",
]
