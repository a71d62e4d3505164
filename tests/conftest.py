from __future__ import annotations

import pytest

from valpass import Validator, WordList

# 32 characters each, produced by a password generator.
RANDOM_GOOD = [
    "QAfwWn;]6ECn-(wZ-z7MxZL)zRA!TO%t",  # 26 distinct, entropy 4.625
    "_5>}+RMm=FRj1a>r/!gG*3tQ>s<&Uh{I",  # 29 distinct
]

WORST_BAD = [
    "123456",
    "password",
    "qwerty",
    "aaaaaa",
    "111111",
    "aaaaaaaaaaaaaaaaaaaaa",
]

# Four random dictionary words each.
DICEWARE_GOOD = [
    "abutting Eucharist dramatized unlearns",
    "Terrence decorates dwarfed saucing",
    "swamping nauseated tapioca ascribe",
    "insatiably ensconcing royally Clarice",
]

# Single dictionary words.
DICT_BAD = ["clued", "lads", "stifle", "putts", "nooks", "pew"]


def _filler_words(count: int) -> list[str]:
    return [f"filler{i:05d}" for i in range(count)]


@pytest.fixture
def word_list() -> WordList:
    """Exactly 5000 words, including ``Password`` and ``foobar``."""
    return WordList(words=_filler_words(4998) + ["Password", "foobar"])


@pytest.fixture
def submatch_word_list(word_list: WordList) -> WordList:
    return WordList(words=word_list.words, allow_substring_match=True)


@pytest.fixture
def small_word_list() -> WordList:
    return WordList(words=["eins", "zwei", "drei"])


@pytest.fixture
def validator() -> Validator:
    return Validator()
