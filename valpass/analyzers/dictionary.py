"""
Dictionary Matcher
===================

Checks a passphrase against a caller-supplied word list, either for an
exact case-insensitive match or, in submatch mode, for occurrence inside
any word (``foo`` matches ``foobar``).

Lists with fewer than :data:`MIN_DICT_LEN` entries are refused as a
configuration error.

Reference:
    - NIST SP 800-63B (2017). Digital Identity Guidelines, 5.1.1.2:
      compare prospective secrets against a list of commonly-used,
      expected or compromised values.
"""

from __future__ import annotations

from valpass.core.alphabet import Passphrase
from valpass.core.errors import ConfigurationError
from valpass.core.models import WordList

MIN_DICT_LEN: int = 5000


class DictionaryMatcher:
    """Exact or substring lookup of a passphrase in a word list."""

    def matches(self, passphrase: Passphrase, word_list: WordList) -> bool:
        """True if *passphrase* is found in *word_list*.

        Words are scanned in caller order and the first hit wins.

        Raises:
            ConfigurationError: If the list has fewer than
                :data:`MIN_DICT_LEN` words.
        """
        if len(word_list.words) < MIN_DICT_LEN:
            raise ConfigurationError(
                f"provided dictionary is too small: {len(word_list.words)} words, "
                f"at least {MIN_DICT_LEN} required"
            )

        if isinstance(passphrase, bytes):
            passphrase = passphrase.decode("utf-8", errors="replace")
        lcpass = passphrase.lower()

        if word_list.allow_substring_match:
            return any(lcpass in word.lower() for word in word_list.words)
        return any(lcpass == word.lower() for word in word_list.words)
