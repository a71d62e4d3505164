"""
Word-List Collector
====================

Loads a newline-separated word list (e.g. ``/usr/share/dict/words``) into
a :class:`~valpass.core.models.WordList`.

The loader only reads; it does not enforce the minimum list size. That
invariant belongs to the dictionary matcher, which refuses small lists at
lookup time. I/O failures are raised as :class:`WordListLoadError` so the
caller can recover instead of the process dying.
"""

from __future__ import annotations

from pathlib import Path

from valpass.core.errors import WordListLoadError
from valpass.core.models import WordList


def load_wordlist(
    path: str | Path,
    *,
    allow_substring_match: bool = False,
    encoding: str = "utf-8",
) -> WordList:
    """Read one word per line from *path*.

    Line endings are stripped, blank lines skipped and file order kept.

    Args:
        path: Word-list file.
        allow_substring_match: Enable submatch mode on the returned list.
        encoding: File encoding.

    Returns:
        The loaded :class:`WordList`.

    Raises:
        WordListLoadError: If the file is missing, unreadable or cannot be
            decoded with *encoding*.
    """
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding=encoding) as fh:
            words = tuple(
                word for word in (line.rstrip("\r\n") for line in fh) if word
            )
    except FileNotFoundError as exc:
        raise WordListLoadError(f"word list not found: {file_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"cannot read word list {file_path}: {exc}") from exc

    return WordList(words=words, allow_substring_match=allow_substring_match)
