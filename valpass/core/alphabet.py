"""
Alphabet Helpers
=================

Conversions between the accepted passphrase representations (``str`` or
``bytes``) and the symbol domain of an :class:`AlphabetMode`.

- ASCII-printable mode counts raw bytes; the printable range is 32-126,
  i.e. 95 symbols.
- Unicode mode counts codepoints over the whole codepoint space.
"""

from __future__ import annotations

from typing import Sequence, Union

from valpass.core.errors import InputError
from valpass.core.models import AlphabetMode

Passphrase = Union[str, bytes]

ASCII_BASE: int = 32
ASCII_MAX: int = 126
MAX_CHARS: int = ASCII_MAX - ASCII_BASE + 1  # 95 printable US-ASCII chars
UNICODE_ALPHABET_SIZE: int = 0x110000


def to_bytes(passphrase: Passphrase) -> bytes:
    """Byte form of a passphrase; text is encoded as UTF-8."""
    if isinstance(passphrase, bytes):
        return passphrase
    return passphrase.encode("utf-8")


def to_text(passphrase: Passphrase) -> str:
    """Text form of a passphrase.

    Raises:
        InputError: If *passphrase* is bytes that are not valid UTF-8.
    """
    if isinstance(passphrase, str):
        return passphrase
    try:
        return passphrase.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(
            f"passphrase is not valid UTF-8 at byte offset {exc.start}"
        ) from exc


def to_symbols(passphrase: Passphrase, mode: AlphabetMode) -> Sequence[int]:
    """Symbol sequence of *passphrase* under *mode*.

    Bytes in ASCII mode, codepoints in Unicode mode. Both are plain ints
    so the analyzers build one kind of histogram.
    """
    if mode is AlphabetMode.UNICODE_CODEPOINT:
        return [ord(ch) for ch in to_text(passphrase)]
    return to_bytes(passphrase)


def is_printable(symbol: int) -> bool:
    return ASCII_BASE <= symbol <= ASCII_MAX


def alphabet_size(mode: AlphabetMode) -> int:
    if mode is AlphabetMode.UNICODE_CODEPOINT:
        return UNICODE_ALPHABET_SIZE
    return MAX_CHARS
