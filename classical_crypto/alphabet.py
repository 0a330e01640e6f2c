"""
Alphabet helpers
================
Shared letter <-> index mapping for the 26-letter Latin alphabet.

    A..Z  <->  0..25     (case tracked separately, restored on output)

Only ASCII A-Z / a-z count as letters. Everything else (digits, spaces,
punctuation, accented letters) is passed through untouched by the
substitution ciphers and dropped by the sanitizers.
"""

from typing import Callable

from .errors import InvalidKeyError

ALPHA   = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS  = "0123456789"
SIZE    = len(ALPHA)   # 26


def is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def to_index(ch: str) -> int:
    """'A' / 'a' -> 0 ... 'Z' / 'z' -> 25."""
    return ord(ch.upper()) - ord("A")


def to_letter(index: int, lowercase: bool = False) -> str:
    """Map any integer onto A-Z (reduced mod 26)."""
    letter = ALPHA[index % SIZE]
    return letter.lower() if lowercase else letter


def letters_only(text: str) -> str:
    """Keep A-Z / a-z, uppercased."""
    return "".join(ch for ch in text if is_letter(ch)).upper()


def alphanumeric_only(text: str, upper: bool = False) -> str:
    """Keep A-Z / a-z / 0-9, optionally uppercased."""
    kept = "".join(ch for ch in text if is_letter(ch) or ch in DIGITS)
    return kept.upper() if upper else kept


def sanitize_keyword(key: str, name: str = "key") -> str:
    """
    Normalize a keyword to uppercase A-Z.

    Raises InvalidKeyError when nothing survives, or when ``key`` is not a
    string at all.
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"{name} must be a string",
                              {"type": type(key).__name__})
    clean = letters_only(key)
    if not clean:
        raise InvalidKeyError(f"{name} must contain at least one letter",
                              {name: key})
    return clean


def map_letters(text: str, transform: Callable[[int, int], int]) -> str:
    """
    Apply ``transform(index, position)`` to every letter of ``text``.

    ``position`` counts letters processed so far, so non-letters never
    advance a key stream. The result index is reduced mod 26 and given
    the case of the source letter.
    """
    out = []
    position = 0
    for ch in text:
        if is_letter(ch):
            out.append(to_letter(transform(to_index(ch), position),
                                 lowercase=ch.islower()))
            position += 1
        else:
            out.append(ch)
    return "".join(out)
