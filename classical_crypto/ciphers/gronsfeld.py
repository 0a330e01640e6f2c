"""
Gronsfeld Cipher
================
Vigenere with a numeric key: each digit 0-9 is a shift. "123" shifts the
letters by 1, 2, 3, 1, 2, 3, ...

Accepts a string of decimal digits or a non-negative int.
"""

from typing import List, Union

from ..alphabet import DIGITS, map_letters
from ..errors import InvalidKeyError


class GronsfeldCipher:
    """Digit-keyed Vigenere variant."""

    def __init__(self, key: Union[str, int]):
        self._shifts = self._parse_key(key)

    @staticmethod
    def _parse_key(key: Union[str, int]) -> List[int]:
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise InvalidKeyError("Gronsfeld key must be a digit string or an integer.",
                                  {"type": type(key).__name__})
        digits = str(key).strip()
        if not digits:
            raise InvalidKeyError("key must contain at least one digit", {"key": key})
        if any(d not in DIGITS for d in digits):
            raise InvalidKeyError("key must contain only digits", {"key": key})
        return [int(d) for d in digits]

    @property
    def shifts(self) -> List[int]:
        return list(self._shifts)

    def encrypt(self, plaintext: str) -> str:
        s = self._shifts
        return map_letters(plaintext, lambda x, i: x + s[i % len(s)])

    def decrypt(self, ciphertext: str) -> str:
        s = self._shifts
        return map_letters(ciphertext, lambda y, i: y - s[i % len(s)])


def gronsfeld_encrypt(plaintext: str, key: Union[str, int]) -> str:
    return GronsfeldCipher(key).encrypt(plaintext)


def gronsfeld_decrypt(ciphertext: str, key: Union[str, int]) -> str:
    return GronsfeldCipher(key).decrypt(ciphertext)
