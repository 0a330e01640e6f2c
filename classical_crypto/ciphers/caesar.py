"""
Caesar Cipher
=============
Monoalphabetic shift: every letter moves ``shift`` places along the
alphabet. E(x) = (x + s) mod 26, D(y) = (y - s) mod 26.

Historical note: used by Julius Caesar with a shift of 3.
Any integer shift is accepted and reduced mod 26.
"""

from ..alphabet import SIZE, map_letters
from ..errors import InvalidKeyError


class CaesarCipher:
    """Fixed-shift substitution. Case and non-letters are preserved."""

    def __init__(self, shift: int):
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise InvalidKeyError("Caesar shift must be an integer.",
                                  {"shift": shift})
        self._shift = shift % SIZE

    @property
    def shift(self) -> int:
        return self._shift

    def encrypt(self, plaintext: str) -> str:
        return map_letters(plaintext, lambda x, _: x + self._shift)

    def decrypt(self, ciphertext: str) -> str:
        return map_letters(ciphertext, lambda y, _: y - self._shift)


def caesar_encrypt(plaintext: str, shift: int) -> str:
    return CaesarCipher(shift).encrypt(plaintext)


def caesar_decrypt(ciphertext: str, shift: int) -> str:
    return CaesarCipher(shift).decrypt(ciphertext)
