"""
Affine Cipher
=============
E(x) = (a*x + b) mod 26
D(y) = a^-1 * (y - b) mod 26

``a`` must be coprime with 26 (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25),
otherwise two letters collide and decryption is impossible.
"""

from ..alphabet import SIZE, map_letters
from ..errors import InvalidKeyError
from ..modular import is_coprime, mod_inverse


class AffineCipher:
    """Affine substitution with key pair (a, b)."""

    def __init__(self, a: int, b: int):
        for name, value in (("a", a), ("b", b)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidKeyError(f"Affine parameter '{name}' must be an integer.",
                                      {name: value})
        if not is_coprime(a, SIZE):
            raise InvalidKeyError("parameter 'a' must be coprime with 26",
                                  {"a": a})
        self._a = a % SIZE
        self._b = b % SIZE
        self._a_inv = mod_inverse(self._a, SIZE)

    def encrypt(self, plaintext: str) -> str:
        return map_letters(plaintext, lambda x, _: self._a * x + self._b)

    def decrypt(self, ciphertext: str) -> str:
        return map_letters(ciphertext, lambda y, _: self._a_inv * (y - self._b))


def affine_encrypt(plaintext: str, a: int, b: int) -> str:
    return AffineCipher(a, b).encrypt(plaintext)


def affine_decrypt(ciphertext: str, a: int, b: int) -> str:
    return AffineCipher(a, b).decrypt(ciphertext)
