"""
Beaufort Cipher
===============
Reciprocal Vigenere variant: C = (K - P) mod 26.

Applying the same key twice gives the original back, so one function
serves for both directions.
"""

from ..alphabet import map_letters, sanitize_keyword, to_index


class BeaufortCipher:

    def __init__(self, key: str):
        self._stream = [to_index(k) for k in sanitize_keyword(key)]

    def apply(self, text: str) -> str:
        s = self._stream
        return map_letters(text, lambda x, i: s[i % len(s)] - x)

    encrypt = apply
    decrypt = apply


def beaufort_cipher(text: str, key: str) -> str:
    return BeaufortCipher(key).apply(text)


beaufort_encrypt = beaufort_cipher
beaufort_decrypt = beaufort_cipher
