"""
Autokey Cipher
==============
Vigenere whose key stream is the primer followed by the plaintext itself:

    primer "KEY", plaintext "ATTACK"  ->  stream K E Y A T T ...

The stream grows by one letter per letter processed, so it never repeats
past the primer. Decryption appends each recovered plaintext letter.
"""

from typing import List

from ..alphabet import SIZE, map_letters, sanitize_keyword, to_index


class AutokeyCipher:

    def __init__(self, primer: str):
        self._primer = [to_index(k) for k in sanitize_keyword(primer, "primer")]

    def encrypt(self, plaintext: str) -> str:
        stream: List[int] = list(self._primer)

        def step(x: int, i: int) -> int:
            stream.append(x)
            return x + stream[i]

        return map_letters(plaintext, step)

    def decrypt(self, ciphertext: str) -> str:
        stream: List[int] = list(self._primer)

        def step(y: int, i: int) -> int:
            x = (y - stream[i]) % SIZE
            stream.append(x)
            return x

        return map_letters(ciphertext, step)


def autokey_encrypt(plaintext: str, primer: str) -> str:
    return AutokeyCipher(primer).encrypt(plaintext)


def autokey_decrypt(ciphertext: str, primer: str) -> str:
    return AutokeyCipher(primer).decrypt(ciphertext)
