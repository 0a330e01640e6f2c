"""
Vigenere Polyalphabetic Cipher
==============================
Each letter is shifted by the matching letter of a repeating keyword:

    C_i = (P_i + K_(i mod len K)) mod 26

The key index counts letters only; spaces and punctuation pass through
without consuming key material.

Historical note: Blaise de Vigenere, 1553. Called "le chiffre
indechiffrable" for 300 years until Kasiski published his attack in 1863.
See classical_crypto.ngram.find_repeated_ngrams for the Kasiski step.
"""

from typing import List

from ..alphabet import ALPHA, map_letters, sanitize_keyword


class VigenereCipher:
    """Repeating-keyword Vigenere. Case and non-letters are preserved."""

    ALPHA = ALPHA

    def __init__(self, key: str):
        self._key = sanitize_keyword(key)

    @property
    def key(self) -> str:
        return self._key

    def _build_keystream(self) -> List[int]:
        return [self.ALPHA.index(k) for k in self._key]

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        stream = self._build_keystream()
        return map_letters(plaintext, lambda x, i: x + stream[i % len(stream)])

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        stream = self._build_keystream()
        return map_letters(ciphertext, lambda y, i: y - stream[i % len(stream)])


def vigenere_encrypt(plaintext: str, key: str) -> str:
    return VigenereCipher(key).encrypt(plaintext)


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    return VigenereCipher(key).decrypt(ciphertext)
