"""
Atbash Cipher
=============
Mirror substitution: A <-> Z, B <-> Y, ... E(x) = 25 - x.
Keyless and self-inverse, so decrypt is encrypt.
"""

from ..alphabet import SIZE, map_letters


class AtbashCipher:

    def encrypt(self, plaintext: str) -> str:
        return map_letters(plaintext, lambda x, _: SIZE - 1 - x)

    decrypt = encrypt


def atbash_encrypt(plaintext: str) -> str:
    return AtbashCipher().encrypt(plaintext)


atbash_decrypt = atbash_encrypt
