"""
Rail Fence Cipher
=================
Zig-zag transposition. Characters are dealt onto ``rails`` rows bouncing
0, 1, ..., rails-1, rails-2, ..., 1, 0, 1, ... and the rails are read top
to bottom.

    rails=3   W . . . E . . . C . . . R . . . L . . . T . . . E
              . E . R . D . S . O . E . E . F . E . A . O . C .
              . . A . . . I . . . V . . . D . . . E . . . N . .

Works on the raw text, spaces included.
"""

from typing import List

from ..errors import InvalidKeyError


class RailFenceCipher:

    def __init__(self, rails: int):
        if isinstance(rails, bool) or not isinstance(rails, int) or rails < 2:
            raise InvalidKeyError("Number of rails must be at least 2",
                                  {"rails": rails})
        self._rails = rails

    @property
    def rails(self) -> int:
        return self._rails

    def pattern(self, length: int) -> List[int]:
        """Rail index for each of ``length`` positions."""
        rails = []
        rail, step = 0, 1
        for _ in range(length):
            rails.append(rail)
            if rail == 0:
                step = 1
            elif rail == self._rails - 1:
                step = -1
            rail += step
        return rails

    def encrypt(self, plaintext: str) -> str:
        pattern = self.pattern(len(plaintext))
        return "".join(
            ch for rail in range(self._rails)
            for ch, r in zip(plaintext, pattern) if r == rail
        )

    def decrypt(self, ciphertext: str) -> str:
        pattern = self.pattern(len(ciphertext))
        # rail-major slot order, then place each ciphertext char at its slot
        slots = sorted(range(len(ciphertext)), key=lambda i: (pattern[i], i))
        plain = [""] * len(ciphertext)
        for slot, ch in zip(slots, ciphertext):
            plain[slot] = ch
        return "".join(plain)


def rail_fence_encrypt(plaintext: str, rails: int) -> str:
    return RailFenceCipher(rails).encrypt(plaintext)


def rail_fence_decrypt(ciphertext: str, rails: int) -> str:
    return RailFenceCipher(rails).decrypt(ciphertext)
