"""
Hill Cipher
===========
Polygraphic substitution by linear algebra over Z/26.

Plaintext is reduced to uppercase letters, padded with 'X' to a multiple
of the block size n, and every block vector v is replaced by

    C = (K . v) mod 26

where K is the n x n key matrix. Decryption multiplies by K^-1 mod 26.

Limitation: decryption supports 2x2 keys only. K^-1 is built from the
adjugate:

    K = | a  b |      K^-1 = det^-1 * |  d  -b |   (mod 26)
        | c  d |                      | -c   a |

Encryption accepts any square matrix and does not check invertibility.
An uninvertible key is only reported when decrypting.

Historical note: Lester S. Hill, 1929.

Dependencies: numpy
"""

import logging
from typing import List, Sequence

import numpy as np

from ..alphabet import SIZE, letters_only, to_index, to_letter
from ..errors import InvalidKeyError
from ..modular import gcd, mod_inverse

logger = logging.getLogger(__name__)


class HillCipher:
    """Block cipher over letter vectors mod 26."""

    MODULUS = SIZE
    PAD     = "X"

    def __init__(self, matrix: Sequence[Sequence[int]]):
        self._matrix = self._validate(matrix)
        self._size   = self._matrix.shape[0]
        logger.debug(f"HillCipher {self._size}x{self._size} key loaded")

    @staticmethod
    def _validate(matrix) -> np.ndarray:
        try:
            key = np.array(matrix)
        except ValueError as exc:
            raise InvalidKeyError("key matrix must be square",
                                  {"matrix": matrix}) from exc
        if key.ndim != 2 or key.shape[0] == 0 or key.shape[0] != key.shape[1]:
            raise InvalidKeyError("key matrix must be square",
                                  {"shape": key.shape})
        if not np.issubdtype(key.dtype, np.integer):
            raise InvalidKeyError("key matrix must contain integers",
                                  {"dtype": str(key.dtype)})
        return key.astype(np.int64)

    @property
    def size(self) -> int:
        return self._size

    @property
    def matrix(self) -> List[List[int]]:
        return self._matrix.tolist()

    def inverse_matrix(self) -> List[List[int]]:
        """K^-1 mod 26 (2x2 keys only)."""
        return self._inverse().tolist()

    def _inverse(self) -> np.ndarray:
        if self._size != 2:
            raise InvalidKeyError(
                "decryption only supports 2x2 key matrices",
                {"size": self._size},
            )
        (a, b), (c, d) = self._matrix.tolist()
        det = (a * d - b * c) % self.MODULUS
        if gcd(det, self.MODULUS) != 1:
            raise InvalidKeyError("matrix not invertible modulo 26",
                                  {"determinant": det})
        det_inv = mod_inverse(det, self.MODULUS)
        adjugate = np.array([[d, -b], [-c, a]], dtype=np.int64)
        return (adjugate * det_inv) % self.MODULUS

    def _apply(self, key: np.ndarray, letters: str) -> str:
        n = self._size
        remainder = len(letters) % n
        if remainder:
            letters += self.PAD * (n - remainder)
        out = []
        for i in range(0, len(letters), n):
            block = np.array([to_index(ch) for ch in letters[i:i + n]], dtype=np.int64)
            out.extend(to_letter(int(v)) for v in key.dot(block) % self.MODULUS)
        return "".join(out)

    def encrypt(self, plaintext: str) -> str:
        """Letters only, uppercased, 'X'-padded to the block size."""
        return self._apply(self._matrix, letters_only(plaintext))

    def decrypt(self, ciphertext: str) -> str:
        """
        Raises InvalidKeyError for non-2x2 or non-invertible keys.
        A short final block is padded with 'X' before multiplying.
        """
        inverse = self._inverse()
        return self._apply(inverse, letters_only(ciphertext))


def hill_encrypt(plaintext: str, matrix: Sequence[Sequence[int]]) -> str:
    return HillCipher(matrix).encrypt(plaintext)


def hill_decrypt(ciphertext: str, matrix: Sequence[Sequence[int]]) -> str:
    return HillCipher(matrix).decrypt(ciphertext)
