"""
Myszkowski Transposition
========================
Columnar transposition where repeated keyword letters share a rank.

Columns are emitted rank by rank. Inside a rank, the columns holding it
are taken left to right, each read whole from top to bottom.

    keyword  T O M A T O     ranks 3 2 1 0 3 2
             W E A R E D
             I S C O V E     rank 0: ROFO
             R E D F L E     rank 1: ACDT
             E A T O N C     rank 2: ESEA DEEC
             E               rank 3: WIREE EVLN

Works on the raw text: spaces and punctuation are transposed too.

Historical note: Emile Victor Theodore Myszkowski, 1902.
"""

from typing import List

from ..alphabet import sanitize_keyword
from ..columnar import column_lengths, fill_rows, rank_groups, read_rows, row_count, tied_ranks


class MyszkowskiCipher:
    """Tied-rank columnar transposition."""

    def __init__(self, keyword: str):
        self._keyword = sanitize_keyword(keyword, "keyword")
        self._ranks   = tied_ranks(self._keyword)
        self._groups  = rank_groups(self._ranks)

    @property
    def ranks(self) -> List[int]:
        return list(self._ranks)

    def encrypt(self, plaintext: str) -> str:
        grid = fill_rows(plaintext, len(self._keyword))
        out = []
        for group in self._groups:
            for col in group:
                out.extend(row[col] for row in grid if col < len(row))
        return "".join(out)

    def decrypt(self, ciphertext: str) -> str:
        width   = len(self._keyword)
        rows    = row_count(len(ciphertext), width)
        lengths = column_lengths(len(ciphertext), width)
        grid    = [[""] * width for _ in range(rows)]
        pos = 0
        for group in self._groups:
            for col in group:
                for row in range(lengths[col]):
                    grid[row][col] = ciphertext[pos]
                    pos += 1
        return read_rows(grid)


def myszkowski_encrypt(plaintext: str, keyword: str) -> str:
    return MyszkowskiCipher(keyword).encrypt(plaintext)


def myszkowski_decrypt(ciphertext: str, keyword: str) -> str:
    return MyszkowskiCipher(keyword).decrypt(ciphertext)
