"""
ADFGVX ("August") Cipher
========================
Fractionation followed by keyed columnar transposition.

Stage 1: every alphanumeric symbol becomes two axis labels from a
Polybius square ('H' -> "DD" with the default square).

Stage 2: the label stream is written row-major under the keyword and the
columns are read whole in keyword-rank order. Ranks are unique: equal
keyword letters are ordered left to right.

    keyword K E Y      ranks 1 0 2
            D D A
            V D X      read col E, then K, then Y
            D X F      -> "DDX" + "DVDF" + "AXF"
            F

Decryption rebuilds the column lengths: the rightmost columns in original
keyword order are one row short, whatever their rank.

Symbols missing from the square (and undecodable label pairs) are
skipped, logged at WARNING, and passed to the optional ``on_skip``
callback as SkippedSymbol events. Key problems raise.

Historical note: German army, spring 1918 (ADFGX, then ADFGVX).
"""

import logging
from typing import Optional, Sequence, Union

from ..alphabet import alphanumeric_only, sanitize_keyword
from ..columnar import column_lengths, fill_rows, read_rows, row_count, unique_ranks
from ..polybius import PolybiusSquare, SkipHandler

logger = logging.getLogger(__name__)

SquareLike = Union[PolybiusSquare, Sequence[Sequence[str]]]


class ADFGVXCipher:
    """Polybius fractionation + unique-rank columnar transposition."""

    def __init__(self, keyword: str, polybius: Optional[SquareLike] = None,
                 on_skip: Optional[SkipHandler] = None):
        """
        Args:
            keyword  : transposition key, letters only after sanitizing
            polybius : PolybiusSquare, or a header + data rows table;
                       defaults to the A-Z / 0-9 ADFGVX square
            on_skip  : called with a SkippedSymbol for every dropped symbol
        """
        self._keyword = sanitize_keyword(keyword, "keyword")
        self._ranks   = unique_ranks(self._keyword)
        self._order   = sorted(range(len(self._ranks)), key=self._ranks.__getitem__)
        if polybius is None:
            self._square = PolybiusSquare()
        elif isinstance(polybius, PolybiusSquare):
            self._square = polybius
        else:
            self._square = PolybiusSquare.from_table(polybius)
        self._on_skip = on_skip

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def square(self) -> PolybiusSquare:
        return self._square

    def transpose(self, stream: str) -> str:
        """Columnar transposition of an already fractionated stream."""
        grid = fill_rows(stream, len(self._keyword))
        return "".join(
            "".join(row[col] for row in grid if col < len(row))
            for col in self._order
        )

    def untranspose(self, stream: str) -> str:
        width   = len(self._keyword)
        rows    = row_count(len(stream), width)
        lengths = column_lengths(len(stream), width)
        grid    = [[""] * width for _ in range(rows)]
        pos = 0
        for col in self._order:
            for row in range(lengths[col]):
                grid[row][col] = stream[pos]
                pos += 1
        return read_rows(grid)

    def encrypt(self, plaintext: str) -> str:
        symbols = alphanumeric_only(plaintext, upper=True)
        stream  = self._square.fractionate(symbols, self._on_skip)
        logger.debug(f"ADFGVX encrypt: {len(symbols)} symbols -> {len(stream)} labels")
        return self.transpose(stream)

    def decrypt(self, ciphertext: str) -> str:
        stream = self.untranspose(ciphertext)
        return self._square.defractionate(stream, self._on_skip)


def august_encrypt(plaintext: str, keyword: str,
                   polybius: Optional[SquareLike] = None,
                   on_skip: Optional[SkipHandler] = None) -> str:
    return ADFGVXCipher(keyword, polybius, on_skip).encrypt(plaintext)


def august_decrypt(ciphertext: str, keyword: str,
                   polybius: Optional[SquareLike] = None,
                   on_skip: Optional[SkipHandler] = None) -> str:
    return ADFGVXCipher(keyword, polybius, on_skip).decrypt(ciphertext)


adfgvx_encrypt = august_encrypt
adfgvx_decrypt = august_decrypt
