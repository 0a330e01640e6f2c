"""
Polybius square
===============
Fractionation table for the ADFGVX cipher.

A square is a header row of axis labels plus one data row per label:

        A  D  F  G  V  X
    A   A  B  C  D  E  F
    D   G  H  I  J  K  L
    F   M  N  O  P  Q  R
    G   S  T  U  V  W  X
    V   Y  Z  0  1  2  3
    X   4  5  6  7  8  9

A symbol becomes the pair (row label, column label): 'H' -> "DD".
Lookups search rows top to bottom and cells left to right; the first
match wins, so a duplicated cell is never produced by encryption.

Lookup misses are not errors. The caller gets a SkippedSymbol event
describing what was dropped.
"""

import logging
from collections import namedtuple
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import MalformedInputError

logger = logging.getLogger(__name__)

# stage: "fractionate" | "defractionate"
SkippedSymbol = namedtuple("SkippedSymbol", ["stage", "symbol", "reason"])

SkipHandler = Callable[[SkippedSymbol], None]


class PolybiusSquare:
    """Label-addressed lookup table with first-match-wins semantics."""

    WIDTH  = 6
    LABELS = "ADFGVX"
    CELLS  = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

    def __init__(self, labels: Sequence[str] = None,
                 rows: Sequence[Sequence[str]] = None):
        """
        Omit both arguments for the default ADFGVX square.

        Args:
            labels : WIDTH distinct single-character axis labels
            rows   : WIDTH data rows of WIDTH single-character cells
        """
        if labels is None:
            labels = self.LABELS
        if rows is None:
            rows = [self.CELLS[i:i + self.WIDTH]
                    for i in range(0, len(self.CELLS), self.WIDTH)]

        labels = [str(label).upper() for label in labels]
        if len(labels) != self.WIDTH:
            raise MalformedInputError(
                f"Polybius header must have {self.WIDTH} labels, got {len(labels)}.",
                {"labels": labels},
            )
        if any(len(label) != 1 for label in labels):
            raise MalformedInputError("Polybius labels must be single characters.",
                                      {"labels": labels})
        if len(set(labels)) != len(labels):
            raise MalformedInputError("Polybius labels must be distinct.",
                                      {"labels": labels})
        if len(rows) != self.WIDTH:
            raise MalformedInputError(
                f"Polybius square must have {self.WIDTH} data rows, got {len(rows)}.",
                {"rows": len(rows)},
            )
        table = []
        for r, row in enumerate(rows):
            cells = [str(cell).upper() for cell in row]
            if len(cells) != self.WIDTH:
                raise MalformedInputError(
                    f"Polybius row {r} must have {self.WIDTH} cells, got {len(cells)}.",
                    {"row": r, "cells": len(cells)},
                )
            if any(len(cell) > 1 for cell in cells):
                raise MalformedInputError(
                    f"Polybius row {r} cells must hold at most one character.",
                    {"row": r, "cells": cells},
                )
            table.append(cells)

        self._labels = labels
        self._rows   = table

    @classmethod
    def from_table(cls, table: Sequence[Sequence[str]]) -> "PolybiusSquare":
        """Build from a header row followed by the data rows."""
        if not table:
            raise MalformedInputError("Polybius table is empty.")
        return cls(labels=table[0], rows=table[1:])

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def to_table(self) -> List[List[str]]:
        return [list(self._labels)] + [list(row) for row in self._rows]

    def locate(self, symbol: str) -> Optional[Tuple[str, str]]:
        """(row label, column label) of the first cell holding ``symbol``."""
        for r, row in enumerate(self._rows):
            for c, cell in enumerate(row):
                if cell == symbol:
                    return self._labels[r], self._labels[c]
        return None

    def symbol_at(self, row_label: str, col_label: str) -> Optional[str]:
        try:
            r = self._labels.index(row_label)
            c = self._labels.index(col_label)
        except ValueError:
            return None
        return self._rows[r][c] or None

    def fractionate(self, text: str, on_skip: Optional[SkipHandler] = None) -> str:
        """Symbols -> label pairs. Unknown symbols are skipped."""
        out = []
        for symbol in text:
            pair = self.locate(symbol)
            if pair is None:
                _report(SkippedSymbol("fractionate", symbol,
                                      "not found in Polybius square"), on_skip)
                continue
            out.extend(pair)
        return "".join(out)

    def defractionate(self, stream: str, on_skip: Optional[SkipHandler] = None) -> str:
        """Label pairs -> symbols. Unknown pairs and a dangling label are skipped."""
        out = []
        for i in range(0, len(stream) - 1, 2):
            pair = stream[i:i + 2]
            symbol = self.symbol_at(pair[0], pair[1])
            if symbol is None:
                _report(SkippedSymbol("defractionate", pair,
                                      "invalid Polybius coordinates"), on_skip)
                continue
            out.append(symbol)
        if len(stream) % 2:
            _report(SkippedSymbol("defractionate", stream[-1],
                                  "incomplete trailing pair"), on_skip)
        return "".join(out)

    def __repr__(self):
        return f"PolybiusSquare(labels={''.join(self._labels)!r})"


def _report(event: SkippedSymbol, on_skip: Optional[SkipHandler]) -> None:
    logger.warning(f"{event.stage}: skipped {event.symbol!r} ({event.reason})")
    if on_skip is not None:
        on_skip(event)
