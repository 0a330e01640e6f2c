"""
Route Cipher
============
Write the text row-major into a rows x cols grid, then read it back along
a route:

    spiral    clockwise (right, down, left, up) or counter-clockwise
              (down, right, up, left), shrinking one ring at a time
    snake     even rows left to right, odd rows right to left
    diagonal  anti-diagonals r + c = 0, 1, 2, ... each top row first

    1 2 3     spiral clockwise    1 2 3 6 9 8 7 4 5
    4 5 6     snake               1 2 3 6 5 4 7 8 9
    7 8 9     diagonal            1 2 4 3 5 7 6 8 9

The route is generated as an explicit list of (row, col) coordinates
independent of the content, so decryption replays the same list.

Encryption keeps letters and digits only (case preserved) and pads the
grid with 'X'. Text that does not fit is truncated with a warning.
"""

import logging
from typing import List, Tuple

from ..alphabet import alphanumeric_only
from ..errors import InvalidKeyError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def spiral_positions(rows: int, cols: int, clockwise: bool = True) -> List[Position]:
    positions = []
    top, bottom = 0, rows - 1
    left, right = 0, cols - 1

    while top <= bottom and left <= right:
        if clockwise:
            positions.extend((top, c) for c in range(left, right + 1))
            top += 1
            positions.extend((r, right) for r in range(top, bottom + 1))
            right -= 1
            if top <= bottom:
                positions.extend((bottom, c) for c in range(right, left - 1, -1))
                bottom -= 1
            if left <= right:
                positions.extend((r, left) for r in range(bottom, top - 1, -1))
                left += 1
        else:
            positions.extend((r, left) for r in range(top, bottom + 1))
            left += 1
            positions.extend((bottom, c) for c in range(left, right + 1))
            bottom -= 1
            if left <= right:
                positions.extend((r, right) for r in range(bottom, top - 1, -1))
                right -= 1
            if top <= bottom:
                positions.extend((top, c) for c in range(right, left - 1, -1))
                top += 1
    return positions


def snake_positions(rows: int, cols: int) -> List[Position]:
    positions = []
    for r in range(rows):
        span = range(cols) if r % 2 == 0 else range(cols - 1, -1, -1)
        positions.extend((r, c) for c in span)
    return positions


def diagonal_positions(rows: int, cols: int) -> List[Position]:
    positions = []
    for total in range(rows + cols - 1):
        for r in range(max(0, total - cols + 1), min(rows, total + 1)):
            positions.append((r, total - r))
    return positions


class RouteCipher:
    """Grid transposition along a named route."""

    ROUTES     = ("spiral", "snake", "diagonal")
    DIRECTIONS = ("clockwise", "counter-clockwise")
    PAD        = "X"

    def __init__(self, rows: int, cols: int, route: str = "spiral",
                 direction: str = "clockwise"):
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidKeyError("Number of rows and columns must be positive",
                                      {name: value})
        route_name = str(route).lower()
        if route_name not in self.ROUTES:
            raise InvalidKeyError(
                "Unsupported route type. Use 'spiral', 'snake', or 'diagonal'",
                {"route": route},
            )
        self._rows      = rows
        self._cols      = cols
        self._positions = route_positions(rows, cols, route_name, str(direction))

    @property
    def positions(self) -> List[Position]:
        return list(self._positions)

    def encrypt(self, plaintext: str) -> str:
        capacity = self._rows * self._cols
        text = alphanumeric_only(plaintext)
        if len(text) > capacity:
            logger.warning(
                f"Route grid {self._rows}x{self._cols} holds {capacity} symbols; "
                f"dropping {len(text) - capacity}"
            )
            text = text[:capacity]
        text = text.ljust(capacity, self.PAD)
        return "".join(text[r * self._cols + c] for r, c in self._positions)

    def decrypt(self, ciphertext: str) -> str:
        grid = [[""] * self._cols for _ in range(self._rows)]
        for (r, c), ch in zip(self._positions, ciphertext):
            grid[r][c] = ch
        return "".join("".join(row) for row in grid)


def route_positions(rows: int, cols: int, route: str = "spiral",
                    direction: str = "clockwise") -> List[Position]:
    """Ordered (row, col) coordinates visited by ``route``."""
    route = route.lower()
    if route == "spiral":
        direction = direction.lower()
        if direction not in RouteCipher.DIRECTIONS:
            raise InvalidKeyError(
                "Unsupported direction. Use 'clockwise' or 'counter-clockwise'",
                {"direction": direction},
            )
        return spiral_positions(rows, cols, direction == "clockwise")
    if route == "snake":
        return snake_positions(rows, cols)
    if route == "diagonal":
        return diagonal_positions(rows, cols)
    raise InvalidKeyError(
        "Unsupported route type. Use 'spiral', 'snake', or 'diagonal'",
        {"route": route},
    )


def route_encrypt(plaintext: str, rows: int, cols: int, route: str = "spiral",
                  direction: str = "clockwise") -> str:
    return RouteCipher(rows, cols, route, direction).encrypt(plaintext)


def route_decrypt(ciphertext: str, rows: int, cols: int, route: str = "spiral",
                  direction: str = "clockwise") -> str:
    return RouteCipher(rows, cols, route, direction).decrypt(ciphertext)
