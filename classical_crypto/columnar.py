"""
Keyed columnar transposition primitives
=======================================
Shared by ADFGVX and Myszkowski.

Ranking a keyword
-----------------
Letters are stable-sorted alphabetically. Two ranking modes:

    unique_ranks("TOMATO") -> [4, 2, 1, 0, 5, 3]   ties broken by position
    tied_ranks("TOMATO")   -> [3, 2, 1, 0, 3, 2]   equal letters share a rank

Ranks always form a contiguous range starting at 0.

Column lengths
--------------
Text of length L written row-major into a grid of width W leaves the last
row short. The ``rows * W - L`` empty cells sit in the rightmost columns of
the grid in original key order, never in rank order. ``column_lengths``
encodes that once so both decrypt paths share it.
"""

import math
from typing import Dict, List, Optional, Sequence


def _sorted_positions(keyword: str) -> List[int]:
    # sorted() is stable: equal letters keep their left-to-right order
    return sorted(range(len(keyword)), key=lambda i: keyword[i])


def unique_ranks(keyword: str) -> List[int]:
    """Rank 0..len-1 per keyword position, no tie sharing."""
    ranks = [0] * len(keyword)
    for rank, pos in enumerate(_sorted_positions(keyword)):
        ranks[pos] = rank
    return ranks


def tied_ranks(keyword: str) -> List[int]:
    """Rank per keyword position; equal letters get the same rank."""
    ranks = [0] * len(keyword)
    rank = 0
    previous = None
    for pos in _sorted_positions(keyword):
        if previous is not None and keyword[pos] != previous:
            rank += 1
        ranks[pos] = rank
        previous = keyword[pos]
    return ranks


def rank_groups(ranks: Sequence[int]) -> List[List[int]]:
    """
    Column indices grouped by rank, groups in ascending rank order,
    columns inside a group left to right.
    """
    groups: Dict[int, List[int]] = {}
    for col, rank in enumerate(ranks):
        groups.setdefault(rank, []).append(col)
    return [groups[rank] for rank in sorted(groups)]


def row_count(length: int, width: int) -> int:
    return math.ceil(length / width) if length else 0


def column_lengths(length: int, width: int,
                   shortened_order: Optional[Sequence[int]] = None) -> List[int]:
    """
    Number of characters each column holds after a row-major fill.

    ``shortened_order`` lists column indices; its last ``rows * width -
    length`` entries are one row short. Defaults to original left-to-right
    order, which is what a row-major fill produces.
    """
    rows = row_count(length, width)
    empty = rows * width - length
    order = list(shortened_order) if shortened_order is not None else list(range(width))
    lengths = [rows] * width
    for col in order[width - empty:]:
        lengths[col] -= 1
    return lengths


def fill_rows(text: str, width: int) -> List[List[str]]:
    """Lay ``text`` out row-major; the last row may be short."""
    return [list(text[i:i + width]) for i in range(0, len(text), width)]


def read_rows(grid: List[List[str]]) -> str:
    return "".join("".join(cell for cell in row if cell) for row in grid)
