"""
N-gram analysis
===============
Statistics for breaking the ciphers in this package. None of the ciphers
depend on this module.

    generate_ngrams      windows of n characters (overlapping or jumping)
    ngram_frequency      Counter of those windows
    sort_by_frequency    (ngram, count) pairs, most frequent first
    calculate_ic         index of coincidence over A-Z
    find_repeated_ngrams Kasiski step: repeats and their start positions

Index of coincidence is ~0.067 for English and ~0.038 for uniformly random
letters, so a low IC points at a polyalphabetic cipher.

Whitespace is removed before windowing; other characters are kept.
"""

import re
from collections import Counter
from typing import Dict, Iterator, List, Mapping, Tuple

from .alphabet import letters_only
from .errors import InvalidKeyError

_WHITESPACE = re.compile(r"\s+")


def _strip_whitespace(text: str) -> str:
    return _WHITESPACE.sub("", text)


def _check_size(n: int, name: str = "n") -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidKeyError("N-gram size must be positive", {name: n})


def iter_ngrams(text: str, n: int, overlapping: bool = True) -> Iterator[str]:
    """Length-n windows, stepping by 1 (overlapping) or by n."""
    _check_size(n)
    normalized = _strip_whitespace(text)
    step = 1 if overlapping else n
    return (normalized[i:i + n] for i in range(0, len(normalized) - n + 1, step))


def generate_ngrams(text: str, n: int, overlapping: bool = True) -> List[str]:
    return list(iter_ngrams(text, n, overlapping))


def ngram_frequency(text: str, n: int, overlapping: bool = True) -> Counter:
    return Counter(iter_ngrams(text, n, overlapping))


def sort_by_frequency(frequency: Mapping[str, int]) -> List[Tuple[str, int]]:
    """
    Pairs ordered by count, highest first.

    Equal counts keep the mapping's iteration order, which for a Counter
    built by ngram_frequency is first-occurrence order in the text.
    """
    return sorted(frequency.items(), key=lambda item: item[1], reverse=True)


def calculate_ic(text: str) -> float:
    """sum f(f-1) / N(N-1) over A-Z, case-insensitive. 0.0 when N <= 1."""
    letters = letters_only(text)
    total = len(letters)
    if total <= 1:
        return 0.0
    coincidences = sum(f * (f - 1) for f in Counter(letters).values())
    return coincidences / (total * (total - 1))


def find_repeated_ngrams(text: str, min_length: int = 3,
                         max_length: int = 5) -> Dict[str, List[int]]:
    """
    Every n-gram (min_length <= n <= max_length) occurring at least twice,
    mapped to its start positions in the whitespace-stripped text.
    """
    _check_size(min_length, "min_length")
    _check_size(max_length, "max_length")
    if max_length < min_length:
        raise InvalidKeyError("max_length must not be smaller than min_length",
                              {"min_length": min_length, "max_length": max_length})

    normalized = _strip_whitespace(text)
    repeated: Dict[str, List[int]] = {}
    for n in range(min_length, max_length + 1):
        seen: Dict[str, List[int]] = {}
        for i in range(len(normalized) - n + 1):
            seen.setdefault(normalized[i:i + n], []).append(i)
        repeated.update((gram, pos) for gram, pos in seen.items() if len(pos) > 1)
    return repeated
