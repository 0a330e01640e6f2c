"""
classical_crypto - n-gram analysis toolkit
==========================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from classical_crypto.ngram  import (calculate_ic, find_repeated_ngrams, generate_ngrams,
                                     iter_ngrams, ngram_frequency, sort_by_frequency)
from classical_crypto.errors import InvalidKeyError
from classical_crypto.ciphers.vigenere import vigenere_encrypt

ENGLISH = ("It was the best of times it was the worst of times it was the age of "
           "wisdom it was the age of foolishness it was the epoch of belief")

# ── N-grams ──────────────────────────────────────────────────────────────────
def test_generate_overlapping():
    assert generate_ngrams("ABCD", 2) == ["AB", "BC", "CD"]

def test_generate_non_overlapping_strips_whitespace():
    assert generate_ngrams("AB CD\tE", 2, overlapping=False) == ["AB", "CD"]

def test_generate_keeps_punctuation():
    assert generate_ngrams("a,b", 2) == ["a,", ",b"]

def test_generate_n_longer_than_text():
    assert generate_ngrams("AB", 3) == []

@pytest.mark.parametrize("n", [0, -1])
def test_generate_rejects_non_positive(n):
    with pytest.raises(InvalidKeyError):
        generate_ngrams("ABCD", n)
    with pytest.raises(InvalidKeyError):
        iter_ngrams("ABCD", n)

def test_ngram_frequency():
    assert ngram_frequency("ABAB", 2) == {"AB": 2, "BA": 1}
    assert ngram_frequency("ABAB", 2, overlapping=False) == {"AB": 2}

def test_sort_by_frequency():
    assert sort_by_frequency({"A": 1, "B": 3, "C": 2}) == [("B", 3), ("C", 2), ("A", 1)]

def test_sort_by_frequency_top_bigram():
    _, count = sort_by_frequency(ngram_frequency(ENGLISH, 2))[0]
    assert count == max(ngram_frequency(ENGLISH, 2).values())

# ── Index of coincidence ─────────────────────────────────────────────────────
def test_ic_identical_letters():
    assert calculate_ic("AAAA") == 1.0
    assert calculate_ic("a a!A") == 1.0

@pytest.mark.parametrize("text", ["", "A", "7 !", "AB"])
def test_ic_degenerate(text):
    assert calculate_ic(text) == 0

def test_ic_value():
    assert calculate_ic("AABB") == pytest.approx(1 / 3)

def test_ic_drops_under_polyalphabetic():
    plain_ic  = calculate_ic(ENGLISH)
    cipher_ic = calculate_ic(vigenere_encrypt(ENGLISH, "LONGERKEYWORD"))
    assert cipher_ic < plain_ic

# ── Repeated n-grams ─────────────────────────────────────────────────────────
def test_find_repeated_single_length():
    assert find_repeated_ngrams("ABCXABC", 3, 3) == {"ABC": [0, 4]}

def test_find_repeated_default_window():
    assert find_repeated_ngrams("ABCDABCD") == {
        "ABC": [0, 4], "BCD": [1, 5], "ABCD": [0, 4],
    }

def test_find_repeated_strips_whitespace_only():
    assert find_repeated_ngrams("ABC ABC", 3, 3) == {"ABC": [0, 3]}
    assert find_repeated_ngrams("AB1AB1", 3, 3) == {"AB1": [0, 3]}

def test_find_repeated_none():
    assert find_repeated_ngrams("ABCDEFG") == {}

@pytest.mark.parametrize("lo,hi", [(0, 3), (3, 2), (-1, -1)])
def test_find_repeated_rejects_bad_window(lo, hi):
    with pytest.raises(InvalidKeyError):
        find_repeated_ngrams("ABCABC", lo, hi)
