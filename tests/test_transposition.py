"""
classical_crypto - Myszkowski, Rail Fence, Route
================================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
import logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from classical_crypto.ciphers.myszkowski import (MyszkowskiCipher, myszkowski_encrypt,
                                                 myszkowski_decrypt)
from classical_crypto.ciphers.rail_fence import (RailFenceCipher, rail_fence_encrypt,
                                                 rail_fence_decrypt)
from classical_crypto.ciphers.route      import (RouteCipher, route_encrypt, route_decrypt,
                                                 route_positions)
from classical_crypto.errors             import InvalidKeyError

MSG = "WEAREDISCOVEREDFLEEATONCE"

# ── Myszkowski ───────────────────────────────────────────────────────────────
def test_myszkowski_known_vector():
    assert myszkowski_encrypt(MSG, "TOMATO") == "ROFOACDTESEADEECWIREEEVLN"
    assert myszkowski_decrypt("ROFOACDTESEADEECWIREEEVLN", "TOMATO") == MSG

def test_myszkowski_tied_columns_read_whole():
    # rank 2 holds columns 1 and 5: ESEA then DEEC, not interleaved
    ct = myszkowski_encrypt(MSG, "TOMATO")
    assert ct[8:16] == "ESEADEEC"

def test_myszkowski_ranks():
    assert MyszkowskiCipher("tomato").ranks == [3, 2, 1, 0, 3, 2]

def test_myszkowski_raw_text_roundtrip():
    text = "We are discovered. Flee at once!"
    ct = myszkowski_encrypt(text, "TOMATO")
    assert sorted(ct) == sorted(text)
    assert myszkowski_decrypt(ct, "TOMATO") == text

@pytest.mark.parametrize("keyword", ["TOMATO", "BANANA", "AAAA", "ZEBRAS", "A", "MISSISSIPPI"])
def test_myszkowski_roundtrip_every_length(keyword):
    cipher = MyszkowskiCipher(keyword)
    width = len(keyword)
    for length in range(0, 3 * width + 2):
        text = "".join(chr(ord("a") + i % 26) for i in range(length)).swapcase()[::-1]
        assert cipher.decrypt(cipher.encrypt(text)) == text

def test_myszkowski_all_tied_reads_columns_in_order():
    # H E L / L O _ / W O R / L D
    assert myszkowski_encrypt("HELLO WORLD", "AAA") == "HLWLEOODL R"
    assert myszkowski_decrypt("HLWLEOODL R", "AAA") == "HELLO WORLD"

def test_myszkowski_empty_keyword():
    with pytest.raises(InvalidKeyError):
        myszkowski_encrypt(MSG, "--")

# ── Rail Fence ───────────────────────────────────────────────────────────────
def test_rail_fence_known_vector():
    assert rail_fence_encrypt(MSG, 3) == "WECRLTEERDSOEEFEAOCAIVDEN"
    assert rail_fence_decrypt("WECRLTEERDSOEEFEAOCAIVDEN", 3) == MSG

def test_rail_fence_pattern():
    assert RailFenceCipher(3).pattern(7) == [0, 1, 2, 1, 0, 1, 2]
    assert RailFenceCipher(2).pattern(4) == [0, 1, 0, 1]

@pytest.mark.parametrize("rails", [2, 3, 4, 5, 7, 40])
def test_rail_fence_roundtrip(rails):
    text = "Hello, rail fence world! 123"
    assert rail_fence_decrypt(rail_fence_encrypt(text, rails), rails) == text

@pytest.mark.parametrize("rails", [1, 0, -3, "3", 2.0])
def test_rail_fence_rejects_bad_rails(rails):
    with pytest.raises(InvalidKeyError):
        rail_fence_encrypt("text", rails)

def test_rail_fence_empty_text():
    assert rail_fence_encrypt("", 3) == ""
    assert rail_fence_decrypt("", 3) == ""

# ── Route ────────────────────────────────────────────────────────────────────
def test_route_spiral_clockwise():
    assert route_encrypt("123456789", 3, 3, "spiral") == "123698745"

def test_route_spiral_counter_clockwise():
    assert route_encrypt("123456789", 3, 3, "spiral", "counter-clockwise") == "147896325"

def test_route_snake_and_diagonal():
    assert route_encrypt("123456789", 3, 3, "snake") == "123654789"
    assert route_encrypt("123456789", 3, 3, "Diagonal") == "124357689"

def test_route_spiral_non_square():
    # 1 2 3 4
    # 5 6 7 8
    assert route_encrypt("12345678", 2, 4) == "12348765"
    assert route_encrypt("12345678", 4, 2) == "12468753"

SHAPES = [(1, 1), (1, 5), (5, 1), (2, 3), (3, 2), (4, 4), (3, 5), (6, 2), (5, 7)]
ROUTES = [("spiral", "clockwise"), ("spiral", "counter-clockwise"),
          ("snake", "clockwise"), ("diagonal", "clockwise")]

@pytest.mark.parametrize("rows,cols", SHAPES)
@pytest.mark.parametrize("route,direction", ROUTES)
def test_route_visits_every_cell_once(rows, cols, route, direction):
    positions = route_positions(rows, cols, route, direction)
    assert len(positions) == rows * cols
    assert sorted(positions) == [(r, c) for r in range(rows) for c in range(cols)]

@pytest.mark.parametrize("route,direction", ROUTES)
def test_route_roundtrip(route, direction):
    ct = route_encrypt("Hello World", 3, 4, route, direction)
    assert route_decrypt(ct, 3, 4, route, direction) == "HelloWorldXX"

def test_route_truncates_overflow(caplog):
    with caplog.at_level(logging.WARNING):
        ct = route_encrypt("ABCDEFGHIJ", 3, 3, "snake")
    assert ct == "ABCFEDGHI"
    assert "dropping 1" in caplog.text

def test_route_unsupported_name():
    with pytest.raises(InvalidKeyError) as exc:
        route_encrypt("HELLO", 2, 3, "zigzag")
    for name in ("spiral", "snake", "diagonal"):
        assert name in str(exc.value)

@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_route_rejects_bad_dimensions(rows, cols):
    with pytest.raises(InvalidKeyError):
        RouteCipher(rows, cols)

def test_route_rejects_bad_direction():
    with pytest.raises(InvalidKeyError):
        RouteCipher(3, 3, "spiral", "sideways")

@pytest.mark.parametrize("route", ["snake", "diagonal"])
def test_route_ignores_direction_off_spiral(route):
    cipher = RouteCipher(3, 3, route, "sideways")
    assert cipher.positions == route_positions(3, 3, route, "sideways")
    assert cipher.encrypt("123456789") == route_encrypt("123456789", 3, 3, route)
