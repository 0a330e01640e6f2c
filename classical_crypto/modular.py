"""
Modular arithmetic
==================
Small-modulus helpers shared by the Affine and Hill ciphers.
The modulus is always tiny (26), so the inverse is found by linear search.
"""

from typing import Optional


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def is_coprime(a: int, m: int) -> bool:
    return gcd(a, m) == 1


def mod_inverse(a: int, m: int) -> Optional[int]:
    """
    Return x in [1, m) with (a * x) % m == 1, or None if no inverse exists.
    """
    a %= m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None
