"""
classical_crypto
================
Classical (pre-modern) ciphers and the statistics used to break them.
For teaching and puzzles; none of these are secure.

Ciphers:
    MONOALPHABETIC   Caesar, Atbash, Affine
    POLYALPHABETIC   Vigenere, Gronsfeld, Beaufort, Autokey
    POLYGRAPHIC      Hill (numpy, 2x2 decryption)
    TRANSPOSITION    Rail Fence, Route, Myszkowski
    COMPOSITE        ADFGVX / "August" (Polybius + columnar)
    ANALYSIS         n-grams, index of coincidence, repeated n-grams

Every cipher has a class (key validated in the constructor) and a pair of
functions, e.g. ``HillCipher(key).encrypt(text)`` or
``hill_encrypt(text, key)``. Bad keys raise InvalidKeyError; malformed
custom Polybius squares raise MalformedInputError.
"""

__version__  = "1.0.0"

from .errors                import CipherError, InvalidKeyError, MalformedInputError
from .polybius              import PolybiusSquare, SkippedSymbol
from .ciphers.caesar        import CaesarCipher, caesar_encrypt, caesar_decrypt
from .ciphers.atbash        import AtbashCipher, atbash_encrypt, atbash_decrypt
from .ciphers.affine        import AffineCipher, affine_encrypt, affine_decrypt
from .ciphers.vigenere      import VigenereCipher, vigenere_encrypt, vigenere_decrypt
from .ciphers.gronsfeld     import GronsfeldCipher, gronsfeld_encrypt, gronsfeld_decrypt
from .ciphers.beaufort      import (BeaufortCipher, beaufort_cipher,
                                    beaufort_encrypt, beaufort_decrypt)
from .ciphers.autokey       import AutokeyCipher, autokey_encrypt, autokey_decrypt
from .ciphers.hill          import HillCipher, hill_encrypt, hill_decrypt
from .ciphers.adfgvx        import (ADFGVXCipher, august_encrypt, august_decrypt,
                                    adfgvx_encrypt, adfgvx_decrypt)
from .ciphers.myszkowski    import MyszkowskiCipher, myszkowski_encrypt, myszkowski_decrypt
from .ciphers.rail_fence    import RailFenceCipher, rail_fence_encrypt, rail_fence_decrypt
from .ciphers.route         import RouteCipher, route_encrypt, route_decrypt, route_positions
from .ngram                 import (generate_ngrams, iter_ngrams, ngram_frequency,
                                    sort_by_frequency, calculate_ic, find_repeated_ngrams)

__all__ = [
    "CipherError", "InvalidKeyError", "MalformedInputError",
    "PolybiusSquare", "SkippedSymbol",
    "CaesarCipher", "caesar_encrypt", "caesar_decrypt",
    "AtbashCipher", "atbash_encrypt", "atbash_decrypt",
    "AffineCipher", "affine_encrypt", "affine_decrypt",
    "VigenereCipher", "vigenere_encrypt", "vigenere_decrypt",
    "GronsfeldCipher", "gronsfeld_encrypt", "gronsfeld_decrypt",
    "BeaufortCipher", "beaufort_cipher", "beaufort_encrypt", "beaufort_decrypt",
    "AutokeyCipher", "autokey_encrypt", "autokey_decrypt",
    "HillCipher", "hill_encrypt", "hill_decrypt",
    "ADFGVXCipher", "august_encrypt", "august_decrypt",
    "adfgvx_encrypt", "adfgvx_decrypt",
    "MyszkowskiCipher", "myszkowski_encrypt", "myszkowski_decrypt",
    "RailFenceCipher", "rail_fence_encrypt", "rail_fence_decrypt",
    "RouteCipher", "route_encrypt", "route_decrypt", "route_positions",
    "generate_ngrams", "iter_ngrams", "ngram_frequency",
    "sort_by_frequency", "calculate_ic", "find_repeated_ngrams",
]
