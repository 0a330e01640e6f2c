"""
Exceptions raised by classical_crypto.

Every error subclasses ValueError, so callers that already guard cipher
calls with ``except ValueError`` keep working.

    CipherError
      ├── InvalidKeyError      key fails a structural / mathematical check
      └── MalformedInputError  custom Polybius square has the wrong shape

Plaintext shape never raises: ciphers sanitize or pass characters through.
"""

from typing import Any, Dict, Optional


class CipherError(ValueError):
    """Base exception for all cipher errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidKeyError(CipherError):
    """Raised when key material fails validation."""


class MalformedInputError(CipherError):
    """Raised when a custom Polybius square does not match the header width."""
