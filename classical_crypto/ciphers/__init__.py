"""Cipher implementations, one module per cipher."""
