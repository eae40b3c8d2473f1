"""
Exception hierarchy.

LengthError means the caller handed over malformed input (a bug on their
side). CryptoError means a primitive refused to work, and its subclass
AuthenticationError means a ciphertext failed verification, which may
indicate an active attacker.
"""


class SaltboxError(Exception):
    """Root of every exception raised by saltbox."""


class LengthError(SaltboxError, ValueError):
    """A key, nonce, tag or ciphertext has the wrong size."""


class CryptoError(SaltboxError):
    """A cryptographic primitive failed."""


class AuthenticationError(CryptoError):
    """Ciphertext failed Poly1305 verification. No plaintext is released."""
