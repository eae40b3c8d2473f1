"""
saltbox
=======
Public-key authenticated encryption, NaCl crypto_box style.

    Curve25519  -- shared key derivation
    XSalsa20    -- encryption (192-bit nonce stream cipher)
    Poly1305    -- authentication (one-time MAC, checked before decryption)

    >>> alice = Box(bob_public, alice_private)
    >>> ct = alice.encrypt(nonce, b"attack at dawn")
    >>> Box(alice_public, bob_private).decrypt(nonce, ct)
    b'attack at dawn'

Key generation, key encoding and nonce selection are the caller's job.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .constants import (
    NONCE_BYTES,
    PRIMITIVE,
    PRIVATE_KEY_BYTES,
    PUBLIC_KEY_BYTES,
    SHARED_KEY_BYTES,
    TAG_BYTES,
    ZERO_BYTES,
)
from .errors import AuthenticationError, CryptoError, LengthError, SaltboxError
from .box    import Box, Curve25519XSalsa20Poly1305Box

__all__ = [
    "Box",
    "Curve25519XSalsa20Poly1305Box",
    "SaltboxError",
    "LengthError",
    "CryptoError",
    "AuthenticationError",
    "PRIMITIVE",
    "PUBLIC_KEY_BYTES",
    "PRIVATE_KEY_BYTES",
    "SHARED_KEY_BYTES",
    "NONCE_BYTES",
    "TAG_BYTES",
    "ZERO_BYTES",
]
