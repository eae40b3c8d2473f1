"""
KEY AGREEMENT: Curve25519
==========================
Elliptic-curve Diffie-Hellman over Curve25519 (X25519, RFC 7748).

Alice multiplies Bob's public point by her private scalar; Bob multiplies
Alice's public point by his. Both land on the same point, so

    derive(pk_alice, sk_bob) == derive(pk_bob, sk_alice)

without the secret ever crossing the wire.

The raw X25519 output is not uniformly random, so NaCl hashes it once
with HSalsa20 (zero input block) before using it as a stream cipher key.
derive() is crypto_box_beforenm itself, so the shared key is
byte-compatible with NaCl, libsodium and everything built on them.

Public key:  256-bit (32 bytes)
Private key: 256-bit (32 bytes), clamped by X25519
Shared key:  256-bit (32 bytes)

Backends: PyNaCl (crypto_box_beforenm) for derive(),
          cryptography X25519 for the bare scalarmult().
"""

import logging

import nacl.exceptions
from nacl.bindings import crypto_box_beforenm
from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)

from ..constants import PRIVATE_KEY_BYTES, PUBLIC_KEY_BYTES
from ..errors import CryptoError
from ..util import check_length, verify, zeros

logger = logging.getLogger(__name__)


def scalarmult(private_key: bytes, public_key: bytes) -> bytes:
    """
    Raw X25519: private scalar times public point, 32 bytes out.
    Raises CryptoError for low-order points that give an all-zero result.
    """
    private_key = check_length(private_key, PRIVATE_KEY_BYTES, "Private key")
    public_key  = check_length(public_key, PUBLIC_KEY_BYTES, "Public key")
    try:
        sk = X25519PrivateKey.from_private_bytes(bytes(private_key))
        pk = X25519PublicKey.from_public_bytes(bytes(public_key))
        point = sk.exchange(pk)
    except ValueError as e:
        logger.warning("X25519 rejected the public key (low-order point)")
        raise CryptoError("Failed to derive shared key") from e
    if verify(point, zeros(32)):
        logger.warning("X25519 produced an all-zero shared point")
        raise CryptoError("Failed to derive shared key")
    return point


def derive(public_key: bytes, private_key: bytes) -> bytes:
    """
    crypto_box_beforenm: HSalsa20(X25519(private_key, public_key), 0^16).
    Pure function of its inputs; symmetric across the two key pairs.
    """
    public_key  = check_length(public_key, PUBLIC_KEY_BYTES, "Public key")
    private_key = check_length(private_key, PRIVATE_KEY_BYTES, "Private key")
    try:
        return crypto_box_beforenm(bytes(public_key), bytes(private_key))
    except nacl.exceptions.CryptoError as e:
        logger.warning("crypto_box_beforenm rejected the public key")
        raise CryptoError("Failed to derive shared key") from e
