"""
AUTHENTICATOR: Poly1305
========================
One-time message authentication code (Daniel J. Bernstein, 2005).

Poly1305 evaluates the message as a polynomial modulo 2^130 - 5 under a
256-bit one-time key and produces a 128-bit tag. "One-time" is literal:
two messages authenticated under the same key let an attacker forge
others. The Box therefore never stores a Poly1305 key; it takes a fresh
one from the first 32 bytes of the XSalsa20 keystream for every nonce.

Key:  256-bit (32 bytes), single use
Tag:  128-bit (16 bytes)

Backend: cryptography.hazmat.primitives.poly1305 (OpenSSL). verify_tag
compares in constant time.
"""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.poly1305 import Poly1305

from ..constants import TAG_BYTES
from ..util import check_length

logger = logging.getLogger(__name__)

KEY_BYTES = 32


def tag(sub_key: bytes, ciphertext: bytes) -> bytes:
    """Compute the 16-byte Poly1305 tag of `ciphertext` under `sub_key`."""
    sub_key = check_length(sub_key, KEY_BYTES, "One-time key")
    return Poly1305.generate_tag(sub_key, bytes(ciphertext))


def verify(sub_key: bytes, ciphertext: bytes, candidate_tag: bytes) -> bool:
    """
    True if `candidate_tag` authenticates `ciphertext` under `sub_key`.
    The comparison does not exit early on the first differing byte.
    """
    sub_key       = check_length(sub_key, KEY_BYTES, "One-time key")
    candidate_tag = check_length(candidate_tag, TAG_BYTES, "Authenticator")
    try:
        Poly1305.verify_tag(sub_key, bytes(ciphertext), bytes(candidate_tag))
    except InvalidSignature:
        logger.debug(f"Poly1305 mismatch over {len(ciphertext)}B")
        return False
    return True
