"""
BOX: Curve25519 + XSalsa20 + Poly1305
======================================
Public-key authenticated encryption between two fixed key pairs
(NaCl crypto_box).

    shared key  = HSalsa20(X25519(sk_self, pk_peer), 0)      -- once per Box
    keystream   = XSalsa20(shared key, nonce)                 -- per message
    one-time key= keystream[0:32]
    body        = message XOR keystream[32:]
    tag         = Poly1305(one-time key, body)
    ciphertext  = tag(16) || body

Alice's Box(pk_bob, sk_alice) and Bob's Box(pk_alice, sk_bob) hold the
same shared key, so either can open what the other sealed.

It is VITALLY important that the nonce is a nonce: a number used only once
for a given pair of keys. Both directions share the key, so give each side
its own nonce prefix, or have one side count odd and the other even.
Encryption is deterministic; reusing a nonce leaks the XOR of the two
messages and the Poly1305 key.

The tag is not a signature. Anyone able to open the box can also forge
boxes, so messages are repudiable. Sign before or after encryption if
that matters.

Key generation and key encoding live outside this module; a Box accepts
raw 32-byte keys only.

Dependencies: cryptography >= 41.0, pynacl >= 1.5 (libsodium)
"""

import logging

from . import constants
from .constants import NONCE_BYTES, PRIVATE_KEY_BYTES, \
    PUBLIC_KEY_BYTES, TAG_BYTES, ZERO_BYTES
from .errors import AuthenticationError, CryptoError
from .primitives import curve25519, poly1305, xsalsa20
from .util import check_length, check_min_length, wipe

logger = logging.getLogger(__name__)


class Curve25519XSalsa20Poly1305Box:
    """Boxes and opens messages between a pair of keys."""

    PRIMITIVE   = constants.PRIMITIVE
    NONCE_BYTES = NONCE_BYTES
    TAG_BYTES   = TAG_BYTES

    def __init__(self, public_key: bytes, private_key: bytes):
        """
        public_key:  the peer's 32-byte public key (who we talk to)
        private_key: our own 32-byte private key

        Raises LengthError on a malformed key before any curve arithmetic,
        CryptoError if the key agreement fails. The private key is not
        kept once the shared key is derived.
        """
        self._shared_key = None
        public_key  = check_length(public_key, PUBLIC_KEY_BYTES, "Public key")
        private_key = check_length(private_key, PRIVATE_KEY_BYTES, "Private key")
        self._shared_key = bytearray(curve25519.derive(public_key, private_key))
        logger.debug(f"Box keyed | primitive={self.PRIMITIVE}")

    @classmethod
    def primitive(cls) -> str:
        return cls.PRIMITIVE

    @classmethod
    def nonce_bytes(cls) -> int:
        return cls.NONCE_BYTES

    @property
    def closed(self) -> bool:
        return self._shared_key is None

    def _key(self) -> bytearray:
        """The shared key buffer itself, not a copy."""
        if self._shared_key is None:
            raise CryptoError("Box is closed; its key material was wiped.")
        return self._shared_key

    def encrypt(self, nonce: bytes, message: bytes) -> bytes:
        """
        Encrypt and authenticate `message` under `nonce`.
        Returns: tag(16) || body, len(message) + 16 bytes.
        Raises LengthError if the nonce is not 24 bytes.
        """
        nonce   = check_length(nonce, NONCE_BYTES, "Nonce")
        message = check_min_length(message, 0, "Message")
        key     = self._key()

        # NaCl layout: the first 32 keystream bytes are the Poly1305
        # one-time key, the rest encrypts the message. Both are wiped.
        keystream    = xsalsa20.generate(key, nonce, ZERO_BYTES + len(message))
        one_time_key = keystream[:ZERO_BYTES]
        try:
            body = xsalsa20.combine(memoryview(keystream)[ZERO_BYTES:], message)
            mac  = poly1305.tag(one_time_key, body)
        finally:
            wipe(one_time_key)
            wipe(keystream)
        logger.debug(f"Box encrypt: pt={len(message)}B ct={len(body) + TAG_BYTES}B")
        return mac + body

    def decrypt(self, nonce: bytes, ciphertext: bytes) -> bytes:
        """
        Verify and decrypt a ciphertext produced by encrypt().
        Raises LengthError on a bad nonce or a ciphertext shorter than the
        tag, AuthenticationError if verification fails. Nothing is
        decrypted until the tag checks out.
        """
        nonce      = check_length(nonce, NONCE_BYTES, "Nonce")
        ciphertext = check_min_length(ciphertext, TAG_BYTES, "Ciphertext")
        key        = self._key()

        mac  = bytes(ciphertext[:TAG_BYTES])
        body = bytes(ciphertext[TAG_BYTES:])
        keystream    = xsalsa20.generate(key, nonce, ZERO_BYTES + len(body))
        one_time_key = keystream[:ZERO_BYTES]
        try:
            if not poly1305.verify(one_time_key, body, mac):
                logger.warning(
                    f"Box decrypt: authentication failed ({len(ciphertext)}B)")
                raise AuthenticationError(
                    "Decryption failed. Ciphertext failed verification.")
            message = xsalsa20.combine(memoryview(keystream)[ZERO_BYTES:], body)
        finally:
            wipe(one_time_key)
            wipe(keystream)
        logger.debug(f"Box decrypt: ct={len(ciphertext)}B pt={len(message)}B")
        return message

    box  = encrypt
    open = decrypt

    def close(self) -> None:
        """Zero the shared key. The Box is unusable afterwards."""
        if self._shared_key is not None:
            wipe(self._shared_key)
            self._shared_key = None

    def __enter__(self) -> "Curve25519XSalsa20Poly1305Box":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __del__(self):
        if getattr(self, "_shared_key", None) is not None:
            self.close()

    def __repr__(self):
        state = "closed" if self.closed else "keyed"
        return f"{type(self).__name__}({self.PRIMITIVE}, {state})"


Box = Curve25519XSalsa20Poly1305Box
