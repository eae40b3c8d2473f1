"""
STREAM CIPHER: XSalsa20
========================
Salsa20/20 with an extended 192-bit nonce.

Salsa20 (Daniel J. Bernstein, 2005) expands a 256-bit key, a 64-bit nonce
and a 64-bit block counter into 64-byte keystream blocks using only
32-bit add / rotate / xor. XSalsa20 widens the nonce to 192 bits: the first
16 nonce bytes go through HSalsa20 to produce a fresh sub-key, and the
last 8 bytes become the ordinary Salsa20 nonce. 192 bits is enough that
randomly generated nonces will not collide in practice.

Key:    256-bit (32 bytes)
Nonce:  192-bit (24 bytes)
Block:  512-bit (64 bytes), counter starts at 0

Backend: libsodium crypto_stream_xsalsa20 / crypto_core_[h]salsa20.
Encryption and decryption are the same XOR, which makes `combine`
self-inverse.
"""

import ctypes
import struct

from ..constants import NONCE_BYTES, SHARED_KEY_BYTES
from ..errors import CryptoError, LengthError
from ..util import check_length, xor_bytes
from . import _sodium

BLOCK_BYTES = 64


def hsalsa20(key: bytes, block: bytes) -> bytes:
    """
    HSalsa20: hash a 32-byte key and a 16-byte input into a 32-byte key.
    Used for the XSalsa20 sub-key and for crypto_box_beforenm.
    """
    key   = check_length(key, SHARED_KEY_BYTES, "Key")
    block = check_length(block, 16, "HSalsa20 input")
    out = ctypes.create_string_buffer(32)
    ret = _sodium.load().crypto_core_hsalsa20(
        out, _sodium.buffer(block), _sodium.buffer(key), None)
    if ret != 0:
        raise CryptoError("HSalsa20 failed.")
    return out.raw


def salsa20_block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """One 64-byte Salsa20/20 keystream block."""
    key   = check_length(key, SHARED_KEY_BYTES, "Key")
    nonce = check_length(nonce, 8, "Salsa20 nonce")
    out = ctypes.create_string_buffer(BLOCK_BYTES)
    ret = _sodium.load().crypto_core_salsa20(
        out, bytes(nonce) + struct.pack("<Q", counter), _sodium.buffer(key), None)
    if ret != 0:
        raise CryptoError("Salsa20 failed.")
    return out.raw


def generate(shared_key: bytes, nonce: bytes, length: int) -> bytearray:
    """
    XSalsa20 keystream of `length` bytes for (shared_key, nonce).
    Deterministic: the same inputs always give the same bytes. Returned
    as a bytearray so the caller can wipe it.
    """
    shared_key = check_length(shared_key, SHARED_KEY_BYTES, "Key")
    nonce      = check_length(nonce, NONCE_BYTES, "Nonce")
    if length < 0:
        raise ValueError("Keystream length must be non-negative.")
    out = bytearray(length)
    if length:
        ret = _sodium.load().crypto_stream_xsalsa20(
            _sodium.buffer(out), ctypes.c_ulonglong(length),
            _sodium.buffer(nonce), _sodium.buffer(shared_key))
        if ret != 0:
            raise CryptoError("XSalsa20 keystream generation failed.")
    return out


def combine(keystream: bytes, data: bytes) -> bytes:
    """
    XOR `data` with the leading bytes of `keystream`.
    Output length equals len(data); applying it twice restores the input.
    """
    if len(keystream) < len(data):
        raise LengthError(
            f"Keystream was {len(keystream)} bytes (Expected at least {len(data)})")
    return xor_bytes(memoryview(keystream)[:len(data)], data)


def xor(shared_key: bytes, nonce: bytes, data: bytes) -> bytes:
    """Encrypt or decrypt `data` with a keystream starting at block 0."""
    shared_key = check_length(shared_key, SHARED_KEY_BYTES, "Key")
    nonce      = check_length(nonce, NONCE_BYTES, "Nonce")
    data       = bytes(data)
    if not data:
        return b""
    out = ctypes.create_string_buffer(len(data))
    ret = _sodium.load().crypto_stream_xsalsa20_xor(
        out, data, ctypes.c_ulonglong(len(data)),
        _sodium.buffer(nonce), _sodium.buffer(shared_key))
    if ret != 0:
        raise CryptoError("XSalsa20 failed.")
    return out.raw
