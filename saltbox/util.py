"""
Byte-level helpers shared by the primitives and the Box.

Length checks, constant-time comparison, XOR and in-place wiping of key
buffers.
"""

from cryptography.hazmat.primitives import constant_time

from .errors import LengthError

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _as_buffer(data, description: str):
    if not isinstance(data, _BYTES_LIKE):
        raise TypeError(
            f"{description} must be bytes, not {type(data).__name__}.")
    # A bytearray is passed through uncopied so key buffers stay wipeable.
    return bytes(data) if isinstance(data, memoryview) else data


def check_length(data, length: int, description: str):
    """
    Ensure `data` is a bytes-like object of exactly `length` bytes.
    Returns bytes or the caller's bytearray. The value itself never
    appears in the error message, only its size.
    """
    data = _as_buffer(data, description)
    if len(data) != length:
        raise LengthError(
            f"{description} was {len(data)} bytes (Expected {length})")
    return data


def check_min_length(data, length: int, description: str):
    """Like check_length, but any size >= `length` is accepted."""
    data = _as_buffer(data, description)
    if len(data) < length:
        raise LengthError(
            f"{description} was {len(data)} bytes (Expected at least {length})")
    return data


def zeros(n: int = 32) -> bytes:
    return b"\x00" * n


def verify(a: bytes, b: bytes) -> bool:
    """Constant-time equality; lengths are not secret."""
    return constant_time.bytes_eq(bytes(a), bytes(b))


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two equal-length byte strings."""
    if len(a) != len(b):
        raise LengthError(f"Cannot XOR {len(a)} bytes with {len(b)} bytes")
    if not len(a):
        return b""
    x = int.from_bytes(a, "little") ^ int.from_bytes(b, "little")
    return x.to_bytes(len(a), "little")


def wipe(buffer: bytearray) -> None:
    """Overwrite a mutable buffer with zeros in place."""
    buffer[:] = bytes(len(buffer))
