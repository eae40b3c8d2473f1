"""
libsodium via ctypes.

`cryptography` has no Salsa20 family, so the stream cipher calls
libsodium directly. A system libsodium is preferred; otherwise the copy
statically linked into PyNaCl's extension module is used.
"""

import ctypes
import ctypes.util
import logging
from functools import lru_cache

import nacl._sodium

logger = logging.getLogger(__name__)

_REQUIRED = (
    "crypto_core_hsalsa20",
    "crypto_core_salsa20",
    "crypto_stream_xsalsa20",
    "crypto_stream_xsalsa20_xor",
)


def _candidates():
    found = ctypes.util.find_library("sodium")
    if found:
        yield found
    yield from ('libsodium.so.26', 'libsodium.so.23', 'libsodium.so',
                'libsodium.dylib', 'libsodium.26.dylib',
                '/usr/local/lib/libsodium.dylib',
                '/opt/homebrew/lib/libsodium.dylib',
                'libsodium-26.dll', 'libsodium.dll')
    yield nacl._sodium.__file__


@lru_cache(maxsize=None)
def load() -> ctypes.CDLL:
    """Load libsodium once, call sodium_init and configure return types."""
    for name in _candidates():
        try:
            lib = ctypes.CDLL(name)
        except OSError:
            continue
        if not all(hasattr(lib, fn) for fn in _REQUIRED):
            continue
        if lib.sodium_init() < 0:
            continue
        _configure_signatures(lib)
        logger.debug(f"libsodium loaded from {name}")
        return lib
    raise RuntimeError(
        "libsodium not found. Install it:\n"
        "  pip install pynacl\n"
        "  Ubuntu/Debian: sudo apt install libsodium-dev\n"
        "  macOS:         brew install libsodium"
    )


def _configure_signatures(lib: ctypes.CDLL) -> None:
    for fn in _REQUIRED:
        getattr(lib, fn).restype = ctypes.c_int


def buffer(data):
    """
    Pointer-compatible view of `data`. A bytearray is shared, not copied,
    so output written by libsodium lands in it and key buffers can be wiped.
    """
    if isinstance(data, bytearray):
        return (ctypes.c_char * len(data)).from_buffer(data)
    return bytes(data)
