"""
saltbox util — length checks, constant-time compare, XOR, wipe
===============================================================
Run with:  python -m pytest tests/ -v
"""

import pytest

from saltbox import LengthError
from saltbox import util


def test_check_length_passes_bytes_through():
    assert util.check_length(b"abcd", 4, "Thing") == b"abcd"

def test_check_length_keeps_bytearray_uncopied():
    buf = bytearray(b"abcd")
    assert util.check_length(buf, 4, "Thing") is buf

def test_check_length_converts_memoryview():
    out = util.check_length(memoryview(b"abcd"), 4, "Thing")
    assert isinstance(out, bytes) and out == b"abcd"

def test_check_length_message_names_field_not_value():
    secret = b"\xde\xad\xbe\xef" * 4
    with pytest.raises(LengthError) as exc:
        util.check_length(secret, 32, "Private key")
    assert "Private key" in str(exc.value)
    assert "16" in str(exc.value)
    assert secret.hex() not in str(exc.value)

def test_check_length_rejects_str():
    with pytest.raises(TypeError):
        util.check_length("abcd", 4, "Thing")

def test_check_min_length():
    assert util.check_min_length(b"abc", 2, "Thing") == b"abc"
    with pytest.raises(LengthError):
        util.check_min_length(b"a", 2, "Thing")

def test_zeros():
    assert util.zeros(5) == b"\x00" * 5
    assert len(util.zeros()) == 32

def test_verify():
    assert util.verify(b"a" * 16, b"a" * 16)
    assert util.verify(bytearray(b"k" * 32), b"k" * 32)
    assert not util.verify(b"a" * 16, b"a" * 15 + b"b")
    assert not util.verify(b"a" * 16, b"a" * 32)

def test_xor_bytes():
    assert util.xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"
    assert util.xor_bytes(b"", b"") == b""
    assert util.xor_bytes(b"\x00\x00\x01", b"\x00\x00\x00") == b"\x00\x00\x01"
    with pytest.raises(LengthError):
        util.xor_bytes(b"a", b"ab")

def test_xor_bytes_on_memoryview_slice():
    stream = bytearray(b"\xff" * 8)
    assert util.xor_bytes(memoryview(stream)[4:], b"\x00\x01\x02\x03") == b"\xff\xfe\xfd\xfc"

def test_wipe():
    buf = bytearray(b"secret key material")
    util.wipe(buf)
    assert buf == bytearray(len(buf))

def test_module_surface():
    public = {n for n in dir(util) if not n.startswith("_") and callable(getattr(util, n))}
    public -= {"LengthError", "constant_time"}
    assert public == {"check_length", "check_min_length", "zeros", "verify",
                      "xor_bytes", "wipe"}
