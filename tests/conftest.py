"""
Shared key material for the saltbox test suite.

Alice and Bob are the RFC 7748 section 6.1 X25519 key pairs, which are
also the key pairs of the NaCl crypto_box reference test. Eve is a fresh,
unrelated pair generated per test.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.serialization import (
    Encoding, NoEncryption, PrivateFormat, PublicFormat,
)

ALICE_PRIVATE = bytes.fromhex(
    "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a")
ALICE_PUBLIC  = bytes.fromhex(
    "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a")
BOB_PRIVATE   = bytes.fromhex(
    "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb")
BOB_PUBLIC    = bytes.fromhex(
    "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f")


def generate_keypair():
    """(public, private) raw bytes for a throwaway X25519 key pair."""
    sk = X25519PrivateKey.generate()
    private = sk.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    public  = sk.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return public, private


@pytest.fixture
def alice():
    return ALICE_PUBLIC, ALICE_PRIVATE


@pytest.fixture
def bob():
    return BOB_PUBLIC, BOB_PRIVATE


@pytest.fixture
def eve():
    return generate_keypair()


@pytest.fixture
def zero_nonce():
    return bytes(24)


@pytest.fixture
def carol():
    return generate_keypair()
