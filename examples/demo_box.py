"""
saltbox — Live Demo: Alice and Bob exchange boxes
=================================================
Run:  python examples/demo_box.py

Generates throwaway X25519 key pairs, seals a message from Alice to Bob,
opens it on Bob's side, then shows what happens to a tampered box and to
a box opened with the wrong key.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.serialization import (
    Encoding, NoEncryption, PrivateFormat, PublicFormat,
)

from saltbox import AuthenticationError, Box, NONCE_BYTES, PRIMITIVE

LINE = "═" * 70
MSG  = b"Meet me at the north gate after the second bell."


def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def keypair():
    sk = X25519PrivateKey.generate()
    return (sk.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw),
            sk.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption()))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(levelname)s %(name)s: %(message)s')

    print(f"\n{LINE}")
    print(f"  saltbox — {PRIMITIVE}")
    print(LINE)
    print(f"  Message: {MSG.decode()}\n")

    # ── STEP 1 ───────────────────────────────────────────────────────────────
    header(1, "KEY AGREEMENT — Curve25519")
    alice_pk, alice_sk = keypair()
    bob_pk,   bob_sk   = keypair()
    t0    = time.perf_counter()
    alice = Box(bob_pk, alice_sk)
    bob   = Box(alice_pk, bob_sk)
    elapsed = time.perf_counter() - t0
    ok("Alice public", alice_pk.hex()[:32] + "...")
    ok("Bob public",   bob_pk.hex()[:32] + "...")
    ok("Two boxes keyed", f"{elapsed*1000:.2f} ms")

    # ── STEP 2 ───────────────────────────────────────────────────────────────
    header(2, "SEAL — XSalsa20 + Poly1305")
    nonce = os.urandom(NONCE_BYTES)
    t0  = time.perf_counter()
    ct  = alice.encrypt(nonce, MSG)
    pt  = bob.decrypt(nonce, ct)
    elapsed = time.perf_counter() - t0
    ok("Nonce",      f"{len(nonce)} bytes (caller-chosen, never reused)")
    ok("Ciphertext", f"{len(ct)} bytes (tag=16 + data)")
    ok("Round-trip", f"{elapsed*1000:.2f} ms")
    ok("Decrypted",  pt.decode())

    # ── STEP 3 ───────────────────────────────────────────────────────────────
    header(3, "TAMPER — one flipped bit")
    bad = bytearray(ct)
    bad[-1] ^= 0x01
    try:
        bob.decrypt(nonce, bytes(bad))
        print("  ✗  Tampered box opened!")
    except AuthenticationError as e:
        ok("Rejected", str(e))

    # ── STEP 4 ───────────────────────────────────────────────────────────────
    header(4, "WRONG KEY — Eve tries Bob's box")
    eve_pk, eve_sk = keypair()
    with Box(alice_pk, eve_sk) as eve:
        try:
            eve.decrypt(nonce, ct)
            print("  ✗  Eve opened the box!")
        except AuthenticationError as e:
            ok("Rejected", str(e))
    ok("Eve's box wiped", str(eve.closed))

    alice.close()
    bob.close()
    print(f"\n{LINE}\n")
