"""
Fixed sizes for Curve25519-XSalsa20-Poly1305.
==============================================
Every size here is fixed by the primitive, not by configuration.
Callers can use them to validate buffers before handing them to a Box.
"""

PRIMITIVE = "curve25519-xsalsa20-poly1305"

PUBLIC_KEY_BYTES  = 32   # Curve25519 public key
PRIVATE_KEY_BYTES = 32   # Curve25519 private scalar
SHARED_KEY_BYTES  = 32   # crypto_box_beforenm output
NONCE_BYTES       = 24   # XSalsa20 extended nonce
TAG_BYTES         = 16   # Poly1305 authenticator

# Keystream bytes reserved per nonce for the Poly1305 one-time key
# (NaCl crypto_secretbox_ZEROBYTES).
ZERO_BYTES = 32
