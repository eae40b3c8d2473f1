"""
The three primitives a Box is built from:

    curve25519  -- key agreement    (PyNaCl crypto_box_beforenm)
    xsalsa20    -- stream cipher    (libsodium XSalsa20)
    poly1305    -- authenticator    (one-time MAC)
"""
