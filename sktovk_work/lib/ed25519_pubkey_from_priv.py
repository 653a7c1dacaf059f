#!/usr/bin/env python3
"""Derives an Ed25519 public key from a given private key."""
import sys
from .common import (
    read_json_stdin, write_json, require_fields,
    InvalidKeyLength, SECRET_KEY_LEN,
)
from .hex_codec import decode_hex, encode_hex
from .secret_buffer import secret_bytes
from cryptography.hazmat.primitives.asymmetric import ed25519

def derive_public_key(secret) -> bytes:
    """
    RFC 8032 §5.1.5 public key for a 32-byte secret (seed).

    The length is checked here because nothing else in Python pins it;
    any other size raises InvalidKeyLength before the seed is touched.
    """
    if len(secret) != SECRET_KEY_LEN:
        raise InvalidKeyLength(
            f"Ed25519 secret key must be {SECRET_KEY_LEN} bytes, got {len(secret)}")
    sk = ed25519.Ed25519PrivateKey.from_private_bytes(secret)
    return sk.public_key().public_bytes_raw()

def derive(d: dict) -> dict:
    missing = require_fields(d, ["privkey_hex"])
    if missing:
        raise KeyError(", ".join(missing))
    with secret_bytes(decode_hex(d["privkey_hex"])) as priv_raw:
        pk = derive_public_key(priv_raw)
    return {"pubkey_hex": encode_hex(pk)}

if __name__ == "__main__":
    try:
        write_json(derive(read_json_stdin()))
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
