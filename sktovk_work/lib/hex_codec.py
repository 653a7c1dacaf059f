#!/usr/bin/env python3
"""Fixed-length hex decoding and lowercase hex encoding."""
import sys
from .common import (
    read_json_stdin, write_json, require_fields, is_hex,
    InvalidHexEncoding, SECRET_KEY_LEN,
)

def decode_hex(s: str, length: int = SECRET_KEY_LEN) -> bytearray:
    """
    Decode exactly `length` bytes from hex.

    Upper and lower case are both accepted. Surrounding whitespace is
    ignored; anything else that is not a hex digit is rejected. The result
    is a bytearray so callers holding secrets can wipe it.
    """
    if not isinstance(s, str):
        raise InvalidHexEncoding(f"expected a hex string, got {type(s).__name__}")
    s = s.strip()
    if len(s) != 2 * length:
        raise InvalidHexEncoding(
            f"invalid hex (expected {2 * length} hex chars, got {len(s)})")
    if not is_hex(s):
        raise InvalidHexEncoding("invalid hex (non-hex character in input)")
    return bytearray.fromhex(s)

def encode_hex(b) -> str:
    return bytes(b).hex()

def normalize(d: dict) -> dict:
    missing = require_fields(d, ["hex"])
    if missing:
        raise KeyError(", ".join(missing))
    buf = decode_hex(d["hex"], int(d.get("length", SECRET_KEY_LEN)))
    return {"hex": encode_hex(buf)}

if __name__ == "__main__":
    try:
        write_json(normalize(read_json_stdin()))
    except Exception as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
