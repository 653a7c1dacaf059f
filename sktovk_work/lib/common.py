#!/usr/bin/env python3
"""
common.py — Shared helpers for sk-to-vk library CLIs.

All CLIs follow the same contract:
- Read a single JSON object from STDIN.
- Write a single JSON object to STDOUT.
- Fail with a non‑zero exit on any error, printing a short message to STDERR.

Secret material never appears in error messages produced here.
"""
from __future__ import annotations
import sys, json, re

SECRET_KEY_LEN = 32
PUBLIC_KEY_LEN = 32

# ---------- Error taxonomy ----------
class KeyDerivationError(ValueError):
    """Base class for every failure of a single derivation."""

class MissingArgument(KeyDerivationError):
    """No secret key supplied on the command line."""

class InvalidHexEncoding(KeyDerivationError):
    """Input is not hex, or not the expected number of hex characters."""

class InvalidKeyLength(KeyDerivationError):
    """Byte buffer handed to the deriver is not exactly 32 bytes."""

# ---------- JSON IO ----------
def read_json_stdin() -> dict:
    try:
        obj = json.load(sys.stdin)
    except Exception as e:
        print(f"error: invalid JSON on stdin: {e}", file=sys.stderr)
        sys.exit(2)
    if not isinstance(obj, dict):
        print("error: expected a JSON object on stdin", file=sys.stderr)
        sys.exit(2)
    return obj

def write_json(obj: dict) -> None:
    json.dump(obj, sys.stdout, separators=(",",":"))
    sys.stdout.write("\n")

# ---------- Validation helpers ----------
_HEX = re.compile(r"[0-9a-fA-F]*")
def is_hex(s: str) -> bool:
    return bool(_HEX.fullmatch(s))

def require_fields(obj: dict, keys: list[str]) -> list[str]:
    missing = [k for k in keys if k not in obj]
    return missing
