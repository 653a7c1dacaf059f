#!/usr/bin/env python3
"""Scoped ownership of secret key material."""
from contextlib import contextmanager

def wipe(buf: bytearray) -> None:
    """Overwrite a mutable buffer with zeros in place."""
    buf[:] = bytes(len(buf))

@contextmanager
def secret_bytes(buf: bytearray):
    """
    Own `buf` for the duration of the block and zero it on exit.

    The buffer is wiped on every exit path, including when the block
    raises. Only mutable buffers can be wiped, so anything else is refused.
    """
    if not isinstance(buf, bytearray):
        raise TypeError("secret material must be held in a bytearray")
    try:
        yield buf
    finally:
        wipe(buf)
