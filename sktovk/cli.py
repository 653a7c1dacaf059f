#!/usr/bin/env python3
"""
cli.py - sk-to-vk - Ed25519 secret key to verifying key
============================================================================
Copyright 2025 Nathanael Ritz

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

     http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

============================================================================

Takes a 32-byte Ed25519 secret key as 64 hex characters and prints the
matching public (verifying) key as 64 lowercase hex characters.

    $ sk-to-vk 9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60
    d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a

Exit status:
  0  public key printed on stdout
  1  the argument is not 64 hex characters
  2  no argument given

Stdout carries the key and nothing else. Diagnostics go to stderr and
never include the secret.
"""

import argparse
import sys
import time

from sktovk_work.lib import (
    hex_codec,                  # 64-char hex <-> 32 bytes
    ed25519_pubkey_from_priv,   # RFC 8032 §5.1.5 derivation
    secret_buffer,              # wipes the decoded secret
)
from sktovk_work.lib.common import (
    KeyDerivationError,
    MissingArgument,
)

__version__ = "0.1.0"

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

# Global timer for log timestamps
SCRIPT_START_TIME = 0
VERBOSE = False

def log(role, msg):
    """Progress logging with timing information, only with --verbose."""
    if not VERBOSE:
        return
    elapsed = time.time() - SCRIPT_START_TIME
    print(f"[{role}] {elapsed:.2f}s - {msg}", file=sys.stderr, flush=True)

def log_err(role, msg):
    """Error logging to stderr."""
    elapsed = time.time() - SCRIPT_START_TIME
    print(f"[{role}] {elapsed:.2f}s - {msg}", file=sys.stderr, flush=True)

def sk_to_vk(args):
    """Decode, derive, print. Returns the process exit status."""
    role = "VK"

    if args.secret_key is None:
        raise MissingArgument("missing <secret_key_hex> argument")

    log(role, "decoding secret key")
    with secret_buffer.secret_bytes(hex_codec.decode_hex(args.secret_key)) as sk:
        log(role, "deriving public key")
        vk = ed25519_pubkey_from_priv.derive_public_key(sk)
    log(role, "secret key wiped")

    print(hex_codec.encode_hex(vk), flush=True)
    return EXIT_OK

def build_parser():
    ap = argparse.ArgumentParser(
        prog="sk-to-vk",
        description="Derive an Ed25519 public key from a hex-encoded secret key."
    )
    ap.add_argument("secret_key", nargs="?", metavar="secret_key_hex",
                    help="32-byte Ed25519 secret key as 64 hex characters")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log progress to stderr")
    ap.add_argument("--version", action="version",
                    version=f"%(prog)s {__version__}")
    return ap

def main(argv=None):
    """
    Main entry point for the sk-to-vk CLI.
    Returns an exit status instead of exiting so it can be called in-process.
    """
    global SCRIPT_START_TIME, VERBOSE
    SCRIPT_START_TIME = time.time()

    ap = build_parser()
    args = ap.parse_args(argv)
    VERBOSE = args.verbose

    try:
        return sk_to_vk(args)
    except MissingArgument as e:
        ap.print_usage(sys.stderr)
        log_err("VK", f"error: {e}")
        return EXIT_USAGE
    except KeyDerivationError as e:
        log_err("VK", f"error: {e}")
        return EXIT_INVALID

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
