#!/usr/bin/env python3
"""
Password Hasher
Hashes a password combined with a salt and prints the digest as hex, or
verifies a password against a stored digest.

Usage:
    python3 hash_password.py --secret "mypassword"
    python3 hash_password.py --secret "mypassword" --func SHA256 --salt-hex 4023...
    python3 hash_password.py --secret "mypassword" --salt-hex 4023... --verify 0a12...

Without --salt-hex a fresh default salt is generated, so the printed digest
differs on every run and cannot be verified later.

Configuration via environment variables:
    HOG_FUNC: Default hash function name (default: SHA1)
"""
import argparse
import os
import sys

import hog


class StoredDigest:
    """A previously computed digest, matched against a Combination."""

    def __init__(self, digest: bytes):
        self.digest = digest

    def new(self) -> bytes:
        return self.digest


def parse_hex(parser, option, value):
    """Decode a hex command line value or exit with a usage error."""
    try:
        return bytes.fromhex(value)
    except ValueError:
        parser.error(f"{option} is not valid hex: {value!r}")


def main(argv=None):
    """Main entry point for password hashing script."""
    parser = argparse.ArgumentParser(
        description="Hash a password with a salt, or verify it against a digest"
    )
    parser.add_argument('--secret', required=True, help='Password to hash')
    parser.add_argument(
        '--func',
        default=os.environ.get("HOG_FUNC", "SHA1"),
        help='Hash function: MD5, SHA1 or SHA256 (default: $HOG_FUNC or SHA1)'
    )
    parser.add_argument('--salt-hex', help='Salt as hex (default: fresh default salt)')
    parser.add_argument('--verify', metavar='HEX', help='Expected digest as hex')

    args = parser.parse_args(argv)

    salt = b""
    if args.salt_hex:
        salt = parse_hex(parser, "--salt-hex", args.salt_hex)
    if args.verify and not salt:
        parser.error("--verify requires --salt-hex")

    combination = hog.Combination(
        func=hog.Hash.from_name(args.func),
        secret=args.secret,
        salt=salt,
    )

    try:
        if args.verify:
            expected = StoredDigest(parse_hex(parser, "--verify", args.verify))
            if hog.match_constant_time(combination, expected):
                print("MATCH")
                return 0
            print("NO MATCH")
            return 1

        print(hog.hexdigest(combination))
    except hog.EntropyUnavailableError as entropy_error:
        print(f"Password hashing failed: {entropy_error}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
