#!/usr/bin/env python3
"""
Salt Generator
Creates a salt of random bytes followed by a hash of those bytes and a
secret, and prints it as hex.

Usage:
    python3 gen_salt.py --secret "superStrongPassword321" --func MD5 --size 16

Configuration via environment variables:
    HOG_FUNC: Default hash function name (default: SHA1)
    HOG_SALT_SIZE: Default number of random bytes (default: 16)
"""
import argparse
import os
import sys

import hog


def generate_salt_hex(secret, func_name, size):
    """
    Realize a salt and return it hex encoded.

    Args:
        secret: Secret mixed into the salt hash
        func_name: Hash function name (MD5, SHA1, SHA256; others mean SHA1)
        size: Number of random bytes in the salt prefix

    Returns:
        Hex string of size + digest length bytes
    """
    salt = hog.Salt(func=hog.Hash.from_name(func_name), size=size, secret=secret)
    return hog.hexdigest(salt)


def main(argv=None):
    """Main entry point for salt generation script."""
    parser = argparse.ArgumentParser(
        description="Generate a hashed salt for a secret"
    )
    parser.add_argument('--secret', required=True, help='Secret mixed into the salt')
    parser.add_argument(
        '--func',
        default=os.environ.get("HOG_FUNC", "SHA1"),
        help='Hash function: MD5, SHA1 or SHA256 (default: $HOG_FUNC or SHA1)'
    )
    parser.add_argument(
        '--size',
        type=int,
        default=os.environ.get("HOG_SALT_SIZE", str(hog.DEFAULT_SALT_SIZE)),
        help='Number of random bytes (default: $HOG_SALT_SIZE or 16)'
    )

    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("--size must be non-negative")

    try:
        salt_hex = generate_salt_hex(args.secret, args.func, args.size)
    except hog.EntropyUnavailableError as entropy_error:
        print(f"Salt generation failed: {entropy_error}", file=sys.stderr)
        return 1

    print(salt_hex)
    return 0


if __name__ == '__main__':
    sys.exit(main())
