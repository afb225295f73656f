"""
Salted Password Hashing Helpers
Provides quick hashing of passwords with salts appended, using MD5, SHA-1
or SHA-256 for both the salt and the password combination.

A Salt realizes to random bytes followed by a hash of those bytes and the
secret. A Combination realizes to the hash of secret || salt; without a
salt, a SHA-1 default salt with a 16-byte random prefix is generated.

Usage:
    salt = Salt(func=Hash.MD5, size=16, secret="superStrongPassword321")
    password = Combination(func=Hash.SHA256, secret="superStrongPassword321",
                           salt=salt.new())
    hogged = password.new()

Security Note:
    This is a salted hash, not a key derivation function. There is no work
    factor, so digests must not be stored as credentials without an
    additional KDF layer. match() uses plain byte equality; prefer
    match_constant_time() when checking a candidate password.
"""
import enum
import hmac
import secrets
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend


DEFAULT_SALT_SIZE = 16


class EntropyUnavailableError(RuntimeError):
    """The random source failed or returned fewer bytes than requested."""


class Hash(enum.IntEnum):
    """Hash function selector. Unrecognized values behave as SHA1."""

    MD5 = 1
    SHA1 = 2
    SHA256 = 3

    def __str__(self):
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "Hash":
        """Look up a selector by name ("md5", "SHA256", ...), defaulting to SHA1."""
        return cls.__members__.get(name.strip().upper(), cls.SHA1)


_HASH_ALGORITHMS = {
    Hash.MD5: hashes.MD5,
    Hash.SHA1: hashes.SHA1,
    Hash.SHA256: hashes.SHA256,
}


def _resolve(func) -> Hash:
    if isinstance(func, bool):
        return Hash.SHA1
    try:
        return Hash(func)
    except (ValueError, TypeError):
        return Hash.SHA1


def _hash_algorithm(func) -> hashes.HashAlgorithm:
    return _HASH_ALGORITHMS[_resolve(func)]()


def digest_size(func) -> int:
    """Return the digest length in bytes for a hash selector."""
    return _hash_algorithm(func).digest_size


def new_hash(func) -> hashes.Hash:
    """Return a fresh hash context for a hash selector."""
    return hashes.Hash(_hash_algorithm(func), backend=default_backend())


def _as_bytes(value) -> bytes:
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def _read_random(size: int) -> bytes:
    if size < 0:
        raise ValueError(f"salt size must be non-negative, got {size}")
    try:
        random_bytes = secrets.token_bytes(size)
    except (OSError, NotImplementedError) as random_error:
        raise EntropyUnavailableError(f"random read failed: {random_error}") from random_error

    if len(random_bytes) != size:
        raise EntropyUnavailableError(
            f"random read failed: wanted {size} bytes, got {len(random_bytes)}"
        )
    return random_bytes


def _salt_bytes(func, size: int, secret) -> bytes:
    # R || H(R || secret)
    random_prefix = _read_random(size)
    salt_hash = new_hash(func)
    salt_hash.update(random_prefix)
    salt_hash.update(_as_bytes(secret))
    return random_prefix + salt_hash.finalize()


@runtime_checkable
class Hog(Protocol):
    """Anything that realizes to a digest with new()."""

    def new(self) -> bytes:
        ...


@dataclass(frozen=True)
class Salt:
    """
    Parameters for a salt of random bytes plus a hash of them and the secret.

    Attributes:
        func: Hash selector used for the appended hash
        size: Number of random bytes in the prefix
        secret: User secret mixed into the hash (str is UTF-8 encoded)
    """

    func: Hash
    size: int
    secret: Union[str, bytes]

    def new(self) -> bytes:
        """
        Realize the salt with fresh randomness.

        Returns:
            size random bytes followed by H(random bytes || secret),
            size + digest_size(func) bytes in total

        Raises:
            EntropyUnavailableError: If the random source fails
        """
        return _salt_bytes(self.func, self.size, self.secret)


@dataclass(frozen=True)
class Combination:
    """
    Parameters for a salted password digest H(secret || salt).

    An empty salt is replaced by a default salt each time the combination is
    realized. The record itself is never modified.
    """

    func: Hash
    secret: Union[str, bytes]
    salt: bytes = b""

    def new(self) -> bytes:
        """
        Realize the combination.

        Returns:
            digest_size(func) bytes

        Raises:
            EntropyUnavailableError: If a default salt is needed and the
                random source fails
        """
        effective_salt = _as_bytes(self.salt)
        if not effective_salt:
            effective_salt = generate_salt(self.secret, DEFAULT_SALT_SIZE)

        password_hash = new_hash(self.func)
        password_hash.update(_as_bytes(self.secret) + effective_salt)
        return password_hash.finalize()


def generate_salt(secret, salt_size: int = DEFAULT_SALT_SIZE) -> bytes:
    """
    Generate a default salt: salt_size random bytes followed by their SHA-1
    hash together with the secret.

    Args:
        secret: User secret (str or bytes)
        salt_size: Number of random bytes (default: 16)

    Returns:
        salt_size + 20 bytes
    """
    return _salt_bytes(Hash.SHA1, salt_size, secret)


def create_hash(h: Hog) -> bytes:
    """Create a hashed bytes value from a Salt or Combination."""
    return h.new()


def create_hash_from_string(secret) -> bytes:
    """
    Create a SHA-1 combination digest from a password with a fresh default
    salt. The result is 20 bytes and differs on every call.
    """
    combination = Combination(
        func=Hash.SHA1,
        secret=secret,
        salt=generate_salt(secret, DEFAULT_SALT_SIZE),
    )
    return combination.new()


def hexdigest(h: Hog) -> str:
    """Realize a Salt or Combination and return it as a hex string."""
    return h.new().hex()


def match(h1: Hog, h2: Hog) -> bool:
    """
    Match two Hog instances, i.e. password matching.

    Each side is realized exactly once and compared with plain byte equality,
    which is not timing safe. Sides involving fresh randomness (a bare Salt
    or a Combination without a salt) will practically never match.
    """
    return h1.new() == h2.new()


def match_constant_time(h1: Hog, h2: Hog) -> bool:
    """
    Like match(), but compares the realized digests in constant time to
    prevent timing attacks that could reveal information about the password.
    """
    return hmac.compare_digest(h1.new(), h2.new())
