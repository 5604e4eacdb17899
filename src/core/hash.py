"""Source digests.

xxhash tags log lines with a short digest of the parsed buffer, so repeated
parses of the same file can be grouped. SHA256 is there for a digest other
tools can reproduce.
"""

import hashlib
from enum import Enum
from typing import Callable

import xxhash

SOURCE_DIGEST_LENGTH = 16


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"  # Fast, non-cryptographic
    SHA256 = "sha256"


_DIGESTS: dict[Algorithm, Callable[[bytes], str]] = {
    Algorithm.XXHASH64: lambda data: xxhash.xxh64(data).hexdigest(),
    Algorithm.SHA256: lambda data: hashlib.sha256(data).hexdigest(),
}


def create_hasher(algorithm: Algorithm = Algorithm.XXHASH64) -> Callable[[bytes], str]:
    """
    Hex digest function for an algorithm.

    Raises:
        ValueError: If the algorithm is unknown
    """
    try:
        return _DIGESTS[Algorithm(algorithm)]
    except ValueError as e:
        raise ValueError(f"Unknown algorithm: {algorithm}") from e


def hash_bytes(data: bytes, algorithm: Algorithm = Algorithm.XXHASH64, truncate: int | None = None) -> str:
    """
    Hash bytes to hex digest.

    Args:
        data: Bytes to hash (e.g. a .riv buffer)
        algorithm: Hash algorithm
        truncate: Optional length to truncate digest
    """
    digest = create_hasher(algorithm)(data)
    return digest[:truncate] if truncate else digest


def source_digest(buffer: bytes) -> str:
    """Short digest identifying a source buffer in logs."""
    return hash_bytes(buffer, Algorithm.XXHASH64, truncate=SOURCE_DIGEST_LENGTH)


__all__ = [
    "Algorithm",
    "create_hasher",
    "hash_bytes",
    "source_digest",
]
