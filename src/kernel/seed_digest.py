"""
SeedDigest — deterministic byte digest from a text seed
"""

import hashlib
from typing import Union

Seed = Union[str, bytes]

DIGEST_SIZE = hashlib.sha256().digest_size


def _seed_bytes(seed: Seed) -> bytes:
    if isinstance(seed, str):
        return seed.encode("utf-8")
    return bytes(seed)


def derive_digest(seed: Seed) -> bytes:
    return hashlib.sha256(_seed_bytes(seed)).digest()


def hex_digest(seed: Seed) -> str:
    return hashlib.sha256(_seed_bytes(seed)).hexdigest()


def digest_byte(digest: bytes, index: int) -> int:
    # digests are read circularly
    return digest[index % len(digest)]
