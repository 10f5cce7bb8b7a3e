"""
repotrust_core.digest
---------------------
Digest engine backed by the `cryptography` hash provider.

Every call builds its own `hashes.Hash`, so nothing is shared between
concurrent callers.
"""

from __future__ import annotations
from typing import Dict, Optional, Type
import re
from cryptography.hazmat.primitives import hashes
from .errors import UnsupportedAlgorithm
from .logger import get_logger

log = get_logger("RepoTrust.Digest")

_ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}

# "SHA-256" (JCA style) is the only spelling folded onto "sha256"
_SHA_DASH = re.compile(r"sha-(\d+)")


def _canonical_name(algorithm: str) -> str:
    name = algorithm.strip().lower()
    m = _SHA_DASH.fullmatch(name)
    return "sha" + m.group(1) if m else name


def resolve_algorithm(algorithm: str) -> hashes.HashAlgorithm:
    """Look up a digest by name, e.g. "SHA-256", "sha256" or "MD5"."""
    if not isinstance(algorithm, str):
        raise UnsupportedAlgorithm(repr(algorithm))
    cls = _ALGORITHMS.get(_canonical_name(algorithm))
    if cls is None:
        raise UnsupportedAlgorithm(algorithm)
    return cls()


def new_digest(algorithm: str) -> hashes.Hash:
    return hashes.Hash(resolve_algorithm(algorithm))


def digest_bytes(data: bytes, algorithm: str) -> str:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a byte buffer, got {type(data).__name__}")
    h = new_digest(algorithm)
    h.update(bytes(data))
    return h.finalize().hex()


def hash_bytes(data: bytes, algorithm: str) -> Optional[str]:
    try:
        return digest_bytes(data, algorithm)
    except UnsupportedAlgorithm:
        log.error(f"Device does not support {algorithm} digest algorithm")
        return None
