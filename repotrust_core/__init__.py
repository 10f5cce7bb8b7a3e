"""
RepoTrust Core Package
======================
Trust primitives shared by catalog clients that install signed packages.

Provides:
- SHA-256 trust fingerprints for signing certificates
- The legacy MD5 package signature hash
- Streaming file checksums with quiet I/O failure handling
- Display formatting for fingerprints
"""

from .digest import digest_bytes, hash_bytes, new_digest, resolve_algorithm
from .errors import (
    RepoTrustError, InvalidInputLength, InvalidHexEncoding,
    UnsupportedAlgorithm, IOFailure, IOFailureKind,
)
from .fingerprint import (
    fingerprint_from_bytes, fingerprint_from_hex_key,
    fingerprint_from_certificate, fingerprints_match,
)
from .formatter import format_fingerprint
from .integrity import classify_io_error, digest_file, verify_file
from .legacy import legacy_sig_hash, package_sig_hash

__all__ = [
    "digest_bytes", "hash_bytes", "new_digest", "resolve_algorithm",
    "RepoTrustError", "InvalidInputLength", "InvalidHexEncoding",
    "UnsupportedAlgorithm", "IOFailure", "IOFailureKind",
    "fingerprint_from_bytes", "fingerprint_from_hex_key",
    "fingerprint_from_certificate", "fingerprints_match",
    "format_fingerprint",
    "classify_io_error", "digest_file", "verify_file",
    "legacy_sig_hash", "package_sig_hash",
]
