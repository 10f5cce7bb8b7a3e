"""
repotrust_core.fingerprint
--------------------------
Trust fingerprints for signing certificates.

A fingerprint is the SHA-256 of the DER certificate bytes rendered as
64 uppercase hex characters, the same value `keytool -list -v` prints.
All entry points are best-effort: bad input or a digest failure gives
None, never an exception.
"""

from __future__ import annotations
from typing import Optional
import hmac
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from .config import FINGERPRINT_ALGORITHM, FINGERPRINT_LENGTH, MIN_KEY_LENGTH
from .digest import digest_bytes
from .errors import InvalidHexEncoding, InvalidInputLength
from .logger import get_logger
from .utils import is_hex, unhex

log = get_logger("RepoTrust.Fingerprint")


def _fingerprint(key: bytes) -> str:
    if len(key) < MIN_KEY_LENGTH:
        raise InvalidInputLength(f"key was shorter than {MIN_KEY_LENGTH} bytes ({len(key)}), cannot be valid!")
    return digest_bytes(key, FINGERPRINT_ALGORITHM).upper()


def fingerprint_from_bytes(key: Optional[bytes]) -> Optional[str]:
    if not key:
        return None
    if not isinstance(key, (bytes, bytearray, memoryview)):
        log.error(f"key must be a byte buffer, not {type(key).__name__}")
        return None
    try:
        return _fingerprint(bytes(key))
    except InvalidInputLength as e:
        log.error(str(e))
    except Exception as e:
        log.warning(f"Unable to get certificate fingerprint: {e}")
    return None


def fingerprint_from_hex_key(key_hex: Optional[str]) -> Optional[str]:
    try:
        key = unhex(key_hex or "")
    except InvalidHexEncoding as e:
        log.error(f"Signing key certificate was blank or malformed hex: {e}")
        return None
    return fingerprint_from_bytes(key)


def fingerprint_from_certificate(cert: Optional[x509.Certificate]) -> Optional[str]:
    """Fingerprint an already-loaded certificate by its DER encoding."""
    if cert is None:
        return None
    try:
        der = cert.public_bytes(serialization.Encoding.DER)
    except Exception as e:
        log.warning(f"Unable to encode certificate: {e}")
        return None
    return fingerprint_from_bytes(der)


def _normalize(fingerprint: Optional[str]) -> Optional[str]:
    if not fingerprint:
        return None
    compact = "".join(fingerprint.split()).upper()
    if len(compact) != FINGERPRINT_LENGTH or not is_hex(compact):
        return None
    return compact


def fingerprints_match(expected: Optional[str], actual: Optional[str]) -> bool:
    """
    Compare a recorded trust fingerprint against a computed one.

    Case and display grouping are ignored; malformed values never match.
    """
    a, b = _normalize(expected), _normalize(actual)
    if a is None or b is None:
        return False
    return hmac.compare_digest(a, b)
