"""
repotrust_core.legacy
---------------------
The package signature hash used by older catalog indexes.

It is MD5 over the ASCII of the lowercase hex encoding of the certificate,
not over the certificate bytes. Already-issued `sig` values depend on this
exact double encoding, so it must not be "fixed".
"""

from __future__ import annotations
from typing import Optional, Sequence
from .config import LEGACY_SIG_ALGORITHM
from .digest import digest_bytes
from .logger import get_logger
from .utils import hex_encode

log = get_logger("RepoTrust.Legacy")


def _sig_hash(chars: str) -> str:
    try:
        return digest_bytes(chars.encode("ascii"), LEGACY_SIG_ALGORITHM)
    except Exception as e:
        log.warning(f"Unable to compute legacy signature hash: {e}")
        return ""


def legacy_sig_hash(raw_cert: bytes) -> str:
    return _sig_hash(hex_encode(raw_cert))


def package_sig_hash(signatures: Optional[Sequence[str]]) -> str:
    """
    Legacy hash of an installed package's first signature.

    `signatures` holds the hex "chars string" form of each signing
    certificate, as the package manager reports them.
    """
    if not signatures:
        return ""
    return _sig_hash(signatures[0])
