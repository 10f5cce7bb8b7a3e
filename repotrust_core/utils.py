"""
repotrust_core.utils
--------------------
Lightweight helpers for hex encoding, input screening, and progress arithmetic.
Patterns are compiled once at import so concurrent callers only ever read them.
"""

from __future__ import annotations
import binascii, re
from typing import Optional
from .errors import InvalidHexEncoding

HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")
SAFE_PACKAGE_NAME_PATTERN = re.compile(r"[a-zA-Z0-9._]+")


def hex_encode(data: bytes) -> str:
    # lowercase pairs, same as commons-codec Hex.encodeHexString
    return binascii.hexlify(data).decode("ascii")


def is_hex(s: Optional[str]) -> bool:
    return bool(s) and HEX_PATTERN.fullmatch(s) is not None


def unhex(s: str) -> bytes:
    if not is_hex(s):
        raise InvalidHexEncoding("string is empty or contains a non-hex digit")
    if len(s) % 2:
        raise InvalidHexEncoding(f"odd number of hex digits ({len(s)})")
    return binascii.unhexlify(s)


def is_safe_package_name(name: Optional[str]) -> bool:
    """
    Not strict validation of a package name, just enough to make sure it
    can't be used as an attack vector, e.g. SQL injection.
    """
    if not name:
        return False
    return SAFE_PACKAGE_NAME_PATTERN.fullmatch(name) is not None


def bytes_to_kb(n: int) -> int:
    return n // 1024


def get_percent(current: int, total: int) -> int:
    # total must never be zero; ZeroDivisionError is the caller's bug
    return (100 * current + total // 2) // total
