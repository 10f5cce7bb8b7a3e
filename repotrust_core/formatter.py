from __future__ import annotations
from typing import Optional
from .config import FINGERPRINT_LENGTH, INVALID_FINGERPRINT
from .utils import is_hex


def format_fingerprint(fingerprint: Optional[str], placeholder: str = INVALID_FINGERPRINT) -> str:
    # return a fingerprint formatted for display, e.g. "AB CD EF ..."
    if not fingerprint or len(fingerprint) != FINGERPRINT_LENGTH or not is_hex(fingerprint):
        return placeholder
    return " ".join(fingerprint[i:i + 2] for i in range(0, FINGERPRINT_LENGTH, 2))
