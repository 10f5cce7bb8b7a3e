"""
repotrust_core.config
---------------------
Constants and environment-driven settings for fingerprinting and file integrity checks.

Environment:
- REPOTRUST_LOG_LEVEL   log level name for all RepoTrust loggers (default INFO)
- REPOTRUST_LOG_FILE    optional path for an additional JSON log file
- REPOTRUST_CHUNK_SIZE  read size in bytes used when streaming files (default 4096)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

# keytool -list -v prints the SHA-256 fingerprint, so that is the trust anchor format
FINGERPRINT_ALGORITHM = "sha256"
FINGERPRINT_LENGTH = 64

# Anything shorter cannot be a signing certificate.
MIN_KEY_LENGTH = 256

LEGACY_SIG_ALGORITHM = "md5"

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_LOG_LEVEL = "INFO"

INVALID_FINGERPRINT = "Invalid fingerprint"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("REPOTRUST_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("REPOTRUST_LOG_FILE") or None,
        chunk_size=_int_env("REPOTRUST_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
    )
