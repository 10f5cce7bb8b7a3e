"""
repotrust_core.integrity
------------------------
Streaming file checksums for downloaded and installed packages.

Files can be deleted in the background at any time, even halfway through
a read, and flaky storage surfaces as EIO. Neither should look like a crash
to the caller: every failure comes back as None ("integrity could not be
established") and only the log line tells the causes apart.
"""

from __future__ import annotations
from typing import Optional, Union
import errno, os
from .config import load_settings
from .digest import new_digest
from .errors import IOFailure, IOFailureKind, UnsupportedAlgorithm
from .logger import get_logger

log = get_logger("RepoTrust.Integrity")

PathLike = Union[str, "os.PathLike[str]"]


def classify_io_error(exc: Exception) -> IOFailureKind:
    if not isinstance(exc, OSError):
        # e.g. ValueError for a path with an embedded NUL
        return IOFailureKind.OTHER
    if exc.errno == errno.EIO:
        return IOFailureKind.STORAGE_FAULT
    if exc.errno == errno.ENOENT:
        return IOFailureKind.VANISHED

    # Some I/O layers only report the failure in the message text.
    # Never look at the filename, it is caller data.
    message = exc.strerror or " ".join(str(a) for a in exc.args)
    if "EIO" in message or "I/O error" in message:
        return IOFailureKind.STORAGE_FAULT
    if "ENOENT" in message or "No such file" in message:
        return IOFailureKind.VANISHED
    return IOFailureKind.OTHER


def _stream_digest(path: PathLike, algorithm: str, chunk_size: int) -> str:
    h = new_digest(algorithm)
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                h.update(chunk)
    except (OSError, ValueError) as e:
        raise IOFailure(classify_io_error(e), path, e) from e
    return h.finalize().hex()


def digest_file(path: PathLike, algorithm: str, chunk_size: Optional[int] = None) -> Optional[str]:
    """
    Hex digest of the file at `path`, or None if it could not be read
    completely or `algorithm` is not supported.
    """
    if chunk_size is None:
        chunk_size = load_settings().chunk_size
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    try:
        return _stream_digest(path, algorithm, chunk_size)
    except UnsupportedAlgorithm as e:
        log.error(f"Cannot hash {path}: {e}")
    except IOFailure as e:
        if e.kind is IOFailureKind.STORAGE_FAULT:
            log.warning(f"potential filesystem corruption while accessing {path}: {e.cause}")
        elif e.kind is IOFailureKind.VANISHED:
            log.warning(f"{path} vanished: {e.cause}")
        else:
            log.warning(f"I/O error while hashing {path}: {e.cause}")
    return None


def verify_file(path: PathLike, expected: Optional[str], algorithm: str) -> bool:
    """True only if the file could be hashed and matches `expected`."""
    if not expected:
        return False
    actual = digest_file(path, algorithm)
    if actual is None:
        return False
    return actual.lower() == expected.strip().lower()
