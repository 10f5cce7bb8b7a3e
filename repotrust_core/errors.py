from __future__ import annotations
from enum import Enum
from typing import Optional
import os


class RepoTrustError(Exception):
    pass


class InvalidInputLength(RepoTrustError):
    pass


class InvalidHexEncoding(RepoTrustError):
    pass


class UnsupportedAlgorithm(RepoTrustError):
    def __init__(self, algorithm: str):
        super().__init__(f"unsupported digest algorithm: {algorithm!r}")
        self.algorithm = algorithm


class IOFailureKind(Enum):
    STORAGE_FAULT = "storage_fault"   # EIO, usually filesystem corruption
    VANISHED = "vanished"             # deleted underneath us
    OTHER = "other"


class IOFailure(RepoTrustError):
    """
    A file could not be opened or read to the end.

    `kind` is for diagnostics only; callers see the same missing result
    whatever the cause.
    """

    def __init__(self, kind: IOFailureKind, path: "str | os.PathLike[str]", cause: Optional[BaseException] = None):
        super().__init__(f"{kind.value} while reading {os.fspath(path)}: {cause}")
        self.kind = kind
        self.path = path
        self.cause = cause
