from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_FIELD = "invalid_field"
    MISSING_ID = "missing_id"
    BAD_RESOLUTION = "bad_resolution"


class CheckValidationError(ValueError):
    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INVALID_FIELD) -> None:
        super().__init__(message)
        self.kind = kind
