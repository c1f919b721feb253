from __future__ import annotations

from dataclasses import dataclass

from checkparams.errors import CheckValidationError, ErrorKind


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    error: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def failure(
        cls, error: str, kind: ErrorKind = ErrorKind.INVALID_FIELD
    ) -> ValidationResult:
        return cls(ok=False, error=error, kind=kind)

    def raise_for_error(self, context: str | None = None) -> None:
        """Raise CheckValidationError if this result is a failure."""
        if self.ok:
            return
        message = self.error or "invalid check"
        if context:
            message = f"{context}: {message}"
        raise CheckValidationError(message, kind=self.kind or ErrorKind.INVALID_FIELD)


VALID = ValidationResult(ok=True)
MISSING_ID = ValidationResult.failure(
    "required field 'Id' missing", kind=ErrorKind.MISSING_ID
)
BAD_RESOLUTION = ValidationResult.failure(
    "resolution must be either 'hour', 'day' or 'week'", kind=ErrorKind.BAD_RESOLUTION
)
