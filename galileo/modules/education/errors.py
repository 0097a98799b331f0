"""Errors raised by the education service."""

from __future__ import annotations


class EducationError(Exception):
    """Base class for education service errors."""


class EmptyInput(EducationError, ValueError):
    """Required text was blank; the backend was never called."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} must not be empty")


class InvalidCount(EducationError, ValueError):
    """Requested count was below 1; the backend was never called."""

    def __init__(self, field: str, count: int) -> None:
        self.field = field
        self.count = count
        super().__init__(f"{field} must be at least 1 (got {count})")


class GenerationFailure(EducationError):
    """The generation backend failed; the original error is kept on ``cause``."""

    def __init__(self, kind: str, cause: BaseException) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(f"{kind} generation failed: {cause}")
