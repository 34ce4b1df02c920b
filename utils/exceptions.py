from __future__ import annotations

"""Shared exception types for cross-module use."""

from typing import Any


class RowKeyError(KeyError):
    """Raised when a table record exposes no identifier field."""

    def __init__(self, row_key: str, record: Any = None):
        self.row_key = row_key
        self.record = record
        super().__init__(
            f"Record {record!r} has no identifier field '{row_key}'"
        )


class ApiError(RuntimeError):
    """Raised when a request to the admin API fails."""

    def __init__(self, message: str, *, status: int | None = None, url: str = ""):
        self.status = status
        self.url = url
        if status is not None:
            message = f"{message} (HTTP {status})"
        super().__init__(message)


class ValidationError(ValueError):
    """Raised when a form value fails one of the input rules."""

    def __init__(self, message: str, *, field: str = ""):
        self.field = field
        self.message = message
        super().__init__(message)


__all__ = ["ApiError", "RowKeyError", "ValidationError"]
