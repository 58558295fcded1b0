from __future__ import annotations

from typing import Any


class NotesError(Exception):
    """Base class for errors reported to API callers.

    ``extensions`` is picked up by the GraphQL executor and returned alongside
    the error message so clients can branch on ``code``.
    """

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, **{k: str(v) for k, v in self.context.items()}}


class ValidationError(NotesError, ValueError):
    """Caller supplied missing or malformed input; raised before storage access."""

    code = "VALIDATION_ERROR"


class NotFoundError(NotesError):
    """Referenced record does not exist."""

    code = "NOT_FOUND"

    def __init__(self, kind: str, record_id: Any) -> None:
        super().__init__(f"{kind} not found", kind=kind, id=record_id)
        self.kind = kind
        self.record_id = record_id


class StorageError(NotesError):
    """Persistence backend failed."""

    code = "STORAGE_ERROR"
