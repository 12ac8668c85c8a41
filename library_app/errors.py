from __future__ import annotations

from enum import Enum


UNHANDLED_ERROR_MESSAGE = "An error occurred while performing this action: UNHANDLED ERROR"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INFRASTRUCTURE = "infrastructure"


class LibraryError(Exception):
    kind: ErrorKind = ErrorKind.INFRASTRUCTURE
    status_code = 500

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}

    def to_dict(self) -> dict:
        body = {"success": False, "kind": self.kind.value, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(LibraryError):
    """Malformed input, or input the store rejected through a constraint."""

    kind = ErrorKind.VALIDATION
    status_code = 400


class NotFoundError(LibraryError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class InfrastructureError(LibraryError):
    """Store unavailable or any other unexpected failure. Detail is never sent to the client."""

    kind = ErrorKind.INFRASTRUCTURE
    status_code = 500

    def to_dict(self) -> dict:
        return {"success": False, "kind": self.kind.value, "message": UNHANDLED_ERROR_MESSAGE}
