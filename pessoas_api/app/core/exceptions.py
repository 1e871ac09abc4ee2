"""
Application error taxonomy.

Every rejection the API can produce is an ``ApplicationError`` subclass
carrying the HTTP status, a stable machine-readable ``code`` and a
human-readable message.  ``main.create_app`` registers one handler that
renders all of them as ``{"detail": ..., "code": ...}``.
"""

from typing import Dict, Optional

from fastapi import status


class ApplicationError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.headers = headers


class MethodNotSupported(ApplicationError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    code = "method_not_supported"


class MalformedInput(ApplicationError):
    code = "malformed_input"


class ValidationError(ApplicationError):
    """One or more required fields are missing or too long."""

    code = "validation_error"

    def __init__(self, message: str, fields: Optional[list] = None) -> None:
        super().__init__(message)
        self.fields = list(fields or [])


class InvalidDateFormat(ApplicationError):
    code = "invalid_date_format"


class InvalidStackItem(ApplicationError):
    code = "invalid_stack_item"

    def __init__(self, message: str, index: int, value: Optional[str]) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


class DuplicateNickname(ApplicationError):
    status_code = status.HTTP_409_CONFLICT
    code = "duplicate_nickname"
