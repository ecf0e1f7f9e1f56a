"""
Student Council API — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for every failure the API reports.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) translate them into
       the standard JSON error body with the matching HTTP status.
Who:   Raised by the auth gate, services and routes; caught by main.py.

Exception Hierarchy:
    CouncilError (base)
    ├── ValidationError            → 400 Bad Request
    ├── UnauthenticatedError       → 401 Unauthorized (no/undecodable credential)
    ├── InvalidCredentialsError    → 401 Unauthorized (login mismatch)
    ├── ForbiddenError             → 403 Forbidden (role lacks capability)
    ├── NotFoundError              → 404 Not Found
    ├── PayloadTooLargeError       → 413 Payload Too Large
    ├── UnsupportedMediaTypeError  → 415 Unsupported Media Type
    └── FileStorageError           → 500 Internal Server Error

Anything that is not a CouncilError is an "unhandled" fault: main.py logs it
with a traceback and answers with a generic 500.
"""

from typing import Any, Dict, Optional


class CouncilError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the
                  handler explicitly chooses to expose it)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CouncilError):
    """
    Raised when client input fails a business rule.

    Schema-level problems (missing fields, wrong types) are reported by
    FastAPI's own request validation; this covers rules pydantic cannot see,
    such as the number of files in an upload.
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthenticatedError(CouncilError):
    """Raised when a protected route is called without a usable bearer credential."""

    status_code = 401
    error_code = "unauthenticated"

    def __init__(
        self,
        message: str = "Authentication required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialsError(CouncilError):
    """Raised by login when no user matches the submitted email and password."""

    status_code = 401
    error_code = "invalid_credentials"

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(CouncilError):
    """
    Raised when an authenticated caller's role lacks a required capability.

    The context names the missing capability and the caller's role so the
    server log shows why access was refused.
    """

    status_code = 403
    error_code = "forbidden"

    def __init__(
        self,
        message: str = "Secretary access required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(CouncilError):
    """
    Raised when a requested resource does not exist.

    Example:
        PUT /api/meetings/123/archive when no meeting has id 123.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class PayloadTooLargeError(CouncilError):
    """Raised when an uploaded file exceeds the configured per-file size limit."""

    status_code = 413
    error_code = "payload_too_large"

    def __init__(
        self,
        message: str = "File exceeds the maximum allowed size",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnsupportedMediaTypeError(CouncilError):
    """
    Raised when an uploaded file matches neither the allowed media types nor
    the allowed extensions. One rejected file rejects the whole request.
    """

    status_code = 415
    error_code = "unsupported_media_type"

    def __init__(
        self,
        message: str = "Only document and image files are allowed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(CouncilError):
    """
    Raised when file system operations fail.

    What:    Could not write or read a file in the upload directory.
    When:    Disk full, permission denied, directory not writable, I/O error.
    HTTP:    500 Internal Server Error (paths and OS errors stay in the log)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
