"""
UserBoard Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for server-side failures.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.
Who:   Raised by repositories; caught by global handlers.

Exception Hierarchy:
    UserBoardError (base)      → 500 Internal Server Error
    └── StorageError           → 500 Internal Server Error

Client mistakes (malformed JSON, non-integer ids, unknown routes) are not
part of this hierarchy: FastAPI's default 422/404 responses are kept as-is.
Deleting a missing user is not an error at all.
"""

from typing import Any, Dict, Optional


class UserBoardError(Exception):
    """
    Base exception for all UserBoard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class StorageError(UserBoardError):
    """
    Raised when the storage backend fails unexpectedly.

    When:    Lost connection, missing table, constraint violation, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The
        operation name and original exception type go into `context`,
        which is only logged server-side.
    """

    def __init__(
        self,
        message: str = "A storage error occurred. Please try again later.",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation
