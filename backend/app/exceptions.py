"""
Contact Book Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for the three failure kinds of the API.
Why:   Each exception carries the `code` and `message` that end up in the
       JSON error body, so handlers only decide WHICH code applies.
How:   A global handler (registered in main.py) turns any ContactBookError
       into {"code": ..., "message": ...} with the same HTTP status.
Who:   Raised by services and route handlers; caught by the global handler.

Exception Hierarchy:
    ContactBookError (base)
    ├── InvalidIdError  → input_error   (path id is not an integer)
    ├── NotFoundError   → not_found     (no row matches the id)
    └── DatabaseError   → storage_error (any driver/database failure)

The status code is not fixed per class: the contacts routes answer a
non-integer id with 400 on GET but 500 on PUT/DELETE, and storage errors with
400 or 500 depending on the operation. Each raise site passes the code.
"""

from typing import Any, Dict, Optional


class ContactBookError(Exception):
    """
    Base exception for all Contact Book application errors.

    Attributes:
        code:     HTTP status code reported in the body and on the transport
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    default_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code if code is not None else self.default_code
        self.context = context or {}
        super().__init__(self.message)


class InvalidIdError(ContactBookError):
    """
    Raised when the `{id}` path segment is not an integer.

    Example response:
        {"code": 400, "message": "Invalid contact id 'abc'"}
    """

    default_code = 400

    def __init__(
        self,
        raw_id: str,
        code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["raw_id"] = raw_id
        super().__init__(message=f"Invalid contact id '{raw_id}'", code=code, context=ctx)


class NotFoundError(ContactBookError):
    """
    Raised when a requested contact does not exist.

    The service layer returns None for a missing row; route handlers convert
    that marker into this exception.
    """

    default_code = 404

    def __init__(
        self,
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not Found", context=ctx)


class DatabaseError(ContactBookError):
    """
    Raised when a database operation fails.

    Security Note:
        The message returned to the client is always generic. The driver error
        (type, operation) is logged server-side only.
    """

    default_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, context=context)
