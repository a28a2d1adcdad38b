"""
Domain exceptions for the Job Board API.

Each exception carries the HTTP status code the API layer responds with,
so endpoints can let them propagate and rely on the handler in main.py.
"""

from typing import Optional


class JobBoardError(Exception):
    """Base exception for all Job Board errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class BadRequestError(JobBoardError):
    """Raised when a request is well-formed but cannot be processed."""

    status_code = 400


class MissingDataError(BadRequestError):
    """Raised when a partial update is requested with no fields to change."""

    def __init__(self, message: str = "No data", details: Optional[dict] = None):
        super().__init__(message, details)


class NotFoundError(JobBoardError):
    """Raised when a requested row does not exist."""

    status_code = 404


class UnauthorizedError(JobBoardError):
    """Raised when a request carries no valid credentials."""

    status_code = 401


class ForbiddenError(JobBoardError):
    """Raised when the caller is authenticated but not allowed."""

    status_code = 403
