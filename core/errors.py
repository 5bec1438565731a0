"""
Domain errors surfaced to HTTP callers.

Each error carries the status code the API layer responds with; the message
is returned to the client verbatim.
"""


class ApiError(Exception):
    """Base exception for expected, client-facing failures."""

    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    """Requested user, API key or todo does not exist."""

    http_status = 404


class InvalidCredentialsError(ApiError):
    """Password does not match the stored one."""

    http_status = 400


class QuotaExceededError(ApiError):
    """User already holds the maximum number of API keys."""

    http_status = 400
