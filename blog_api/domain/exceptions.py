"""
Error taxonomy for the blog application.

Use cases and repositories raise these; the API layer translates them into
structured JSON responses. Every error carries a stable ``code`` and a
human-readable ``message``.
"""

# Standard library imports
from typing import Optional


class BlogAppError(Exception):
    """Base exception for all blog application errors."""

    code: str = "error"
    default_message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogAppError):
    """Raised when a required field is missing or empty."""
    code = "validation_error"
    default_message = "Invalid input"


class UnauthenticatedError(BlogAppError):
    """Raised when a protected operation is called without a token."""
    code = "unauthenticated"
    default_message = "No authentication token, access denied"


class InvalidTokenError(BlogAppError):
    """Raised when a token is malformed, expired or has a bad signature."""
    code = "invalid_token"
    default_message = "Token is not valid"


class DuplicateUsernameError(BlogAppError):
    code = "duplicate_username"
    default_message = "Username is already taken"


class DuplicateEmailError(BlogAppError):
    code = "duplicate_email"
    default_message = "Email is already registered"


class InvalidCredentialsError(BlogAppError):
    """Raised when login lookup or password comparison fails."""
    code = "invalid_credentials"
    default_message = "Invalid credentials"


class NotFoundError(BlogAppError):
    code = "not_found"
    default_message = "Blog not found"


class ForbiddenError(BlogAppError):
    """Raised when an authenticated caller is not the resource's author."""
    code = "forbidden"
    default_message = "You can only modify your own blogs"


class InternalError(BlogAppError):
    """Raised when a collaborator (e.g. the database) fails unexpectedly."""
    code = "internal_error"
    default_message = "Internal server error"
