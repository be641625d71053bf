"""Domain errors raised by services and rendered at the request boundary."""

from fastapi import status


class ErpError(Exception):
    """Base error carrying a client-readable message and an HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server Error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ErpError):
    """Request data failed a validation rule (e.g. weak password)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidToken(ErpError):
    """A reset token is malformed, tampered, already used, or points at no account."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid token"


class TokenExpired(ErpError):
    """A reset token's expiry has passed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Token has expired. Please request a new link."


class InvalidCredentials(ErpError):
    """Login failed. Deliberately says nothing about which part was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Unauthenticated(ErpError):
    """Missing, malformed, or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid authentication credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(ErpError):
    """Valid token, but the resource belongs to another account."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized"


class NotFound(ErpError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(ErpError):
    """A unique key is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class ServerError(ErpError):
    """Store or email failure; surfaced generically."""
