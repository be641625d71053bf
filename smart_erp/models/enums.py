"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Account roles carried in session tokens."""

    ADMIN = "admin"
    USER = "user"


class NotificationType(str, Enum):
    """Visual kind of an in-app notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ALERT = "alert"


class TokenType(str, Enum):
    """Value of the `type` claim that separates session and reset tokens."""

    ACCESS = "access"
    PASSWORD_RESET = "password_reset"  # noqa: S105
