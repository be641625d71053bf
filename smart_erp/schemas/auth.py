"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from smart_erp.models.enums import Role

# bcrypt only hashes the first 72 bytes; the policy keeps passwords ASCII
MAX_PASSWORD_LENGTH = 72


class UserRegister(BaseModel):
    """User registration request.

    Password strength is checked by the auth service, after the duplicate-email
    check, so it is only length-bounded here.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH)
    role: Role | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class ForgotPasswordRequest(BaseModel):
    """Request a password reset link."""

    email: EmailStr = Field(..., max_length=255)


class ResetPasswordRequest(BaseModel):
    """New password submitted with a reset token."""

    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH)


class UserPublic(BaseModel):
    """Public account fields returned alongside a token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str


class UserResponse(UserPublic):
    """Current account information."""

    last_login: datetime | None
    created_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserPublic


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
