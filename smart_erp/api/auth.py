"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from smart_erp.api.dependencies import get_current_user
from smart_erp.database import get_db
from smart_erp.models.user import User
from smart_erp.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    MessageResponse,
    ResetPasswordRequest,
    UserLogin,
    UserPublic,
    UserRegister,
    UserResponse,
)
from smart_erp.services.auth import (
    delete_account,
    login_user,
    register_user,
    request_password_reset,
    reset_password,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user, token = register_user(
        db, user_data.name, user_data.email, user_data.password, user_data.role
    )
    return AuthResponse(token=token, user=UserPublic.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user, token = login_user(db, credentials.email, credentials.password)
    return AuthResponse(token=token, user=UserPublic.model_validate(user))


@router.get("/user", response_model=UserResponse)
async def get_user(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Send a password reset link. The reply is the same whether or not the account exists."""
    message = await request_password_reset(db, request.email)
    return MessageResponse(message=message)


@router.post("/reset-password/{token}", response_model=MessageResponse)
async def reset_password_with_token(
    token: str,
    request: ResetPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Set a new password using a reset token."""
    reset_password(db, token, request.password)
    return MessageResponse(message="Password updated successfully")


@router.delete("/delete", response_model=MessageResponse)
async def delete_user(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the current account and its notifications."""
    delete_account(db, current_user)
    return MessageResponse(message="User deleted")
