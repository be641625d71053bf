"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from smart_erp.database import get_db
from smart_erp.exceptions import Unauthenticated
from smart_erp.models.user import User
from smart_erp.services.auth import decode_access_token, get_user_by_id
from smart_erp.services.notification_service import NotificationService

security = HTTPBearer(auto_error=False)


class TokenClaims(BaseModel):
    """Identity carried by a verified session token."""

    user_id: int
    role: str | None = None


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Verify the bearer token without touching the database."""
    if credentials is None:
        raise Unauthenticated()

    payload = decode_access_token(credentials.credentials)
    return TokenClaims(user_id=payload["sub"], role=payload.get("role"))


def get_current_user(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user, re-read from the database."""
    user = get_user_by_id(db, claims.user_id)
    if user is None:
        raise Unauthenticated()
    return user


def get_notification_service(
    db: Annotated[Session, Depends(get_db)],
) -> NotificationService:
    """Get notification service bound to the request session."""
    return NotificationService(db)
