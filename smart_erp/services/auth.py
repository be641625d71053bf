"""Authentication service for JWT, password handling and account lifecycle."""

import asyncio
import logging
import re
import uuid
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from smart_erp.config import get_settings
from smart_erp.exceptions import (
    Conflict,
    InvalidCredentials,
    InvalidInput,
    InvalidToken,
    TokenExpired,
    Unauthenticated,
)
from smart_erp.models import UsedResetToken, User
from smart_erp.models.enums import NotificationType, Role, TokenType
from smart_erp.services.email_service import EmailService
from smart_erp.services.notification_service import NotificationService

logger = logging.getLogger(__name__)
settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

PASSWORD_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}"
)
PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 8 characters long and include uppercase, "
    "lowercase, number, and special character."
)
FORGOT_PASSWORD_MESSAGE = "If account exists, email sent."


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def validate_password_strength(password: str) -> None:
    """Raise InvalidInput unless the password satisfies the strength policy."""
    if not PASSWORD_PATTERN.fullmatch(password):
        raise InvalidInput(PASSWORD_POLICY_MESSAGE)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def create_access_token(user_id: int, role: str, expires_delta: timedelta | None = None) -> str:
    """Create a session token for an account."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.jwt_expiration_minutes))
    to_encode = {
        "sub": str(user_id),
        "role": role,
        "type": TokenType.ACCESS.value,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def create_password_reset_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Create a single-use password reset token."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.reset_token_expiration_minutes))
    to_encode = {
        "sub": str(user_id),
        "type": TokenType.PASSWORD_RESET.value,
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Decode and validate a session token.

    Raises:
        Unauthenticated: If the token is malformed, expired, tampered with,
            or is not a session token
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise Unauthenticated() from e

    if payload.get("type") != TokenType.ACCESS.value:
        raise Unauthenticated()
    try:
        payload["sub"] = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise Unauthenticated() from e
    return payload


def decode_password_reset_token(token: str) -> dict:
    """Decode and validate a password reset token.

    Raises:
        TokenExpired: If the token's expiry has passed
        InvalidToken: For any other decoding or claim problem
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpired() from e
    except JWTError as e:
        raise InvalidToken() from e

    if payload.get("type") != TokenType.PASSWORD_RESET.value or not payload.get("jti"):
        raise InvalidToken()
    try:
        payload["sub"] = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidToken() from e
    return payload


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def register_user(
    db: Session, name: str, email: str, password: str, role: Role | None = None
) -> tuple[User, str]:
    """Create an account, greet it with a welcome notification and sign it in.

    Raises:
        Conflict: If the email is already registered
        InvalidInput: If the password fails the strength policy
    """
    if get_user_by_email(db, email):
        raise Conflict("User already exists")
    validate_password_strength(password)

    user = User(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        role=(role or Role(settings.default_role)).value,
    )
    db.add(user)
    try:
        db.flush()
    except IntegrityError as e:
        # Another registration claimed the email after the lookup above
        db.rollback()
        raise Conflict("User already exists") from e

    notifications = NotificationService(db)
    welcome = notifications.create(
        user.id,
        "Welcome to Smart ERP! 🎉",
        f"Hello {user.name}, we are excited to have you on board.",
        NotificationType.INFO,
        commit=False,
    )
    db.commit()
    db.refresh(user)
    notifications.publish_created(welcome)

    logger.info(f"Registered user {user.id} with role {user.role}")
    return user, create_access_token(user.id, user.role)


def login_user(db: Session, email: str, password: str) -> tuple[User, str]:
    """Check credentials, record the login and return a session token.

    Raises:
        InvalidCredentials: If the email is unknown or the password is wrong
    """
    user = get_user_by_email(db, email)
    if user is None:
        pwd_context.dummy_verify()
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentials()

    now = datetime.now(UTC)
    notifications = NotificationService(db)
    welcome_back = None
    if user.last_login is None:
        welcome_back = notifications.create(
            user.id,
            "Welcome Back! 👋",
            f"Good to see you again, {user.name}.",
            NotificationType.INFO,
            commit=False,
        )
    elif _as_utc(user.last_login) < now - timedelta(days=settings.welcome_back_after_days):
        welcome_back = notifications.create(
            user.id,
            "Welcome Back! 👋",
            f"It's been a while. Good to see you again, {user.name}.",
            NotificationType.INFO,
            commit=False,
        )

    user.last_login = now
    db.commit()
    db.refresh(user)
    if welcome_back is not None:
        notifications.publish_created(welcome_back)

    logger.info(f"User {user.id} logged in")
    return user, create_access_token(user.id, user.role)


async def request_password_reset(
    db: Session, email: str, email_service: EmailService | None = None
) -> str:
    """Email a reset link if the account exists. Always returns the same message.

    Raises:
        ServerError: If the reset email could not be delivered
    """
    user = get_user_by_email(db, email)
    if user is None:
        # Blunt timing differences between known and unknown addresses
        await asyncio.sleep(settings.forgot_password_delay_seconds)
        return FORGOT_PASSWORD_MESSAGE

    token = create_password_reset_token(user.id)
    await (email_service or EmailService()).send_password_reset(user.email, user.name, token)

    logger.info(f"Password reset email issued for user {user.id}")
    return FORGOT_PASSWORD_MESSAGE


def reset_password(db: Session, token: str, new_password: str) -> User:
    """Replace an account's password using a reset token.

    Raises:
        TokenExpired: If the token has expired
        InvalidToken: If the token is invalid, already used, or its account is gone
        InvalidInput: If the new password fails the strength policy
    """
    payload = decode_password_reset_token(token)

    already_used = (
        db.query(UsedResetToken.id).filter(UsedResetToken.jti == payload["jti"]).first()
    )
    if already_used is not None:
        raise InvalidToken()

    user = get_user_by_id(db, payload["sub"])
    if user is None:
        raise InvalidToken()

    validate_password_strength(new_password)

    user.password_hash = get_password_hash(new_password)
    db.add(
        UsedResetToken(
            jti=payload["jti"],
            user_id=user.id,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
        )
    )
    try:
        db.commit()
    except IntegrityError as e:
        # A concurrent reset spent the same token first
        db.rollback()
        raise InvalidToken() from e

    logger.info(f"Password reset for user {user.id}")
    return user


def delete_account(db: Session, user: User) -> None:
    """Delete an account and every notification it owns in one transaction."""
    user_id = user.id
    NotificationService(db).delete_for_user(user_id)
    db.delete(user)
    db.commit()

    logger.info(f"Deleted user {user_id}")
