"""Authentication service.

- Password hashing: bcrypt via passlib, fixed cost factor (10 rounds by default)
- Tokens: HS256 JWTs carrying {userId, email}, 24h expiry by default
- Registration, login and bearer-token authentication

Hashing is CPU-bound, so it runs in a worker thread to keep the event loop free.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
import logging

import jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError

from benefits.errors import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    UnauthorizedError,
)
from benefits.models import User
from benefits.services.validation import validate_email, validate_name, validate_password
from benefits.settings import Settings
from benefits.stores.database import Database
from benefits.stores.users import UserStore

logger = logging.getLogger("uvicorn.error")

DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_TOKEN_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class Identity:
    """Caller identity decoded from an access token."""

    user_id: str
    email: str


# ============================================================
# Passwords
# ============================================================


@lru_cache
def _password_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a password with a per-hash random salt."""
    return _password_context(rounds).hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against a stored hash. Malformed hashes never match."""
    if not hashed:
        return False
    try:
        return _password_context(DEFAULT_BCRYPT_ROUNDS).verify(password, hashed)
    except (ValueError, TypeError):
        return False


# ============================================================
# Tokens
# ============================================================


def create_access_token(
    identity: Identity,
    *,
    secret: str,
    algorithm: str = "HS256",
    expires_in: timedelta = DEFAULT_TOKEN_TTL,
    now: datetime | None = None,
) -> str:
    """Create a signed access token for `identity`."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": identity.user_id,
        "email": identity.email,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> Identity:
    """Verify signature and expiry, and return the embedded identity.

    Raises:
        ForbiddenError: Tampered, expired, malformed or incomplete token.
    """
    try:
        data = jwt.decode(token, secret, algorithms=[algorithm], options={"require": ["exp"]})
    except jwt.InvalidTokenError as exc:
        logger.info(f"Rejected access token: {exc.__class__.__name__}")
        raise ForbiddenError("Invalid token") from None

    user_id = data.get("userId")
    email = data.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        raise ForbiddenError("Invalid token")
    return Identity(user_id=user_id, email=email)


def authenticate(token: str | None, settings: Settings) -> Identity:
    """Gate for protected operations.

    Raises:
        UnauthorizedError: No token supplied.
        ForbiddenError: Token failed verification.
    """
    if not token:
        raise UnauthorizedError("Access token required")
    return decode_access_token(
        token,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


# ============================================================
# Registration / login
# ============================================================


async def register_user(
    db: Database,
    *,
    email: str,
    password: str,
    name: str,
    rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> User:
    """Create an unverified account.

    Raises:
        ValidationError: Malformed email, empty password or name.
        ConflictError: Email already registered.
    """
    email = validate_email(email)
    password = validate_password(password)
    name = validate_name(name)

    async with db.session() as session:
        users = UserStore(session)
        if await users.get_by_email(email) is not None:
            raise ConflictError("User already exists")

        password_hash = await asyncio.to_thread(hash_password, password, rounds)

        try:
            user = await users.create(email=email, password_hash=password_hash, name=name)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email.
            raise ConflictError("User already exists") from None

    logger.info(f"Registered user {user.id}")
    return user


async def login_user(
    db: Database,
    *,
    email: str,
    password: str,
    settings: Settings,
) -> tuple[str, User]:
    """Verify credentials and issue an access token.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password (same message).
    """
    async with db.session() as session:
        user = await UserStore(session).get_by_email(email)

    if user is None:
        logger.info("Login failed: unknown email")
        raise InvalidCredentialsError("Invalid credentials")

    if not await asyncio.to_thread(verify_password, password, user.password_hash):
        logger.info(f"Login failed: wrong password for user {user.id}")
        raise InvalidCredentialsError("Invalid credentials")

    token = create_access_token(
        Identity(user_id=user.id, email=user.email),
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=timedelta(hours=settings.jwt_expires_hours),
    )
    return token, user


# ============================================================
# Administration
# ============================================================


async def set_user_verified(db: Database, *, email: str, verified: bool = True) -> bool:
    """Set an account's verification flag (admin tooling only).

    Returns:
        True if an account with this email exists.
    """
    async with db.session() as session:
        found = await UserStore(session).set_verified(email, verified)

    if found:
        logger.info(f"Set verified={verified} for {email}")
    return found
