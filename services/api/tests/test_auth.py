"""Tests for registration, login, password hashing and tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from benefits.errors import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    UnauthorizedError,
    ValidationError,
)
from benefits.services.auth import (
    Identity,
    authenticate,
    create_access_token,
    decode_access_token,
    hash_password,
    login_user,
    register_user,
    set_user_verified,
    verify_password,
)
from benefits.settings import Settings
from benefits.stores.database import Database
from benefits.stores.users import UserStore

SECRET = "test-secret"


def test_hash_is_salted_bcrypt_with_cost_10():
    first = hash_password("pw")
    second = hash_password("pw")
    assert first != second
    assert first.startswith("$2b$10$")
    assert verify_password("pw", first)
    assert not verify_password("wrong", first)


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("pw", "not-a-hash")
    assert not verify_password("pw", "")


@pytest.mark.asyncio
async def test_register_stores_unverified_user_with_hash(database: Database):
    user = await register_user(database, email="alice@x.com", password="pw", name="Alice")

    async with database.session() as session:
        stored = await UserStore(session).get_by_email("alice@x.com")

    assert stored is not None
    assert stored.id == user.id
    assert stored.name == "Alice"
    assert stored.verified is False
    assert stored.password_hash != "pw"
    assert verify_password("pw", stored.password_hash)


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(database: Database):
    await register_user(database, email="alice@x.com", password="pw", name="Alice")
    with pytest.raises(ConflictError, match="User already exists"):
        await register_user(database, email="alice@x.com", password="other", name="Imposter")


@pytest.mark.asyncio
async def test_email_match_is_case_sensitive(database: Database):
    await register_user(database, email="alice@x.com", password="pw", name="Alice")
    await register_user(database, email="Alice@x.com", password="pw", name="Alice 2")

    with pytest.raises(InvalidCredentialsError):
        await login_user(database, email="ALICE@X.COM", password="pw", settings=Settings(_env_file=None))


@pytest.mark.asyncio
async def test_register_rejects_invalid_input(database: Database):
    with pytest.raises(ValidationError):
        await register_user(database, email="not-an-email", password="pw", name="Alice")
    with pytest.raises(ValidationError):
        await register_user(database, email="alice@x.com", password="", name="Alice")


@pytest.mark.asyncio
async def test_login_returns_token_for_embedded_identity(database: Database, settings: Settings):
    user = await register_user(database, email="alice@x.com", password="pw", name="Alice")

    token, logged_in = await login_user(database, email="alice@x.com", password="pw", settings=settings)

    assert logged_in.id == user.id
    identity = authenticate(token, settings)
    assert identity == Identity(user_id=user.id, email="alice@x.com")

    claims = jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 24 * 3600


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(database: Database, settings: Settings):
    await register_user(database, email="alice@x.com", password="pw", name="Alice")

    with pytest.raises(InvalidCredentialsError) as unknown:
        await login_user(database, email="bob@x.com", password="pw", settings=settings)
    with pytest.raises(InvalidCredentialsError) as wrong:
        await login_user(database, email="alice@x.com", password="nope", settings=settings)

    assert unknown.value.message == wrong.value.message == "Invalid credentials"


def test_expired_token_rejected():
    token = create_access_token(
        Identity(user_id="u1", email="a@x.com"),
        secret=SECRET,
        now=datetime.now(timezone.utc) - timedelta(hours=25),
    )
    with pytest.raises(ForbiddenError):
        decode_access_token(token, secret=SECRET)


def test_token_signed_with_other_secret_rejected():
    token = create_access_token(Identity(user_id="u1", email="a@x.com"), secret="someone-else")
    with pytest.raises(ForbiddenError):
        decode_access_token(token, secret=SECRET)


def test_token_with_swapped_payload_rejected():
    token = create_access_token(Identity(user_id="u1", email="a@x.com"), secret=SECRET)
    forged = create_access_token(Identity(user_id="admin", email="a@x.com"), secret="guess")
    header, _, signature = token.split(".")
    _, forged_payload, _ = forged.split(".")

    with pytest.raises(ForbiddenError):
        decode_access_token(f"{header}.{forged_payload}.{signature}", secret=SECRET)


def test_token_without_identity_claims_rejected():
    exp = datetime.now(timezone.utc) + timedelta(hours=1)
    token = jwt.encode({"sub": "u1", "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(ForbiddenError):
        decode_access_token(token, secret=SECRET)


def test_authenticate_requires_token(settings: Settings):
    with pytest.raises(UnauthorizedError, match="Access token required"):
        authenticate(None, settings)
    with pytest.raises(UnauthorizedError):
        authenticate("", settings)
    with pytest.raises(ForbiddenError, match="Invalid token"):
        authenticate("garbage", settings)


@pytest.mark.asyncio
async def test_set_user_verified(database: Database):
    await register_user(database, email="alice@x.com", password="pw", name="Alice")

    assert await set_user_verified(database, email="alice@x.com") is True
    assert await set_user_verified(database, email="nobody@x.com") is False

    async with database.session() as session:
        user = await UserStore(session).get_by_email("alice@x.com")
    assert user.verified is True
