"""Registration and login endpoints.

POST /api/auth/register - create an unverified account
POST /api/auth/login    - exchange credentials for an access token
"""

from fastapi import APIRouter, Depends, status

from benefits.deps import get_app_settings, get_database
from benefits.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PublicUser,
    RegisterRequest,
)
from benefits.services.auth import login_user, register_user
from benefits.settings import Settings
from benefits.stores.database import Database

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def register(
    payload: RegisterRequest,
    db: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    """Register a new user. Nothing about the account is echoed back."""
    await register_user(
        db,
        email=payload.email,
        password=payload.password,
        name=payload.name,
        rounds=settings.bcrypt_rounds,
    )
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    db: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    """Log in and receive a bearer token plus the public user profile."""
    token, user = await login_user(
        db,
        email=payload.email,
        password=payload.password,
        settings=settings,
    )
    return LoginResponse(
        token=token,
        user=PublicUser(id=user.id, email=user.email, name=user.name, verified=user.verified),
    )
