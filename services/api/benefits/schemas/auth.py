"""Schemas for registration and login (/api/auth)."""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Request body for POST /api/auth/register."""

    email: str
    password: str
    name: str


class LoginRequest(BaseModel):
    """Request body for POST /api/auth/login."""

    email: str
    password: str


class PublicUser(BaseModel):
    """User fields safe to hand back to the client."""

    id: str
    email: str
    name: str
    verified: bool


class LoginResponse(BaseModel):
    """Response payload for POST /api/auth/login."""

    token: str
    user: PublicUser
