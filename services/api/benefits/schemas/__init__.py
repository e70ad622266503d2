"""Pydantic schemas for API request/response validation."""

from benefits.schemas.common import MessageResponse
from benefits.schemas.auth import LoginRequest, LoginResponse, PublicUser, RegisterRequest
from benefits.schemas.deals import Deal
from benefits.schemas.claims import Claim

__all__ = [
    "Claim",
    "Deal",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PublicUser",
    "RegisterRequest",
]
