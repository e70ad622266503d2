"""Request-scoped dependencies shared by the routers.

The database and settings live on `app.state`; routes receive them through
these dependencies instead of importing globals.
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from benefits.services.auth import Identity, authenticate
from benefits.settings import Settings
from benefits.stores.database import Database

_bearer = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_app_settings),
) -> Identity:
    """Authenticate the bearer token and attach the identity to the request."""
    token = credentials.credentials if credentials is not None else None
    identity = authenticate(token, settings)
    request.state.identity = identity
    return identity
