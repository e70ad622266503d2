"""API routes."""

from fastapi import APIRouter

from benefits.routes import auth, deals, seed, user

api_router = APIRouter(prefix="/api")

# Registration and login
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Deal catalog and claiming
api_router.include_router(deals.router, prefix="/deals", tags=["deals"])

# Authenticated user's data
api_router.include_router(user.router, prefix="/user", tags=["user"])

# Sample data
api_router.include_router(seed.router, prefix="/seed", tags=["seed"])
