"""Endpoints scoped to the authenticated user.

GET /api/user/claims - the caller's claims, newest first, with deals joined
"""

from fastapi import APIRouter, Depends

from benefits.deps import get_current_identity, get_database
from benefits.schemas import Claim
from benefits.services.auth import Identity
from benefits.services.claims import list_claims
from benefits.stores.database import Database

router = APIRouter()


@router.get("/claims", response_model=list[Claim])
async def get_my_claims(
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_database),
) -> list[Claim]:
    claims = await list_claims(db, identity)
    return [Claim.from_record(claim) for claim in claims]
