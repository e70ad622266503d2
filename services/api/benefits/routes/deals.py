"""Deal catalog endpoints.

GET  /api/deals            - all deals
GET  /api/deals/{id}       - one deal (404 if unknown)
POST /api/deals/{id}/claim - claim a deal (bearer token required)

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Path, status

from benefits.deps import get_current_identity, get_database
from benefits.schemas import Deal, MessageResponse
from benefits.services.auth import Identity
from benefits.services.catalog import get_deal, list_deals
from benefits.services.claims import claim_deal
from benefits.stores.database import Database

router = APIRouter()


@router.get("", response_model=list[Deal])
async def get_deals(db: Database = Depends(get_database)) -> list[Deal]:
    """List every deal, public and locked."""
    deals = await list_deals(db)
    return [Deal.from_record(deal) for deal in deals]


@router.get("/{deal_id}", response_model=Deal)
async def get_deal_by_id(
    deal_id: str = Path(description="Deal ID", min_length=1),
    db: Database = Depends(get_database),
) -> Deal:
    """Get a single deal including eligibility and access level."""
    deal = await get_deal(db, deal_id)
    return Deal.from_record(deal)


@router.post("/{deal_id}/claim", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def claim(
    deal_id: str = Path(description="Deal ID", min_length=1),
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_database),
) -> MessageResponse:
    """Claim a deal for the authenticated user.

    Raises:
        404: Deal not found.
        403: Locked deal and user not verified.
        400: Deal already claimed by this user.
    """
    await claim_deal(db, deal_id, identity)
    return MessageResponse(message="Deal claimed successfully")
