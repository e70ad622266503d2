"""Sample data endpoint.

POST /api/seed - replace the catalog with the sample deals.
Disabled (404) when SEED_ENABLED=false.
"""

from fastapi import APIRouter, Depends, HTTPException

from benefits.deps import get_app_settings, get_database
from benefits.schemas import MessageResponse
from benefits.services.seed import seed_catalog
from benefits.settings import Settings
from benefits.stores.database import Database

router = APIRouter()


@router.post("", response_model=MessageResponse)
async def seed(
    db: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    if not settings.seed_enabled:
        raise HTTPException(status_code=404, detail="Not Found")
    await seed_catalog(db)
    return MessageResponse(message="Sample data seeded successfully")
