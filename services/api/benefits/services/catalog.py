"""Deal catalog service.

Listing is unfiltered and unpaginated; filtering happens in the frontend.
Locked deals are fully readable - the lock only gates claiming.
"""

from benefits.errors import NotFoundError
from benefits.models import Deal
from benefits.stores.database import Database
from benefits.stores.deals import DealStore


async def list_deals(db: Database) -> list[Deal]:
    """Get every deal in creation order."""
    async with db.session() as session:
        return await DealStore(session).list_all()


async def get_deal(db: Database, deal_id: str) -> Deal:
    """Get a single deal.

    Raises:
        NotFoundError: No deal with this id.
    """
    async with db.session() as session:
        deal = await DealStore(session).get_by_id(deal_id)

    if deal is None:
        raise NotFoundError("Deal not found")
    return deal
