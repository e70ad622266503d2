"""Claim workflow.

Flow for claim_deal:
1. Resolve the deal (404 if missing)
2. Locked deals: caller must exist and be verified (403 otherwise)
3. Reject a second claim for the same (user, deal) pair (400)
4. Insert a pending claim

Step 3 is a read before the insert; two concurrent requests can both pass
it. The `uq_claims_user_deal` constraint catches the loser at insert time
and it gets the same 400 as a sequential duplicate.
"""

import logging

from benefits.errors import ConflictError, ForbiddenError, NotFoundError
from benefits.models import Claim
from benefits.services.auth import Identity
from benefits.stores.claims import ClaimStore, DuplicateClaim
from benefits.stores.database import Database
from benefits.stores.deals import DealStore
from benefits.stores.users import UserStore

logger = logging.getLogger("uvicorn.error")


async def claim_deal(db: Database, deal_id: str, identity: Identity) -> Claim:
    """Claim a deal on behalf of the authenticated caller.

    Raises:
        NotFoundError: Deal missing, or (locked deals) caller's account missing.
        ForbiddenError: Locked deal and caller is not verified.
        ConflictError: Caller already claimed this deal.
    """
    async with db.session() as session:
        deal = await DealStore(session).get_by_id(deal_id)
        if deal is None:
            raise NotFoundError("Deal not found")

        if deal.is_locked:
            user = await UserStore(session).get_by_id(identity.user_id)
            if user is None:
                raise NotFoundError("User not found")
            if not user.verified:
                logger.info(f"Claim refused: user {identity.user_id} unverified for locked deal {deal_id}")
                raise ForbiddenError("Verification required for locked deals")

        claims = ClaimStore(session)
        if await claims.get_for_user_and_deal(identity.user_id, deal_id) is not None:
            raise ConflictError("Deal already claimed")

        try:
            claim = await claims.create(user_id=identity.user_id, deal_id=deal_id)
        except DuplicateClaim:
            logger.info(f"Concurrent duplicate claim rejected: user {identity.user_id}, deal {deal_id}")
            raise ConflictError("Deal already claimed") from None

    logger.info(f"User {identity.user_id} claimed deal {deal_id}")
    return claim


async def list_claims(db: Database, identity: Identity) -> list[Claim]:
    """Get the caller's claims joined with their deals, newest first."""
    async with db.session() as session:
        return await ClaimStore(session).list_for_user(identity.user_id)
