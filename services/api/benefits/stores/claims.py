"""Claim repository (ledger)."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from benefits.models import Claim, ClaimStatus


class DuplicateClaim(Exception):
    """Insert hit the (user_id, deal_id) unique constraint."""


class ClaimStore:
    """Persistence wrapper for `claims`."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, user_id: str, deal_id: str) -> Claim:
        """Insert a pending claim.

        Raises:
            DuplicateClaim: If a claim for (user_id, deal_id) already exists.
            IntegrityError: For any other constraint failure.
        """
        claim = Claim(user_id=user_id, deal_id=deal_id, status=ClaimStatus.PENDING)
        self._session.add(claim)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            if await self.get_for_user_and_deal(user_id, deal_id) is not None:
                raise DuplicateClaim(f"{user_id}/{deal_id}") from None
            raise
        return claim

    async def get_for_user_and_deal(self, user_id: str, deal_id: str) -> Claim | None:
        result = await self._session.execute(
            select(Claim).where(Claim.user_id == user_id, Claim.deal_id == deal_id)
        )
        return result.scalar_one_or_none()

    async def count_for_user_and_deal(self, user_id: str, deal_id: str) -> int:
        result = await self._session.execute(
            select(func.count(Claim.id)).where(
                Claim.user_id == user_id, Claim.deal_id == deal_id
            )
        )
        return result.scalar() or 0

    async def list_for_user(self, user_id: str) -> list[Claim]:
        """All claims of a user with their deal loaded, most recent first."""
        result = await self._session.execute(
            select(Claim)
            .options(joinedload(Claim.deal))
            .where(Claim.user_id == user_id)
            .order_by(Claim.claimed_at.desc(), Claim.id.desc())
        )
        return list(result.scalars().all())

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(Claim))
        return result.rowcount or 0
