"""Deal repository (catalog)."""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from benefits.models import Deal


class DealStore:
    """Persistence wrapper for `deals`."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Deal]:
        result = await self._session.execute(
            select(Deal).order_by(Deal.created_at.asc(), Deal.id.asc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, deal_id: str) -> Deal | None:
        return await self._session.get(Deal, deal_id)

    async def create_many(self, rows: Iterable[dict[str, Any]]) -> list[Deal]:
        deals = [Deal(**row) for row in rows]
        self._session.add_all(deals)
        await self._session.flush()
        return deals

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(Deal))
        return result.rowcount or 0
