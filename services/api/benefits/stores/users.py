"""User repository (credential store)."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from benefits.models import User


class UserStore:
    """Persistence wrapper for `users`."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, email: str, password_hash: str, name: str) -> User:
        """Insert a user. Raises IntegrityError on duplicate email."""
        user = User(email=email, password_hash=password_hash, name=name, verified=False)
        self._session.add(user)
        await self._session.flush()
        return user

    async def get_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._session.get(User, user_id)

    async def set_verified(self, email: str, verified: bool) -> bool:
        """Set the verification flag. Returns False if no user matched."""
        result = await self._session.execute(
            update(User).where(User.email == email).values(verified=verified)
        )
        return result.rowcount > 0
