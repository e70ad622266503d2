"""User model.

Accounts that can log in and claim deals. `verified` gates locked deals and
is only changed by the admin tooling (scripts/verify_user.py).
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from benefits.models._defaults import generate_id, utcnow
from benefits.stores.database import Base


class User(Base):
    """Registered startup account."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)

    # Credentials (email is case-sensitive as stored)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(200))

    # Profile
    name: Mapped[str] = mapped_column(String(200))
    verified: Mapped[bool] = mapped_column(default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    def __repr__(self) -> str:
        return f"<User {self.email} verified={self.verified}>"
