"""Deal model.

A partner offer in the catalog. Every deal is readable by anyone;
`access_level` only gates who may claim it.
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from benefits.models._defaults import generate_id, utcnow
from benefits.stores.database import Base


class AccessLevel(Enum):
    """Who may claim a deal."""

    PUBLIC = "public"  # any authenticated user
    LOCKED = "locked"  # verified users only


class Deal(Base):
    """Partner deal offered to startups."""

    __tablename__ = "deals"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)

    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text)
    partner: Mapped[str] = mapped_column(String(200), index=True)
    category: Mapped[str] = mapped_column(String(100), index=True)

    access_level: Mapped[AccessLevel] = mapped_column(
        SAEnum(
            AccessLevel,
            name="access_level",
            values_callable=lambda levels: [level.value for level in levels],
        ),
        default=AccessLevel.PUBLIC,
    )
    eligibility_criteria: Mapped[str | None] = mapped_column(Text)
    discount: Mapped[str | None] = mapped_column(String(200))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def is_locked(self) -> bool:
        return self.access_level is AccessLevel.LOCKED

    def __repr__(self) -> str:
        return f"<Deal {self.title} ({self.access_level.value})>"
