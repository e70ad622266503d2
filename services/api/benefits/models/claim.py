"""Claim model.

Join record between a user and a deal. One claim per (user, deal) pair,
enforced by `uq_claims_user_deal` as well as by the claim workflow.
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from benefits.models._defaults import generate_id, utcnow
from benefits.models.deal import Deal
from benefits.stores.database import Base


class ClaimStatus(Enum):
    """Claim lifecycle. Only `pending` is set by the API."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Claim(Base):
    """A user's request to redeem a deal."""

    __tablename__ = "claims"
    __table_args__ = (UniqueConstraint("user_id", "deal_id", name="uq_claims_user_deal"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    deal_id: Mapped[str] = mapped_column(ForeignKey("deals.id"), index=True)

    status: Mapped[ClaimStatus] = mapped_column(
        SAEnum(
            ClaimStatus,
            name="claim_status",
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        default=ClaimStatus.PENDING,
    )
    claimed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        index=True,
    )

    deal: Mapped[Deal] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return f"<Claim {self.user_id} -> {self.deal_id} ({self.status.value})>"
