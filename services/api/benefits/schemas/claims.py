"""Schemas for the user's claims (/api/user/claims)."""

from datetime import datetime

from pydantic import BaseModel, Field

from benefits.models import Claim as ClaimRecord
from benefits.schemas.deals import Deal


class Claim(BaseModel):
    """A claim with its deal joined in under `dealId`."""

    id: str = Field(alias="_id")
    user_id: str = Field(alias="userId")
    deal: Deal = Field(alias="dealId")
    status: str
    claimed_at: datetime = Field(alias="claimedAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_record(cls, claim: ClaimRecord) -> "Claim":
        return cls(
            id=claim.id,
            user_id=claim.user_id,
            deal=Deal.from_record(claim.deal),
            status=claim.status.value,
            claimed_at=claim.claimed_at,
        )
