"""Schemas for the deal catalog (/api/deals)."""

from datetime import datetime

from pydantic import BaseModel, Field

from benefits.models import AccessLevel
from benefits.models import Deal as DealRecord


class Deal(BaseModel):
    """A catalog deal as rendered by the frontend."""

    id: str = Field(alias="_id")
    title: str
    description: str
    partner: str
    category: str
    access_level: str = Field(alias="accessLevel", examples=[AccessLevel.PUBLIC.value])
    eligibility_criteria: str | None = Field(alias="eligibilityCriteria", default=None)
    discount: str | None = None
    created_at: datetime = Field(alias="createdAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_record(cls, deal: DealRecord) -> "Deal":
        return cls(
            id=deal.id,
            title=deal.title,
            description=deal.description,
            partner=deal.partner,
            category=deal.category,
            access_level=deal.access_level.value,
            eligibility_criteria=deal.eligibility_criteria,
            discount=deal.discount,
            created_at=deal.created_at,
        )
