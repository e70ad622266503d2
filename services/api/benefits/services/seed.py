"""Sample catalog data.

Seeding replaces the catalog: all claims and deals are removed, then the
sample deals are inserted. Users are left untouched.
"""

import logging
from typing import Any

from benefits.models import AccessLevel
from benefits.services.validation import validate_deal_fields
from benefits.stores.claims import ClaimStore
from benefits.stores.database import Database
from benefits.stores.deals import DealStore

logger = logging.getLogger("uvicorn.error")

SAMPLE_DEALS: list[dict[str, Any]] = [
    {
        "title": "AWS Credits for Startups",
        "description": "Get $100,000 in AWS credits to build your startup infrastructure.",
        "partner": "Amazon Web Services",
        "category": "Cloud Services",
        "access_level": AccessLevel.PUBLIC,
        "eligibility_criteria": "Must be a registered startup with less than 2 years in operation",
        "discount": "$100,000 credits",
    },
    {
        "title": "Premium Slack Plan",
        "description": "Free premium Slack plan for 2 years.",
        "partner": "Slack",
        "category": "Productivity",
        "access_level": AccessLevel.LOCKED,
        "eligibility_criteria": "Verified startup founders only",
        "discount": "2 years free",
    },
    {
        "title": "Google Workspace Business Starter",
        "description": "Free Google Workspace for your team.",
        "partner": "Google",
        "category": "Productivity",
        "access_level": AccessLevel.PUBLIC,
        "eligibility_criteria": "Startup teams with 2+ members",
        "discount": "Free for 1 year",
    },
    {
        "title": "Stripe Atlas Program",
        "description": "Incorporation services and banking setup for international startups.",
        "partner": "Stripe",
        "category": "Financial Services",
        "access_level": AccessLevel.LOCKED,
        "eligibility_criteria": "Verified startup with international operations",
        "discount": "Discounted incorporation fees",
    },
]


async def seed_catalog(db: Database, deals: list[dict[str, Any]] | None = None) -> int:
    """Replace all deals (and claims) with `deals`, or the sample set.

    Returns:
        Number of deals inserted.
    """
    rows = [validate_deal_fields(row) for row in (deals if deals is not None else SAMPLE_DEALS)]

    async with db.session() as session:
        # Claims reference deals, so they go first.
        removed_claims = await ClaimStore(session).delete_all()
        removed_deals = await DealStore(session).delete_all()
        inserted = await DealStore(session).create_many(rows)

    logger.info(
        f"Seeded catalog: {len(inserted)} deals inserted "
        f"({removed_deals} deals, {removed_claims} claims removed)"
    )
    return len(inserted)
