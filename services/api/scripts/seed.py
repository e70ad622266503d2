#!/usr/bin/env python3
"""Seed the database with the sample deal catalog.

Replaces all deals (and any claims on them) with the sample set used by
POST /api/seed. Users are kept.

Usage:
    cd services/api
    python -m scripts.seed
"""

import asyncio
import os
import sys

# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from benefits.services.seed import SAMPLE_DEALS, seed_catalog  # noqa: E402
from benefits.settings import get_settings  # noqa: E402
from benefits.stores.database import Database  # noqa: E402

load_dotenv()


async def seed_database() -> None:
    """Seed database with the sample catalog."""
    db = Database.from_settings(get_settings())
    await db.connect()
    try:
        await db.create_tables()
        print("Seeding database...")
        inserted = await seed_catalog(db)
        for deal in SAMPLE_DEALS:
            print(f"  + {deal['title']} ({deal['access_level'].value})")
        print(f"\nDatabase seeded successfully ({inserted} deals).")
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(seed_database())
