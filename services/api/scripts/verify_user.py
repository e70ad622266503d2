#!/usr/bin/env python3
"""Mark a user account as verified (or revoke verification).

Verified users may claim locked deals. The API has no endpoint for this;
verification is an administrative decision made out of band.

Usage:
    cd services/api
    python -m scripts.verify_user founder@example.com
    python -m scripts.verify_user founder@example.com --revoke
"""

import argparse
import asyncio
import os
import sys

# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from benefits.services.auth import set_user_verified  # noqa: E402
from benefits.settings import get_settings  # noqa: E402
from benefits.stores.database import Database  # noqa: E402

load_dotenv()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Email of the account, exactly as registered")
    parser.add_argument(
        "--revoke",
        action="store_true",
        help="Clear the verified flag instead of setting it",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    verified = not args.revoke

    db = Database.from_settings(get_settings())
    await db.connect()
    try:
        found = await set_user_verified(db, email=args.email, verified=verified)
    finally:
        await db.close()

    if not found:
        print(f"No user with email {args.email!r}", file=sys.stderr)
        return 1

    print(f"{args.email}: verified={verified}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
