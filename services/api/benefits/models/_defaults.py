from datetime import datetime, timezone
from uuid import uuid4


def generate_id() -> str:
    """Generate an opaque record id (32 hex chars)."""
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
