"""SQLAlchemy ORM models.

Models represent database tables:
- users: Registered accounts (credential store)
- deals: Partner deals (catalog)
- claims: User -> deal claims (ledger)
"""

from benefits.models.user import User
from benefits.models.deal import AccessLevel, Deal
from benefits.models.claim import Claim, ClaimStatus

__all__ = ["AccessLevel", "Claim", "ClaimStatus", "Deal", "User"]
