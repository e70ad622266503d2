"""Domain validation for values entering the workflows.

These checks mirror the table constraints (required fields, enums, lengths)
so invalid input is rejected before it reaches the database, and so the
rules can be tested without one.
"""

from enum import Enum
from typing import Any, Mapping, TypeVar

from benefits.errors import ValidationError
from benefits.models import AccessLevel, ClaimStatus

MAX_EMAIL_LENGTH = 320
MAX_NAME_LENGTH = 200

REQUIRED_DEAL_FIELDS = ("title", "description", "partner", "category")

_E = TypeVar("_E", bound=Enum)


def validate_email(email: str) -> str:
    """Return the email unchanged if it is well-formed.

    Case is preserved: emails are matched exactly as stored.
    """
    if not email or not email.strip():
        raise ValidationError("Email is required")
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError("Email is too long")
    if any(ch.isspace() for ch in email):
        raise ValidationError("Email must not contain whitespace")
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain or "@" in domain:
        raise ValidationError("Email is invalid")
    return email


def validate_password(password: str) -> str:
    if not password:
        raise ValidationError("Password is required")
    return password


def validate_name(name: str) -> str:
    cleaned = name.strip() if name else ""
    if not cleaned:
        raise ValidationError("Name is required")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationError("Name is too long")
    return cleaned


def _validate_enum(enum_cls: type[_E], value: Any, label: str) -> _E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {label}: {value!r} (expected one of: {allowed})") from None


def validate_access_level(value: Any) -> AccessLevel:
    return _validate_enum(AccessLevel, value, "access level")


def validate_claim_status(value: Any) -> ClaimStatus:
    return _validate_enum(ClaimStatus, value, "claim status")


def validate_deal_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a deal definition and return a normalized copy."""
    missing = [field for field in REQUIRED_DEAL_FIELDS if not str(data.get(field) or "").strip()]
    if missing:
        raise ValidationError(f"Missing required deal fields: {', '.join(missing)}")

    normalized = dict(data)
    normalized["access_level"] = validate_access_level(data.get("access_level", AccessLevel.PUBLIC))
    return normalized
