"""Common validation helpers for use cases."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from app.domain.exceptions import ValidationError


def require_identifier(value: object, field_name: str) -> str:
    """Return ``value`` stripped or raise :class:`ValidationError` when blank."""

    if value is None:
        raise ValidationError(f"{field_name} is required")
    normalized = str(value).strip()
    if not normalized:
        raise ValidationError(f"{field_name} is required")
    return normalized


def require_email(value: object, field_name: str = "email") -> str:
    """Return the normalized address or raise :class:`ValidationError`."""

    address = require_identifier(value, field_name)
    try:
        validated = validate_email(address, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError(f"{field_name} is not a valid address: {exc}") from exc
    return validated.normalized


__all__ = ["require_email", "require_identifier"]
