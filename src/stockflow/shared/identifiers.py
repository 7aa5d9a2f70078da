"""Identifier format checks applied at the edges of the domain."""

from uuid import UUID

from protean.exceptions import ValidationError


def validate_identifier(value, field_name: str, label: str) -> str:
    """Return ``value`` in canonical UUID form, or raise ``ValidationError``.

    Rejects malformed identifiers before any repository is touched, so a bad
    path parameter never turns into a store error.
    """
    try:
        return str(UUID(str(value)))
    except (TypeError, ValueError):
        raise ValidationError({field_name: [f"Invalid {label} ID format"]}) from None
