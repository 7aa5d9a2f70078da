"""Timestamp normalisation.

Providers differ in whether DateTime fields come back timezone-aware, so all
comparisons go through ``as_utc``.
"""

from datetime import UTC, datetime


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
