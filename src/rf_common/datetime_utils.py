"""UTC datetime helpers shared by the domain and API layers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def iso_or_none(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.isoformat()
