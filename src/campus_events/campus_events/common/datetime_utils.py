from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 string (``Z`` suffix allowed) into a naive UTC datetime."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def iso_or_none(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
