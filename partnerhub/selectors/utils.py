from datetime import date, datetime, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: str | None) -> datetime:
    """Parse an ISO-8601 string; anything missing or unparseable is the epoch."""
    if not value:
        return _EPOCH
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def month_label(value: str | None) -> str | None:
    """'2025-09-01' -> 'Sep 2025'. None if the date doesn't parse."""
    if not value:
        return None
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        return None
    return parsed.strftime("%b %Y")


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()
