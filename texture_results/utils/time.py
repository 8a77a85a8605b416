from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def local_today() -> date:
    """Return today's date in the machine's local timezone."""
    return datetime.now().astimezone().date()


def local_midnight(day: date) -> datetime:
    """Return the timezone-aware start of ``day`` in local time."""
    return datetime.combine(day, time.min).astimezone()


def parse_iso8601(value: str | None) -> Optional[datetime]:
    """
    Parse an ISO8601 timestamp from Discord into a timezone-aware UTC datetime.

    Discord timestamps are always UTC (Z or +00:00).
    """
    if not value:
        return None

    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt


def to_epoch_ms(dt: datetime) -> int:
    """Milliseconds since the Unix epoch, as stored on contributions."""
    return (dt - EPOCH) // timedelta(milliseconds=1)
