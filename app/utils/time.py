from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional


UTC = timezone.utc


def utcnow() -> datetime:
    """
    Returns timezone-aware current UTC time.
    """
    return datetime.now(UTC)


def ensure_aware(dt: datetime, assume_utc: bool = True) -> datetime:
    """
    Ensure a datetime is timezone-aware. If naive and assume_utc is True,
    interpret as UTC; otherwise raise ValueError.
    """
    if dt.tzinfo is not None:
        return dt.astimezone(UTC)
    if assume_utc:
        return dt.replace(tzinfo=UTC)
    raise ValueError("Naive datetime provided and assume_utc=False")


def split_instant(dt: Optional[datetime] = None) -> tuple[date, time]:
    """
    Split an instant into the (UTC date, UTC wall-clock time) pair stored
    on a check-in. Microseconds are dropped, matching the HH:MM:SS column.
    """
    aware = ensure_aware(dt or utcnow())
    return aware.date(), aware.time().replace(microsecond=0, tzinfo=None)


def days_ago(days: int, *, today: Optional[date] = None) -> date:
    """
    Calendar date `days` days before today (UTC).
    """
    base = today or utcnow().date()
    return base - timedelta(days=max(days, 0))


def isoformat_z(dt: Optional[datetime] = None) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision and a trailing 'Z'.
    """
    aware = ensure_aware(dt or utcnow())
    return aware.strftime("%Y-%m-%dT%H:%M:%S.") + f"{aware.microsecond // 1000:03d}Z"
