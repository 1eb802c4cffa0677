from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Any


def parse_instant(value: Any) -> datetime | None:
    """Parse an ISO-8601 string to an aware datetime. Returns None if it does not parse."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        # naive timestamps are taken as UTC
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_instant(moment: datetime) -> str:
    """Format as UTC with millisecond precision, e.g. 2024-01-01T10:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def duration_minutes(start_iso: Any, end_iso: Any) -> int | None:
    """Minutes between two ISO timestamps, rounded half-up. Negative spans are kept."""
    start = parse_instant(start_iso)
    end = parse_instant(end_iso)
    if start is None or end is None:
        return None
    minutes = (end - start) / timedelta(minutes=1)
    return math.floor(minutes + 0.5)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
