from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from app.application.dto.webhook_event import WebhookEventDTO
from app.application.utils.time_utils import format_instant, parse_instant
from app.domain.entities.resolved_event import ResolvedEvent

UNKNOWN_CLIENT = "Unknown client"
DEFAULT_COACH = "Coach"
CANCELLED_VALUES = {"true", "1", "yes"}


def resolve_event(
    event: WebhookEventDTO,
    now: datetime,
    default_duration_minutes: int = 30,
) -> ResolvedEvent | None:
    """
    Resolve the canonical appointment fields from a webhook payload.

    The platform sends different shapes depending on which workflow fired, so
    every field is looked up through an ordered list of candidates and the
    first non-empty one wins. Returns None when no appointment id can be found.
    """
    custom = event.custom_data or {}
    calendar = event.calendar or {}
    user = event.user or {}

    appointment_id = _first(
        custom.get("appointmentId"),
        calendar.get("appointmentId"),
        event.contact_id,
        event.contact_id_camel,
    )
    if appointment_id is None:
        return None

    start_time = _first(calendar.get("startTime"), custom.get("startTime"), event.start_time)
    end_time = _first(calendar.get("endTime"), custom.get("endTime"), event.end_time)

    start_synthesized = start_time is None
    if start_synthesized:
        start_time = format_instant(now)

    end_synthesized = end_time is None
    if end_synthesized:
        end_time = _fallback_end(start_time, now, default_duration_minutes)

    client_name = _first(
        custom.get("clientName"),
        event.full_name,
        event.email,
        event.contact_id,
    ) or UNKNOWN_CLIENT

    coach_name = _first(custom.get("coachName"), user.get("firstName")) or DEFAULT_COACH

    return ResolvedEvent(
        appointment_id=appointment_id,
        start_time=start_time,
        end_time=end_time,
        client_name=client_name,
        coach_name=coach_name,
        cancelled=is_cancelled_flag(custom.get("isCancelled")),
        start_synthesized=start_synthesized,
        end_synthesized=end_synthesized,
    )


def _fallback_end(start_time: str, now: datetime, minutes: int) -> str:
    duration = timedelta(minutes=minutes)
    base = parse_instant(start_time)
    if base is not None:
        try:
            return format_instant(base + duration)
        except OverflowError:
            # start too close to datetime.max to shift or convert to UTC
            pass
    return format_instant(now + duration)


def is_cancelled_flag(value: Any) -> bool:
    if not value:
        return False
    return str(value).strip().lower() in CANCELLED_VALUES


def _first(*candidates: Any) -> str | None:
    for candidate in candidates:
        if isinstance(candidate, (dict, list)):
            continue
        if candidate:
            return candidate if isinstance(candidate, str) else str(candidate)
    return None
