from __future__ import annotations

from datetime import datetime

from app.application.ports.appointment_store import AppointmentStorePort
from app.application.utils.time_utils import parse_instant
from app.domain.entities.appointment import Appointment


class UpcomingAppointmentsUseCase:
    def __init__(self, store: AppointmentStorePort, default_limit: int | None = None) -> None:
        self._store = store
        self._default_limit = default_limit

    def execute(self, now: datetime, limit: int | None = None) -> list[Appointment]:
        """Sweep the store, then return what is still upcoming; the first item is next up."""
        self._store.evict_stale(now)
        upcoming = select_upcoming(self._store.list_all(), now)
        limit = limit if limit is not None else self._default_limit
        if limit is not None:
            upcoming = upcoming[:limit]
        return upcoming


def select_upcoming(appointments: list[Appointment], now: datetime) -> list[Appointment]:
    """Appointments still running or ahead at `now`, earliest start first.

    An appointment ending exactly at `now` is kept. Records whose start does not
    parse are placed after all others; equal starts keep their input order.
    """
    upcoming = []
    for appointment in appointments:
        end = parse_instant(appointment.end_time)
        if end is not None and end >= now:
            upcoming.append(appointment)
    return sorted(upcoming, key=_start_key)


def _start_key(appointment: Appointment) -> tuple[int, float]:
    start = parse_instant(appointment.start_time)
    return (1, 0.0) if start is None else (0, start.timestamp())
