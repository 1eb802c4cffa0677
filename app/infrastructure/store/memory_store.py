from __future__ import annotations

import logging
from datetime import datetime

from app.application.ports.appointment_store import AppointmentStorePort
from app.application.utils.time_utils import parse_instant
from app.domain.entities.appointment import Appointment


class MemoryAppointmentStore(AppointmentStorePort):
    def __init__(self, max_size: int = 500) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._appointments: dict[str, Appointment] = {}
        self._max_size = max_size
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._appointments)

    def get(self, appointment_id: str) -> Appointment | None:
        return self._appointments.get(appointment_id)

    def upsert(self, appointment: Appointment) -> None:
        if appointment.id not in self._appointments and len(self._appointments) >= self._max_size:
            self._drop_oldest()
        self._appointments[appointment.id] = appointment

    def mark_cancelled(self, appointment_id: str) -> Appointment | None:
        current = self._appointments.get(appointment_id)
        if current is None:
            return None
        if current.is_cancelled:
            return current
        updated = current.cancelled()
        self._appointments[appointment_id] = updated
        return updated

    def evict_stale(self, now: datetime) -> int:
        stale = [
            appointment_id
            for appointment_id, appointment in self._appointments.items()
            if _is_stale(appointment, now)
        ]
        for appointment_id in stale:
            del self._appointments[appointment_id]
        if stale:
            self._logger.info("Evicted stale appointments", extra={"count": len(stale)})
        return len(stale)

    def list_all(self) -> list[Appointment]:
        return list(self._appointments.values())

    def clear(self) -> None:
        self._appointments.clear()

    def _drop_oldest(self) -> None:
        # unparsable end times sort first, then earliest end
        def end_key(item: tuple[str, Appointment]) -> tuple[int, float]:
            end = parse_instant(item[1].end_time)
            return (0, 0.0) if end is None else (1, end.timestamp())

        appointment_id, _ = min(self._appointments.items(), key=end_key)
        del self._appointments[appointment_id]
        self._logger.warning(
            "Store full; dropped appointment with earliest end",
            extra={"appointment_id": appointment_id, "count": self._max_size},
        )


def _is_stale(appointment: Appointment, now: datetime) -> bool:
    end = parse_instant(appointment.end_time)
    return end is None or end < now
