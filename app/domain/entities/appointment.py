from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class AppointmentStatus(str, Enum):
    active = "active"
    cancelled = "cancelled"


@dataclass(frozen=True)
class Appointment:
    id: str
    client_name: str
    coach_name: str
    start_time: str  # ISO-8601 as received (or synthesized)
    end_time: str
    duration_minutes: int | None
    status: AppointmentStatus = AppointmentStatus.active

    @property
    def is_cancelled(self) -> bool:
        return self.status == AppointmentStatus.cancelled

    def cancelled(self) -> Appointment:
        return replace(self, status=AppointmentStatus.cancelled)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "clientName": self.client_name,
            "coachName": self.coach_name,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "durationMinutes": self.duration_minutes,
            "status": self.status.value,
        }
