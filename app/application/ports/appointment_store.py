from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.entities.appointment import Appointment


class AppointmentStorePort(ABC):
    @abstractmethod
    def get(self, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def upsert(self, appointment: Appointment) -> None:
        """Insert, or replace the record with the same id."""
        raise NotImplementedError

    @abstractmethod
    def mark_cancelled(self, appointment_id: str) -> Appointment | None:
        """
        Set status to cancelled in place, keeping every other field.
        Returns the updated record, or None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def evict_stale(self, now: datetime) -> int:
        """
        Remove records whose end time is before now or does not parse.
        Returns the number of records removed.
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Appointment]:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
