from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from app.application.dto.webhook_event import WebhookEventDTO
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.utils.field_resolver import resolve_event
from app.application.utils.time_utils import duration_minutes
from app.domain.entities.appointment import Appointment, AppointmentStatus
from app.domain.entities.resolved_event import ResolvedEvent


@dataclass(frozen=True)
class ReconcileResult:
    action: str  # "created", "updated", "cancelled", "cancelled_created", "rejected"
    appointment: Appointment | None = None
    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.action != "rejected"

    @property
    def is_cancellation(self) -> bool:
        return self.action in {"cancelled", "cancelled_created"}


class ReconcileAppointmentUseCase:
    """Apply one webhook event to the appointment store.

    Events are applied in arrival order (last write wins): a booking event for
    an id that was cancelled earlier reactivates it.
    """

    def __init__(self, store: AppointmentStorePort, default_duration_minutes: int = 30) -> None:
        self._store = store
        self._default_duration_minutes = default_duration_minutes
        self._logger = logging.getLogger(__name__)

    def execute(self, event: WebhookEventDTO, now: datetime) -> ReconcileResult:
        self._store.evict_stale(now)

        resolved = resolve_event(event, now, self._default_duration_minutes)
        if resolved is None:
            self._logger.warning(
                "Webhook without appointment id; not stored",
                extra={"action": "rejected", "reason": "missing_id"},
            )
            return ReconcileResult(action="rejected", message="Missing appointmentId")

        if resolved.cancelled:
            return self._cancel(resolved)
        return self._book(resolved)

    def _cancel(self, resolved: ResolvedEvent) -> ReconcileResult:
        existing = self._store.mark_cancelled(resolved.appointment_id)
        if existing is not None:
            self._logger.info(
                "Appointment marked cancelled",
                extra={"appointment_id": resolved.appointment_id, "action": "cancelled"},
            )
            return ReconcileResult(action="cancelled", appointment=existing)

        appointment = _build(resolved, AppointmentStatus.cancelled)
        self._store.upsert(appointment)
        self._logger.info(
            "Cancelled appointment created",
            extra={
                "appointment_id": resolved.appointment_id,
                "action": "cancelled_created",
                "reason": _synthesized_reason(resolved),
            },
        )
        return ReconcileResult(action="cancelled_created", appointment=appointment)

    def _book(self, resolved: ResolvedEvent) -> ReconcileResult:
        if resolved.start_synthesized or resolved.end_synthesized:
            self._logger.info(
                "Missing booking times; using fallback window",
                extra={"appointment_id": resolved.appointment_id, "reason": _synthesized_reason(resolved)},
            )

        action = "updated" if self._store.get(resolved.appointment_id) is not None else "created"
        appointment = _build(resolved, AppointmentStatus.active)
        self._store.upsert(appointment)
        self._logger.info(
            "Appointment stored",
            extra={"appointment_id": resolved.appointment_id, "action": action, "status": appointment.status.value},
        )
        return ReconcileResult(action=action, appointment=appointment)


def _build(resolved: ResolvedEvent, status: AppointmentStatus) -> Appointment:
    return Appointment(
        id=resolved.appointment_id,
        client_name=resolved.client_name,
        coach_name=resolved.coach_name,
        start_time=resolved.start_time,
        end_time=resolved.end_time,
        duration_minutes=duration_minutes(resolved.start_time, resolved.end_time),
        status=status,
    )


def _synthesized_reason(resolved: ResolvedEvent) -> str | None:
    missing = []
    if resolved.start_synthesized:
        missing.append("start_time")
    if resolved.end_synthesized:
        missing.append("end_time")
    return "missing_" + "+".join(missing) if missing else None
