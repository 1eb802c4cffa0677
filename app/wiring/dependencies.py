from datetime import datetime

from fastapi import Depends

from app.application.ports.appointment_store import AppointmentStorePort
from app.application.use_cases.reconcile_appointment import ReconcileAppointmentUseCase
from app.application.use_cases.upcoming_appointments import UpcomingAppointmentsUseCase
from app.application.utils.time_utils import utc_now
from app.core.config import settings
from app.infrastructure.store.memory_store import MemoryAppointmentStore


_appointment_store: MemoryAppointmentStore | None = None


def get_appointment_store() -> AppointmentStorePort:
    global _appointment_store
    if _appointment_store is None:
        _appointment_store = MemoryAppointmentStore(max_size=settings.STORE_MAX_APPOINTMENTS)
    return _appointment_store


def get_clock() -> datetime:
    return utc_now()


def get_reconcile_use_case(
    store: AppointmentStorePort = Depends(get_appointment_store),
) -> ReconcileAppointmentUseCase:
    return ReconcileAppointmentUseCase(
        store=store,
        default_duration_minutes=settings.DEFAULT_DURATION_MINUTES,
    )


def get_upcoming_use_case(
    store: AppointmentStorePort = Depends(get_appointment_store),
) -> UpcomingAppointmentsUseCase:
    return UpcomingAppointmentsUseCase(store=store, default_limit=settings.UPCOMING_LIMIT)
