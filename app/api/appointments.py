from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from app.application.use_cases.display_schedule import evaluate_display_mode
from app.application.use_cases.upcoming_appointments import UpcomingAppointmentsUseCase
from app.core.config import settings
from app.wiring.dependencies import get_clock, get_upcoming_use_case


router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.get("/appointments")
async def list_appointments(
    limit: int | None = Query(None, ge=1),
    use_case: UpcomingAppointmentsUseCase = Depends(get_upcoming_use_case),
    now: datetime = Depends(get_clock),
) -> list[dict[str, Any]]:
    upcoming = use_case.execute(now, limit=limit)
    logger.debug("Serving upcoming appointments", extra={"count": len(upcoming)})
    return [appointment.to_dict() for appointment in upcoming]


@router.get("/display-mode")
async def display_mode(
    hour: int | None = Query(None, ge=0, le=23),
    minute: int | None = Query(None, ge=0, le=59),
) -> dict[str, str]:
    # the TV page sends its own local time; fall back to the server's
    local = datetime.now()
    try:
        decision = evaluate_display_mode(
            hour if hour is not None else local.hour,
            minute if minute is not None else local.minute,
            opening_hour=settings.OPENING_HOUR,
            closing_hour=settings.CLOSING_HOUR,
            ads_minutes=settings.ADS_MINUTES_PER_HOUR,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"mode": decision.mode, "reason": decision.reason}
