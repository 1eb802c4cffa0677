from __future__ import annotations

import json
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.application.dto.webhook_event import WebhookEventDTO
from app.application.use_cases.reconcile_appointment import ReconcileAppointmentUseCase
from app.wiring.dependencies import get_clock, get_reconcile_use_case


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/ghl-webhook")
async def ghl_webhook(
    request: Request,
    use_case: ReconcileAppointmentUseCase = Depends(get_reconcile_use_case),
    now: datetime = Depends(get_clock),
) -> JSONResponse:
    body = await request.body()

    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Failed to parse webhook body", extra={"reason": "invalid_json"})
        return JSONResponse({"success": False, "message": "Invalid JSON body"}, status_code=400)

    logger.debug("Webhook payload: %s", json.dumps(payload, ensure_ascii=False))

    if not isinstance(payload, dict):
        logger.warning("Webhook body is not an object", extra={"reason": "not_an_object"})
        return JSONResponse({"success": False, "message": "Body must be a JSON object"}, status_code=400)

    try:
        event = WebhookEventDTO.model_validate(payload)
    except ValidationError as e:
        logger.warning("Webhook payload has unusable shape", extra={"reason": "invalid_shape", "error": str(e)})
        return JSONResponse({"success": False, "message": "Unusable payload shape"}, status_code=400)

    try:
        result = use_case.execute(event, now)
    except Exception:
        logger.exception("Error in webhook handler; payload=%s", json.dumps(payload, ensure_ascii=False))
        return JSONResponse({"success": False, "error": "Server error in webhook"}, status_code=500)

    if not result.accepted:
        return JSONResponse({"success": False, "message": result.message})
    if result.is_cancellation:
        return JSONResponse({"success": True, "cancelled": True})
    return JSONResponse({"success": True})
