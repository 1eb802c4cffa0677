#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
from httpx import ConnectError


def build_payload(
    appointment_id: str,
    client: str,
    coach: str,
    start_in_minutes: int,
    duration: int,
    cancel: bool,
) -> dict[str, Any]:
    start = datetime.now(timezone.utc) + timedelta(minutes=start_in_minutes)
    end = start + timedelta(minutes=duration)
    payload: dict[str, Any] = {
        "contact_id": f"contact_{appointment_id}",
        "full_name": client,
        "customData": {
            "appointmentId": appointment_id,
            "clientName": client,
            "coachName": coach,
            "isCancelled": "true" if cancel else "false",
        },
        "user": {"firstName": coach},
    }
    if not cancel:
        payload["calendar"] = {
            "appointmentId": appointment_id,
            "startTime": start.isoformat(),
            "endTime": end.isoformat(),
        }
    return payload


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a test GHL appointment webhook POST")
    parser.add_argument("--base-url", default="http://127.0.0.1:10000")
    parser.add_argument("--id", default="appt_123")
    parser.add_argument("--client", default="Test Client")
    parser.add_argument("--coach", default="Mads")
    parser.add_argument("--start-in", type=int, default=60, help="Minutes from now")
    parser.add_argument("--duration", type=int, default=45)
    parser.add_argument("--cancel", action="store_true")
    args = parser.parse_args()

    payload = build_payload(args.id, args.client, args.coach, args.start_in, args.duration, args.cancel)

    try:
        resp = httpx.post(f"{args.base_url}/ghl-webhook", json=payload, timeout=10.0)
        listing = httpx.get(f"{args.base_url}/api/appointments", timeout=10.0)
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn app.main:app --reload --port 10000")
        return

    print(resp.status_code)
    if resp.text:
        print(resp.text)
    print(json.dumps(listing.json(), indent=2))


if __name__ == "__main__":
    main()
