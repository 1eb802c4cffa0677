from __future__ import annotations

from dataclasses import dataclass

ADS = "ads"
BOARD = "board"


@dataclass(frozen=True)
class DisplayDecision:
    mode: str
    reason: str


def evaluate_display_mode(
    hour: int,
    minute: int,
    opening_hour: int = 6,
    closing_hour: int = 22,
    ads_minutes: int = 7,
) -> DisplayDecision:
    """Ads run for the first `ads_minutes` of every hour while open; the board otherwise."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be 0-23, got {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute must be 0-59, got {minute}")

    if not opening_hour <= hour < closing_hour:
        return DisplayDecision(BOARD, "closed_hours")
    if minute < ads_minutes:
        return DisplayDecision(ADS, "ads_slot")
    return DisplayDecision(BOARD, "board_slot")
