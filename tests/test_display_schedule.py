"""
Tests for the ads/board rotation schedule.
"""

from __future__ import annotations

import pytest

from app.application.use_cases.display_schedule import ADS, BOARD, evaluate_display_mode


def test_ads_during_first_minutes_of_open_hours():
    """Minutes 0-6 of each opening hour show ads."""
    assert evaluate_display_mode(6, 0).mode == ADS
    assert evaluate_display_mode(12, 6).mode == ADS
    assert evaluate_display_mode(21, 3).mode == ADS


def test_board_for_rest_of_hour():
    assert evaluate_display_mode(6, 7).mode == BOARD
    assert evaluate_display_mode(12, 59).mode == BOARD


def test_board_outside_opening_hours():
    """Before 06:00 and from 22:00 the board is always shown."""
    for hour in (0, 3, 5, 22, 23):
        decision = evaluate_display_mode(hour, 0)
        assert decision.mode == BOARD
        assert decision.reason == "closed_hours"


def test_custom_window():
    assert evaluate_display_mode(5, 2, opening_hour=5, closing_hour=20, ads_minutes=3).mode == ADS
    assert evaluate_display_mode(5, 3, opening_hour=5, closing_hour=20, ads_minutes=3).mode == BOARD
    assert evaluate_display_mode(20, 0, opening_hour=5, closing_hour=20).mode == BOARD


def test_invalid_time_raises():
    with pytest.raises(ValueError):
        evaluate_display_mode(24, 0)
    with pytest.raises(ValueError):
        evaluate_display_mode(10, 60)
