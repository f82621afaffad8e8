"""
Tests for the booking rule table.
"""

from __future__ import annotations

from datetime import time

import pytest

from storefront.application.exceptions import BookingRulesError
from storefront.core.config import Settings
from storefront.domain.entities.booking_rules import BookingRules, weekday_name
from tests.helpers import NEXT_FRIDAY, NEXT_MONDAY, NEXT_SUNDAY


def test_weekday_names_are_normalised():
    rules = BookingRules(
        open_time="09:00",
        close_time="17:00",
        special_day_close_time="13:00",
        slot_interval_minutes=30,
        excluded_days=frozenset({"sunday", " SATURDAY "}),
        special_days=frozenset({"friday"}),
    )
    assert rules.excluded_days == frozenset({"Sunday", "Saturday"})
    assert rules.special_days == frozenset({"Friday"})


def test_unknown_weekday_rejected():
    with pytest.raises(BookingRulesError):
        BookingRules("10:00", "18:00", "16:00", 60, excluded_days=frozenset({"Funday"}))


def test_invalid_interval_rejected():
    with pytest.raises(BookingRulesError):
        BookingRules("10:00", "18:00", "16:00", 0)


def test_invalid_clock_rejected():
    with pytest.raises(BookingRulesError):
        BookingRules("ten", "18:00", "16:00", 60)


def test_closing_for_weekday(rules):
    assert weekday_name(NEXT_MONDAY) == "Monday"
    assert rules.closing_for(NEXT_MONDAY) == time(18, 0)
    assert rules.closing_for(NEXT_FRIDAY) == time(16, 0)
    assert rules.is_excluded(NEXT_SUNDAY)
    assert not rules.is_excluded(NEXT_MONDAY)


def test_rules_from_settings():
    settings = Settings(
        BOOKING_OPEN_TIME="09:00",
        BOOKING_CLOSE_TIME="17:00",
        BOOKING_SPECIAL_DAY_CLOSE_TIME="14:00",
        BOOKING_SLOT_INTERVAL_MINUTES=30,
        BOOKING_EXCLUDED_DAYS=["Sunday", "Monday"],
        BOOKING_SPECIAL_DAYS=["Saturday"],
        BOOKING_MAX_PARTICIPANTS=6,
    )
    rules = BookingRules.from_settings(settings)
    assert rules.open_time == "09:00"
    assert rules.slot_interval_minutes == 30
    assert rules.excluded_days == frozenset({"Sunday", "Monday"})
    assert rules.special_days == frozenset({"Saturday"})
    assert rules.max_participants == 6
