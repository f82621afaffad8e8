"""
Tests for booking input validation.
"""

from __future__ import annotations

from datetime import datetime

from storefront.application.utils.booking_validation import (
    validate_booking_window,
    validate_date,
    validate_participants,
    validate_selection,
    validate_time,
)
from storefront.domain.entities.booking_selection import BookingSelection, ValidationErrors
from storefront.infrastructure.catalog.catalog_store import StaticCatalogStore
from tests.helpers import NEXT_FRIDAY, NEXT_MONDAY, NEXT_SUNDAY, NOW, TODAY, YESTERDAY


def test_validate_date():
    assert validate_date(None, TODAY) == "date required"
    assert validate_date(YESTERDAY, TODAY) == "must be a future date"
    assert validate_date(TODAY, TODAY) is None
    assert validate_date(NEXT_MONDAY, TODAY) is None


def test_validate_time():
    assert validate_time(None, NEXT_MONDAY, NOW) == "time required"
    assert validate_time("", NEXT_MONDAY, NOW) == "time required"
    assert validate_time("half past ten", NEXT_MONDAY, NOW) == "invalid time format"
    assert validate_time("10:00", NEXT_MONDAY, NOW) is None


def test_validate_time_rejects_past_instants_today():
    assert validate_time("11:00", TODAY, NOW) == "must be a future time"
    assert validate_time("11:30", TODAY, NOW) == "must be a future time"
    assert validate_time("12:00", TODAY, NOW) is None


def test_validate_participants_bounds():
    assert validate_participants(0) == "at least one participant required"
    assert validate_participants(-3) == "at least one participant required"
    assert validate_participants(1) is None
    assert validate_participants(10) is None
    assert validate_participants(11) == "maximum 10 participants"


def test_validate_participants_custom_maximum():
    assert validate_participants(7, max_participants=6) == "maximum 6 participants"


def test_booking_window_rejects_excluded_day(rules):
    assert validate_booking_window(NEXT_SUNDAY, "10:00", rules) == "no bookings available on Sunday"


def test_booking_window_uses_special_close_time(rules):
    """17:00 is inside Monday hours but after Friday's early close."""
    assert validate_booking_window(NEXT_MONDAY, "17:00", rules) is None
    assert validate_booking_window(NEXT_FRIDAY, "17:00", rules) == "time outside opening hours"
    assert validate_booking_window(NEXT_FRIDAY, "16:00", rules) == "time outside opening hours"
    assert validate_booking_window(NEXT_FRIDAY, "09:00", rules) == "time outside opening hours"


def test_validate_selection_collects_all_fields(rules):
    errors = validate_selection(BookingSelection(participants=0), rules, NOW)
    assert errors.as_dict() == {
        "date": "date required",
        "time": "time required",
        "participants": "at least one participant required",
    }
    assert not errors.is_valid


def test_validate_selection_valid(rules):
    offering = StaticCatalogStore().get_offering("juggling-lessons")
    selection = BookingSelection(offering=offering, date=NEXT_MONDAY, time="10:00", participants=2)
    errors = validate_selection(selection, rules, NOW)
    assert errors == ValidationErrors()
    assert errors.is_valid


def test_validate_selection_reports_closed_day_on_date(rules):
    selection = BookingSelection(date=NEXT_SUNDAY, time="10:00")
    errors = validate_selection(selection, rules, NOW)
    assert errors.date == "no bookings available on Sunday"
    assert errors.time is None


def test_validate_selection_reports_stale_time_on_time(rules):
    selection = BookingSelection(date=NEXT_FRIDAY, time="17:00")
    errors = validate_selection(selection, rules, NOW)
    assert errors.time == "time outside opening hours"
    assert errors.date is None


def test_validate_selection_uses_clock_for_today(rules):
    later = datetime(2026, 10, 19, 17, 30)
    errors = validate_selection(BookingSelection(date=TODAY, time="17:00"), rules, later)
    assert errors.time == "must be a future time"
