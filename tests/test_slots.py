"""
Tests for bookable time slot generation.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from storefront.application.utils.slots import generate_slots
from storefront.domain.entities.booking_rules import BookingRules
from tests.helpers import NEXT_FRIDAY, NEXT_MONDAY, NEXT_SUNDAY, NOW, TODAY


def test_regular_day_slots_stop_before_close(rules):
    """Monday runs hourly from opening up to, but not including, closing time."""
    slots = generate_slots(NEXT_MONDAY, rules, NOW)
    assert slots == ["10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00", "17:00"]


def test_unset_date_has_no_slots(rules):
    assert generate_slots(None, rules, NOW) == []


def test_excluded_days_have_no_slots(rules):
    """Every Sunday in the next few weeks is closed."""
    for week in range(6):
        assert generate_slots(NEXT_SUNDAY + timedelta(weeks=week), rules, NOW) == []


def test_special_days_close_early(rules):
    slots = generate_slots(NEXT_FRIDAY, rules, NOW)
    assert slots == ["10:00", "11:00", "12:00", "13:00", "14:00", "15:00"]
    assert all(slot < "16:00" for slot in slots)


def test_today_drops_past_slots(rules):
    """At 11:30 the 10:00 and 11:00 slots are gone."""
    slots = generate_slots(TODAY, rules, NOW)
    assert slots[0] == "12:00"
    assert all(datetime.combine(TODAY, datetime.strptime(s, "%H:%M").time()) > NOW for s in slots)


def test_today_drops_slot_starting_exactly_now(rules):
    now = datetime(2026, 10, 19, 12, 0)
    assert "12:00" not in generate_slots(TODAY, rules, now)
    assert generate_slots(TODAY, rules, now)[0] == "13:00"


def test_uneven_interval_never_emits_partial_slot():
    rules = BookingRules(
        open_time="10:00",
        close_time="12:00",
        special_day_close_time="11:00",
        slot_interval_minutes=45,
    )
    assert generate_slots(NEXT_MONDAY, rules, NOW) == ["10:00", "10:45", "11:30"]


def test_close_before_open_yields_nothing():
    rules = BookingRules(
        open_time="18:00",
        close_time="10:00",
        special_day_close_time="09:00",
        slot_interval_minutes=30,
    )
    assert generate_slots(NEXT_MONDAY, rules, NOW) == []


def test_excluded_takes_precedence_over_special():
    rules = BookingRules(
        open_time="10:00",
        close_time="18:00",
        special_day_close_time="16:00",
        slot_interval_minutes=60,
        excluded_days=frozenset({"Friday"}),
        special_days=frozenset({"Friday"}),
    )
    assert generate_slots(NEXT_FRIDAY, rules, NOW) == []


def test_each_call_returns_a_fresh_list(rules):
    first = generate_slots(NEXT_MONDAY, rules, NOW)
    first.clear()
    assert generate_slots(NEXT_MONDAY, rules, NOW) != []


def test_past_dates_are_not_filtered_by_clock(rules):
    """Only today's slots are clipped; a past date is rejected by validation instead."""
    assert generate_slots(date(2026, 10, 12), rules, NOW)[0] == "10:00"
