from __future__ import annotations

from datetime import date, datetime, time

from storefront.domain.entities.booking_rules import BookingRules, weekday_name
from storefront.domain.entities.booking_selection import BookingSelection, ValidationErrors

DATE_REQUIRED = "date required"
DATE_IN_PAST = "must be a future date"
TIME_REQUIRED = "time required"
TIME_INVALID = "invalid time format"
TIME_IN_PAST = "must be a future time"
PARTICIPANTS_TOO_FEW = "at least one participant required"
OUTSIDE_OPENING_HOURS = "time outside opening hours"


def parse_slot_time(value: str) -> time | None:
    try:
        return time.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None


def validate_date(day: date | None, today: date | None = None) -> str | None:
    if day is None:
        return DATE_REQUIRED
    if today is None:
        today = date.today()
    if day < today:
        return DATE_IN_PAST
    return None


def validate_time(slot: str | None, day: date | None, now: datetime | None = None) -> str | None:
    if not slot:
        return TIME_REQUIRED
    parsed = parse_slot_time(slot)
    if parsed is None:
        return TIME_INVALID
    # Without a date the instant is unknown; validate_date reports that.
    if day is None:
        return None
    if now is None:
        now = datetime.now()
    if datetime.combine(day, parsed) <= now.replace(tzinfo=None):
        return TIME_IN_PAST
    return None


def validate_participants(count: int | None, max_participants: int = 10) -> str | None:
    if count is None or count < 1:
        return PARTICIPANTS_TOO_FEW
    if count > max_participants:
        return f"maximum {max_participants} participants"
    return None


def closed_day_message(day: date) -> str:
    return f"no bookings available on {weekday_name(day)}"


def validate_booking_window(day: date | None, slot: str | None, rules: BookingRules) -> str | None:
    """
    Re-derive the weekday rules for ``day`` and check that ``slot`` still falls inside them.
    Guards against a slot that went stale after the date or rules changed.
    """
    if day is None:
        return None
    if rules.is_excluded(day):
        return closed_day_message(day)
    parsed = parse_slot_time(slot) if slot else None
    if parsed is None:
        return None
    if parsed < rules.opening or parsed >= rules.closing_for(day):
        return OUTSIDE_OPENING_HOURS
    return None


def validate_selection(
    selection: BookingSelection,
    rules: BookingRules,
    now: datetime | None = None,
) -> ValidationErrors:
    if now is None:
        now = datetime.now()

    date_error = validate_date(selection.date, now.date())
    time_error = validate_time(selection.time, selection.date, now)
    window_error = validate_booking_window(selection.date, selection.time, rules)

    if window_error and selection.date is not None and rules.is_excluded(selection.date):
        date_error = date_error or window_error
    elif window_error:
        time_error = time_error or window_error

    return ValidationErrors(
        date=date_error,
        time=time_error,
        participants=validate_participants(selection.participants, rules.max_participants),
    )
