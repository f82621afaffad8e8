from __future__ import annotations

from datetime import date, datetime, timedelta

from storefront.domain.entities.booking_rules import BookingRules


def generate_slots(
    day: date | None,
    rules: BookingRules,
    now: datetime | None = None,
) -> list[str]:
    """Bookable HH:MM start times for ``day``; past slots are dropped when ``day`` is today."""
    if day is None or rules.is_excluded(day):
        return []

    current = datetime.combine(day, rules.opening)
    closing = datetime.combine(day, rules.closing_for(day))
    step = timedelta(minutes=rules.slot_interval_minutes)

    if now is None:
        now = datetime.now()
    cutoff = now.replace(tzinfo=None) if day == now.date() else None

    slots: list[str] = []
    while current < closing:
        if cutoff is None or current > cutoff:
            slots.append(current.strftime("%H:%M"))
        current += step

    return slots
