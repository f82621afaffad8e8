from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, time

from storefront.application.exceptions import BookingRulesError

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

logger = logging.getLogger(__name__)


def weekday_name(day: date) -> str:
    """Locale-independent English weekday name for a date."""
    return WEEKDAYS[day.weekday()]


def parse_clock(value: str) -> time:
    """Parse a wall-clock "HH:MM" string."""
    try:
        parsed = time.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise BookingRulesError(f"Invalid wall-clock time: {value!r}") from e
    return parsed.replace(second=0, microsecond=0)


def _normalize_days(days) -> frozenset[str]:
    normalized = set()
    for day in days:
        name = str(day).strip().title()
        if name not in WEEKDAYS:
            raise BookingRulesError(f"Unknown weekday: {day!r}")
        normalized.add(name)
    return frozenset(normalized)


@dataclass(frozen=True)
class BookingRules:
    open_time: str
    close_time: str
    special_day_close_time: str
    slot_interval_minutes: int
    excluded_days: frozenset[str] = field(default_factory=frozenset)
    special_days: frozenset[str] = field(default_factory=frozenset)
    max_participants: int = 10

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "excluded_days", _normalize_days(self.excluded_days))
        object.__setattr__(self, "special_days", _normalize_days(self.special_days))

        if self.slot_interval_minutes <= 0:
            raise BookingRulesError("slot_interval_minutes must be positive")
        if self.max_participants < 1:
            raise BookingRulesError("max_participants must be at least 1")

        opening = parse_clock(self.open_time)
        if opening >= parse_clock(self.close_time):
            logger.warning(
                "Booking rules close before they open",
                extra={"reason": f"{self.open_time} >= {self.close_time}"},
            )
        if opening >= parse_clock(self.special_day_close_time):
            logger.warning(
                "Booking rules special day closes before opening",
                extra={"reason": f"{self.open_time} >= {self.special_day_close_time}"},
            )
        overlap = self.excluded_days & self.special_days
        if overlap:
            logger.warning(
                "Days listed as both excluded and special are treated as excluded",
                extra={"reason": ", ".join(sorted(overlap))},
            )

    @classmethod
    def from_settings(cls, settings) -> BookingRules:
        return cls(
            open_time=settings.BOOKING_OPEN_TIME,
            close_time=settings.BOOKING_CLOSE_TIME,
            special_day_close_time=settings.BOOKING_SPECIAL_DAY_CLOSE_TIME,
            slot_interval_minutes=settings.BOOKING_SLOT_INTERVAL_MINUTES,
            excluded_days=frozenset(settings.BOOKING_EXCLUDED_DAYS),
            special_days=frozenset(settings.BOOKING_SPECIAL_DAYS),
            max_participants=settings.BOOKING_MAX_PARTICIPANTS,
        )

    @property
    def opening(self) -> time:
        return parse_clock(self.open_time)

    def is_excluded(self, day: date) -> bool:
        return weekday_name(day) in self.excluded_days

    def closing_for(self, day: date) -> time:
        """Close time for the weekday of ``day``; special days close early."""
        if weekday_name(day) in self.special_days:
            return parse_clock(self.special_day_close_time)
        return parse_clock(self.close_time)
