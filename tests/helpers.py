from __future__ import annotations

from datetime import date, datetime

# Monday 19 October 2026, late morning
NOW = datetime(2026, 10, 19, 11, 30)
TODAY = NOW.date()
NEXT_MONDAY = date(2026, 10, 26)
NEXT_FRIDAY = date(2026, 10, 23)
NEXT_SUNDAY = date(2026, 10, 25)
YESTERDAY = date(2026, 10, 18)


def fixed_clock() -> datetime:
    return NOW
