from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from storefront.domain.entities.offering import Offering


class FlowStatus(str, Enum):
    empty = "empty"
    partial = "partial"
    valid = "valid"
    submitting = "submitting"
    succeeded = "succeeded"


@dataclass(frozen=True)
class BookingSelection:
    offering: Offering | None = None
    date: date | None = None
    time: str | None = None  # HH:MM, one of the slots generated for ``date``
    participants: int = 1
    note: str = ""

    @property
    def is_empty(self) -> bool:
        """True when nothing beyond the offering context has been entered."""
        return (
            self.date is None
            and not self.time
            and self.participants == 1
            and not self.note
        )


@dataclass(frozen=True)
class ValidationErrors:
    date: str | None = None
    time: str | None = None
    participants: str | None = None

    @property
    def is_valid(self) -> bool:
        return not (self.date or self.time or self.participants)

    def as_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in (
                ("date", self.date),
                ("time", self.time),
                ("participants", self.participants),
            )
            if value
        }

    def only(self, fields: set[str]) -> ValidationErrors:
        """Keep the messages of ``fields``; other fields read as valid."""
        return ValidationErrors(
            date=self.date if "date" in fields else None,
            time=self.time if "time" in fields else None,
            participants=self.participants if "participants" in fields else None,
        )
