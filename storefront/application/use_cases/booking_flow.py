from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime
from uuid import uuid4

from storefront.application.exceptions import BookingFlowBusyError
from storefront.application.ports.cart import CartPort
from storefront.application.utils.booking_records import build_booking_record
from storefront.application.utils.booking_validation import validate_selection
from storefront.application.utils.price import DEFAULT_PRICE_FALLBACK, extract_price
from storefront.application.utils.slots import generate_slots
from storefront.domain.entities.booking_record import BookingRecord
from storefront.domain.entities.booking_rules import BookingRules
from storefront.domain.entities.booking_selection import (
    BookingSelection,
    FlowStatus,
    ValidationErrors,
)
from storefront.domain.entities.offering import Offering

NO_SERVICE_SELECTED = "No service selected. Please choose a service before booking."
SUBMISSION_FAILED = "We couldn't complete your booking. Please try again."
ALREADY_SUBMITTING = "A booking is already being submitted."
SLOT_UNAVAILABLE = "selected time is no longer available"

ALL_FIELDS = frozenset({"date", "time", "participants"})


def new_booking_id() -> str:
    return f"booking-{uuid4().hex[:12]}"


@dataclass(frozen=True)
class BookingSummary:
    offering_id: str
    title: str
    date: date | None
    time: str | None
    participants: int
    base_price: int
    total_price: int


@dataclass(frozen=True)
class SubmissionResult:
    accepted: bool
    record: BookingRecord | None
    errors: ValidationErrors
    message: str | None = None


class BookingFlowController:
    """
    Drives one user's booking selection: recomputes slots on date changes,
    live-validates every edit and turns a valid selection into a cart record.
    """

    def __init__(
        self,
        cart: CartPort,
        rules: BookingRules,
        offering: Offering | None = None,
        submit_delay_seconds: float = 1.0,
        price_fallback: int = DEFAULT_PRICE_FALLBACK,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = new_booking_id,
        flow_id: str | None = None,
    ) -> None:
        self._cart = cart
        self._rules = rules
        self._submit_delay_seconds = submit_delay_seconds
        self._price_fallback = price_fallback
        self._clock = clock
        self._id_factory = id_factory
        self.flow_id = flow_id or uuid4().hex
        self._logger = logging.getLogger(__name__)

        self._selection = BookingSelection(offering=offering)
        self._base_price = self._price_of(offering)
        self._touched: set[str] = set()
        self._errors = ValidationErrors()
        self._available_slots: list[str] = []
        self._submitting = False
        self._succeeded = False
        self._banner: str | None = None
        self._last_record: BookingRecord | None = None
        self._revalidate()

    @property
    def selection(self) -> BookingSelection:
        return self._selection

    @property
    def has_offering(self) -> bool:
        return self._selection.offering is not None

    @property
    def errors(self) -> ValidationErrors:
        """Live errors, limited to fields the user has touched."""
        return self._errors.only(self._touched)

    @property
    def available_slots(self) -> list[str]:
        return list(self._available_slots)

    @property
    def banner(self) -> str | None:
        return self._banner

    @property
    def last_record(self) -> BookingRecord | None:
        return self._last_record

    @property
    def status(self) -> FlowStatus:
        if self._submitting:
            return FlowStatus.submitting
        if self._succeeded:
            return FlowStatus.succeeded
        if self._selection.is_empty:
            return FlowStatus.empty
        if self.has_offering and self._selection.time and self._errors.is_valid:
            return FlowStatus.valid
        return FlowStatus.partial

    @property
    def summary(self) -> BookingSummary | None:
        offering = self._selection.offering
        if offering is None:
            return None
        base_price = self._base_price
        return BookingSummary(
            offering_id=offering.id,
            title=offering.title,
            date=self._selection.date,
            time=self._selection.time,
            participants=self._selection.participants,
            base_price=base_price,
            total_price=base_price * max(self._selection.participants, 0),
        )

    def select_offering(self, offering: Offering | None) -> None:
        """Switch service context; the whole selection starts over."""
        self._ensure_editable()
        self._selection = BookingSelection(offering=offering)
        self._base_price = self._price_of(offering)
        self._touched.clear()
        self._succeeded = False
        self._banner = None
        self._revalidate()
        self._logger.info(
            "Booking flow offering selected",
            extra={"flow_id": self.flow_id, "offering_id": offering.id if offering else None},
        )

    def set_date(self, day: date | None) -> None:
        self._ensure_editable()
        self._touched.add("date")
        selected_time = self._selection.time
        if selected_time and selected_time not in generate_slots(day, self._rules, self._clock()):
            selected_time = None
        self._update(date=day, time=selected_time)

    def set_time(self, slot: str | None) -> None:
        self._ensure_editable()
        self._touched.add("time")
        self._update(time=slot or None)

    def set_participants(self, count: int) -> None:
        self._ensure_editable()
        self._touched.add("participants")
        self._update(participants=count)

    def set_note(self, note: str | None) -> None:
        self._ensure_editable()
        self._update(note=note or "")

    def dismiss_banner(self) -> None:
        self._banner = None

    async def submit(self) -> SubmissionResult:
        if self._submitting:
            self._logger.info("Ignoring submit while submitting", extra={"flow_id": self.flow_id})
            return SubmissionResult(
                accepted=False,
                record=None,
                errors=self.errors,
                message=ALREADY_SUBMITTING,
            )

        if not self.has_offering:
            self._logger.info(
                "Submit refused",
                extra={"flow_id": self.flow_id, "reason": "no_service_selected"},
            )
            return SubmissionResult(
                accepted=False,
                record=None,
                errors=self.errors,
                message=NO_SERVICE_SELECTED,
            )

        self._touched.update(ALL_FIELDS)
        self._revalidate()
        if not self._errors.is_valid or not self._selection.time:
            self._logger.info(
                "Submit blocked by validation",
                extra={"flow_id": self.flow_id, "reason": ",".join(self._errors.as_dict())},
            )
            return SubmissionResult(accepted=False, record=None, errors=self._errors)

        self._submitting = True
        self._banner = None
        selection = self._selection
        try:
            await asyncio.sleep(self._submit_delay_seconds)
            record = build_booking_record(selection, self._id_factory(), self._price_fallback)
            self._cart.add_item(record)
        except Exception as e:
            self._logger.error(
                "Error submitting booking",
                extra={"flow_id": self.flow_id, "error": str(e)},
            )
            self._banner = SUBMISSION_FAILED
            return SubmissionResult(
                accepted=False,
                record=None,
                errors=self._errors,
                message=SUBMISSION_FAILED,
            )
        finally:
            self._submitting = False

        self._last_record = record
        self._selection = BookingSelection(offering=selection.offering)
        self._touched.clear()
        self._revalidate()
        self._succeeded = True
        self._logger.info(
            "Booking added to cart",
            extra={"flow_id": self.flow_id, "item_id": record.id, "offering_id": record.booking_details.offering_id},
        )
        return SubmissionResult(accepted=True, record=record, errors=ValidationErrors())

    def _price_of(self, offering: Offering | None) -> int | None:
        # parsed once per offering so a malformed label warns once, not on every read
        if offering is None:
            return None
        return extract_price(offering.price, self._price_fallback)

    def _ensure_editable(self) -> None:
        if self._submitting:
            raise BookingFlowBusyError("Booking is being submitted; edits are disabled")

    def _update(self, **changes) -> None:
        self._selection = replace(self._selection, **changes)
        self._succeeded = False
        self._revalidate()

    def _revalidate(self) -> None:
        now = self._clock()
        self._available_slots = generate_slots(self._selection.date, self._rules, now)
        errors = validate_selection(self._selection, self._rules, now)
        slot = self._selection.time
        if slot and not errors.time and not errors.date and slot not in self._available_slots:
            errors = replace(errors, time=SLOT_UNAVAILABLE)
        self._errors = errors
