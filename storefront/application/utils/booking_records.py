from __future__ import annotations

from storefront.application.exceptions import NoServiceSelectedError
from storefront.application.utils.price import DEFAULT_PRICE_FALLBACK, extract_price
from storefront.domain.entities.booking_record import BookingDetails, BookingRecord
from storefront.domain.entities.booking_selection import BookingSelection


def describe_booking(selection: BookingSelection) -> str:
    participants = selection.participants
    people = "participant" if participants == 1 else "participants"
    description = f"{selection.date:%A, %B %d, %Y} at {selection.time} for {participants} {people}"
    if selection.note.strip():
        description += f" - Note: {selection.note.strip()}"
    return description


def build_booking_record(
    selection: BookingSelection,
    record_id: str,
    price_fallback: int = DEFAULT_PRICE_FALLBACK,
) -> BookingRecord:
    """Assemble the cart-ready record for a validated selection."""
    offering = selection.offering
    if offering is None:
        raise NoServiceSelectedError("Cannot build a booking without an offering")
    if selection.date is None or not selection.time:
        raise ValueError("Booking date and time are required")

    base_price = extract_price(offering.price, price_fallback)
    return BookingRecord(
        id=record_id,
        name=offering.title,
        description=describe_booking(selection),
        price=base_price * selection.participants,
        booking_details=BookingDetails(
            offering_id=offering.id,
            date=selection.date.isoformat(),
            time=selection.time,
            participants=selection.participants,
            note=selection.note,
        ),
    )
