from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingDetails:
    offering_id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    participants: int
    note: str = ""


@dataclass(frozen=True)
class BookingRecord:
    id: str
    name: str
    description: str
    price: int  # base price x participants
    booking_details: BookingDetails
