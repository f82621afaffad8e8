from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.entities.booking_record import BookingDetails


@dataclass(frozen=True)
class CartLine:
    id: str
    name: str
    price: int
    quantity: int
    item_type: str  # "product" or "booking"
    description: str = ""
    image: str | None = None
    booking_details: BookingDetails | None = None

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity
