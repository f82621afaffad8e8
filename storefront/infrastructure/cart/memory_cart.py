from __future__ import annotations

import logging
import threading
from dataclasses import replace

from storefront.application.exceptions import CartItemNotFoundError
from storefront.application.ports.cart import CartPort
from storefront.domain.entities.booking_record import BookingRecord
from storefront.domain.entities.cart import CartLine
from storefront.domain.entities.offering import Product


class MemoryCart(CartPort):
    def __init__(self) -> None:
        # dicts keep insertion order, which is the display order of the cart
        self._lines: dict[str, CartLine] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def add_item(self, item: BookingRecord | Product, quantity: int = 1) -> CartLine:
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        with self._lock:
            existing = self._lines.get(item.id)
            if existing is not None:
                line = replace(existing, quantity=existing.quantity + quantity)
            else:
                line = _to_line(item, quantity)
            self._lines[item.id] = line
        self._logger.info(
            "Cart item added",
            extra={"item_id": line.id, "reason": f"quantity={line.quantity}"},
        )
        return line

    def remove_item(self, item_id: str) -> None:
        with self._lock:
            if item_id not in self._lines:
                raise CartItemNotFoundError(item_id)
            del self._lines[item_id]
        self._logger.info("Cart item removed", extra={"item_id": item_id})

    def update_quantity(self, item_id: str, quantity: int) -> CartLine | None:
        with self._lock:
            existing = self._lines.get(item_id)
            if existing is None:
                raise CartItemNotFoundError(item_id)
            if quantity <= 0:
                del self._lines[item_id]
                return None
            line = replace(existing, quantity=quantity)
            self._lines[item_id] = line
            return line

    def get_item(self, item_id: str) -> CartLine | None:
        with self._lock:
            return self._lines.get(item_id)

    def get_items(self) -> list[CartLine]:
        with self._lock:
            return list(self._lines.values())

    def total(self) -> int:
        return sum(line.subtotal for line in self.get_items())

    def item_count(self) -> int:
        return sum(line.quantity for line in self.get_items())

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()


def _to_line(item: BookingRecord | Product, quantity: int) -> CartLine:
    if isinstance(item, BookingRecord):
        return CartLine(
            id=item.id,
            name=item.name,
            price=item.price,
            quantity=quantity,
            item_type="booking",
            description=item.description,
            booking_details=item.booking_details,
        )
    return CartLine(
        id=item.id,
        name=item.name,
        price=item.price,
        quantity=quantity,
        item_type="product",
        description=item.description,
        image=item.image,
    )
