from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.entities.booking_record import BookingRecord
from storefront.domain.entities.cart import CartLine
from storefront.domain.entities.offering import Product


class CartPort(ABC):
    @abstractmethod
    def add_item(self, item: BookingRecord | Product, quantity: int = 1) -> CartLine:
        """Add item to cart. An existing line with the same id gains ``quantity``."""
        raise NotImplementedError

    @abstractmethod
    def remove_item(self, item_id: str) -> None:
        """Remove the line for ``item_id``. Raises CartItemNotFoundError if absent."""
        raise NotImplementedError

    @abstractmethod
    def update_quantity(self, item_id: str, quantity: int) -> CartLine | None:
        """Set line quantity. A quantity of zero or less removes the line."""
        raise NotImplementedError

    @abstractmethod
    def get_item(self, item_id: str) -> CartLine | None:
        raise NotImplementedError

    @abstractmethod
    def get_items(self) -> list[CartLine]:
        """Lines in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def total(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def item_count(self) -> int:
        """Sum of quantities across all lines."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
