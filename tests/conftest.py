from __future__ import annotations

import pytest

from storefront.domain.entities.booking_rules import BookingRules
from storefront.infrastructure.cart.memory_cart import MemoryCart
from storefront.infrastructure.catalog.catalog_store import StaticCatalogStore


@pytest.fixture
def rules() -> BookingRules:
    return BookingRules(
        open_time="10:00",
        close_time="18:00",
        special_day_close_time="16:00",
        slot_interval_minutes=60,
        excluded_days=frozenset({"Sunday"}),
        special_days=frozenset({"Friday"}),
    )


@pytest.fixture
def cart() -> MemoryCart:
    return MemoryCart()


@pytest.fixture
def catalog() -> StaticCatalogStore:
    return StaticCatalogStore()
