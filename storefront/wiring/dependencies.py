from functools import lru_cache

from storefront.application.ports.cart import CartPort
from storefront.application.ports.catalog import CatalogPort
from storefront.application.use_cases.flow_registry import BookingFlowRegistry
from storefront.core.config import settings
from storefront.domain.entities.booking_rules import BookingRules
from storefront.infrastructure.cart.memory_cart import MemoryCart
from storefront.infrastructure.catalog.catalog_store import StaticCatalogStore


@lru_cache
def get_booking_rules() -> BookingRules:
    return BookingRules.from_settings(settings)


@lru_cache
def get_cart() -> CartPort:
    return MemoryCart()


@lru_cache
def get_catalog() -> CatalogPort:
    return StaticCatalogStore()


@lru_cache
def get_flow_registry() -> BookingFlowRegistry:
    return BookingFlowRegistry(
        cart=get_cart(),
        catalog=get_catalog(),
        rules=get_booking_rules(),
        submit_delay_seconds=settings.BOOKING_SUBMIT_DELAY_SECONDS,
        price_fallback=settings.BOOKING_PRICE_FALLBACK,
        max_flows=settings.BOOKING_MAX_FLOWS,
    )
