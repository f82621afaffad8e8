from __future__ import annotations

from storefront.application.ports.catalog import CatalogPort
from storefront.domain.entities.offering import Offering, Product, ServiceCategory
from storefront.infrastructure.catalog.catalog_data import PRODUCTS, SERVICE_CATEGORIES


class StaticCatalogStore(CatalogPort):
    def __init__(
        self,
        categories: tuple[ServiceCategory, ...] | None = None,
        products: tuple[Product, ...] | None = None,
    ) -> None:
        self._categories = categories if categories is not None else SERVICE_CATEGORIES
        self._products = products if products is not None else PRODUCTS
        self._offerings = {
            offering.id: offering
            for category in self._categories
            for offering in category.offerings
        }

    def list_categories(self) -> list[ServiceCategory]:
        return list(self._categories)

    def list_offerings(self) -> list[Offering]:
        return list(self._offerings.values())

    def get_offering(self, offering_id: str) -> Offering | None:
        return self._offerings.get(offering_id.strip().lower())

    def list_products(self) -> list[Product]:
        return list(self._products)

    def get_product(self, product_id: str) -> Product | None:
        normalized_id = product_id.strip().lower()
        return next((p for p in self._products if p.id == normalized_id), None)
