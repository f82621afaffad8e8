from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.entities.offering import Offering, Product, ServiceCategory


class CatalogPort(ABC):
    @abstractmethod
    def list_categories(self) -> list[ServiceCategory]:
        """Service categories in display order."""
        raise NotImplementedError

    @abstractmethod
    def list_offerings(self) -> list[Offering]:
        """All bookable offerings, flattened in category order."""
        raise NotImplementedError

    @abstractmethod
    def get_offering(self, offering_id: str) -> Offering | None:
        raise NotImplementedError

    @abstractmethod
    def list_products(self) -> list[Product]:
        raise NotImplementedError

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        raise NotImplementedError
