from fastapi import APIRouter, Depends

from storefront.api.schemas import ProductSchema, ServiceCategorySchema
from storefront.application.ports.catalog import CatalogPort
from storefront.wiring.dependencies import get_catalog

router = APIRouter(prefix="/catalog")


@router.get("/services", response_model=list[ServiceCategorySchema])
def list_services(catalog: CatalogPort = Depends(get_catalog)):
    return [ServiceCategorySchema.from_entity(c) for c in catalog.list_categories()]


@router.get("/products", response_model=list[ProductSchema])
def list_products(catalog: CatalogPort = Depends(get_catalog)):
    return [ProductSchema.from_entity(p) for p in catalog.list_products()]
