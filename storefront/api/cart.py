from fastapi import APIRouter, Depends, HTTPException

from storefront.api.schemas import AddCartItemRequestSchema, CartSchema, UpdateCartItemRequestSchema
from storefront.application.exceptions import CartItemNotFoundError
from storefront.application.ports.cart import CartPort
from storefront.application.ports.catalog import CatalogPort
from storefront.wiring.dependencies import get_cart, get_catalog

router = APIRouter(prefix="/cart")


@router.get("", response_model=CartSchema)
def get_cart_contents(cart: CartPort = Depends(get_cart)):
    return CartSchema.from_cart(cart)


@router.post("/items", response_model=CartSchema, status_code=201)
def add_product(
    req: AddCartItemRequestSchema,
    cart: CartPort = Depends(get_cart),
    catalog: CatalogPort = Depends(get_catalog),
):
    product = catalog.get_product(req.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    cart.add_item(product, req.quantity)
    return CartSchema.from_cart(cart)


@router.patch("/items/{item_id}", response_model=CartSchema)
def update_item(
    item_id: str,
    req: UpdateCartItemRequestSchema,
    cart: CartPort = Depends(get_cart),
):
    try:
        cart.update_quantity(item_id, req.quantity)
    except CartItemNotFoundError:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return CartSchema.from_cart(cart)


@router.delete("/items/{item_id}", response_model=CartSchema)
def remove_item(item_id: str, cart: CartPort = Depends(get_cart)):
    try:
        cart.remove_item(item_id)
    except CartItemNotFoundError:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return CartSchema.from_cart(cart)
