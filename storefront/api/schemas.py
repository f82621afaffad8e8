from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from storefront.application.ports.cart import CartPort
from storefront.application.use_cases.booking_flow import BookingFlowController, NO_SERVICE_SELECTED
from storefront.domain.entities.booking_record import BookingRecord
from storefront.domain.entities.cart import CartLine
from storefront.domain.entities.offering import Offering, Product, ServiceCategory


class OfferingSchema(BaseModel):
    id: str
    title: str
    description: str
    duration: str
    price: str

    @classmethod
    def from_entity(cls, offering: Offering) -> OfferingSchema:
        return cls(
            id=offering.id,
            title=offering.title,
            description=offering.description,
            duration=offering.duration,
            price=offering.price,
        )


class ServiceCategorySchema(BaseModel):
    id: str
    title: str
    description: str
    price: str
    offerings: list[OfferingSchema]

    @classmethod
    def from_entity(cls, category: ServiceCategory) -> ServiceCategorySchema:
        return cls(
            id=category.id,
            title=category.title,
            description=category.description,
            price=category.price,
            offerings=[OfferingSchema.from_entity(o) for o in category.offerings],
        )


class ProductSchema(BaseModel):
    id: str
    name: str
    price: int
    category: str
    description: str = ""
    image: str | None = None

    @classmethod
    def from_entity(cls, product: Product) -> ProductSchema:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            category=product.category,
            description=product.description,
            image=product.image,
        )


class StartFlowRequestSchema(BaseModel):
    offering_id: str | None = None


class ChangeOfferingRequestSchema(BaseModel):
    offering_id: str | None = None


class UpdateFlowRequestSchema(BaseModel):
    date: dt.date | None = None
    time: str | None = None
    participants: int | None = None
    note: str | None = None


class BookingDetailsSchema(BaseModel):
    offering_id: str
    date: str
    time: str
    participants: int
    note: str = ""


class BookingRecordSchema(BaseModel):
    id: str
    name: str
    description: str
    price: int
    booking_details: BookingDetailsSchema

    @classmethod
    def from_entity(cls, record: BookingRecord) -> BookingRecordSchema:
        details = record.booking_details
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            price=record.price,
            booking_details=BookingDetailsSchema(
                offering_id=details.offering_id,
                date=details.date,
                time=details.time,
                participants=details.participants,
                note=details.note,
            ),
        )


class BookingSummarySchema(BaseModel):
    offering_id: str
    title: str
    date: dt.date | None
    time: str | None
    participants: int
    base_price: int
    total_price: int


class FlowStateSchema(BaseModel):
    flow_id: str
    status: str  # FlowStatus value, or "no_service_selected"
    message: str | None = None
    offering: OfferingSchema | None = None
    date: dt.date | None = None
    time: str | None = None
    participants: int = 1
    note: str = ""
    available_slots: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    summary: BookingSummarySchema | None = None
    banner: str | None = None
    last_record: BookingRecordSchema | None = None

    @classmethod
    def from_flow(cls, flow: BookingFlowController) -> FlowStateSchema:
        selection = flow.selection
        summary = flow.summary
        if not flow.has_offering:
            return cls(
                flow_id=flow.flow_id,
                status="no_service_selected",
                message=NO_SERVICE_SELECTED,
                banner=flow.banner,
            )
        return cls(
            flow_id=flow.flow_id,
            status=flow.status.value,
            offering=OfferingSchema.from_entity(selection.offering),
            date=selection.date,
            time=selection.time,
            participants=selection.participants,
            note=selection.note,
            available_slots=flow.available_slots,
            errors=flow.errors.as_dict(),
            summary=BookingSummarySchema(**summary.__dict__) if summary else None,
            banner=flow.banner,
            last_record=BookingRecordSchema.from_entity(flow.last_record) if flow.last_record else None,
        )


class AddCartItemRequestSchema(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequestSchema(BaseModel):
    quantity: int


class CartLineSchema(BaseModel):
    id: str
    name: str
    price: int
    quantity: int
    item_type: str
    description: str = ""
    image: str | None = None
    booking_details: BookingDetailsSchema | None = None

    @classmethod
    def from_entity(cls, line: CartLine) -> CartLineSchema:
        details = line.booking_details
        return cls(
            id=line.id,
            name=line.name,
            price=line.price,
            quantity=line.quantity,
            item_type=line.item_type,
            description=line.description,
            image=line.image,
            booking_details=BookingDetailsSchema(**details.__dict__) if details else None,
        )


class CartSchema(BaseModel):
    items: list[CartLineSchema]
    item_count: int
    total: int

    @classmethod
    def from_cart(cls, cart: CartPort) -> CartSchema:
        return cls(
            items=[CartLineSchema.from_entity(line) for line in cart.get_items()],
            item_count=cart.item_count(),
            total=cart.total(),
        )
