from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.api.schemas import (
    ChangeOfferingRequestSchema,
    FlowStateSchema,
    StartFlowRequestSchema,
    UpdateFlowRequestSchema,
)
from storefront.application.exceptions import BookingFlowBusyError
from storefront.application.use_cases.booking_flow import (
    ALREADY_SUBMITTING,
    NO_SERVICE_SELECTED,
    BookingFlowController,
)
from storefront.application.use_cases.flow_registry import BookingFlowRegistry
from storefront.application.utils.booking_validation import PARTICIPANTS_TOO_FEW
from storefront.wiring.dependencies import get_flow_registry

router = APIRouter(prefix="/booking")
logger = logging.getLogger(__name__)


def _get_flow(flow_id: str, registry: BookingFlowRegistry) -> BookingFlowController:
    flow = registry.get(flow_id)
    if flow is None:
        raise HTTPException(status_code=404, detail="Booking flow not found")
    return flow


@router.post("/flows", response_model=FlowStateSchema, status_code=201)
async def start_flow(
    req: StartFlowRequestSchema,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    flow = registry.start(req.offering_id)
    return FlowStateSchema.from_flow(flow)


@router.get("/flows/{flow_id}", response_model=FlowStateSchema)
async def get_flow(
    flow_id: str,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    return FlowStateSchema.from_flow(_get_flow(flow_id, registry))


@router.patch("/flows/{flow_id}", response_model=FlowStateSchema)
async def update_flow(
    flow_id: str,
    req: UpdateFlowRequestSchema,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    flow = _get_flow(flow_id, registry)
    if not flow.has_offering:
        raise HTTPException(status_code=400, detail=NO_SERVICE_SELECTED)

    fields = req.model_fields_set
    if "participants" in fields and req.participants is None:
        raise HTTPException(status_code=422, detail={"errors": {"participants": PARTICIPANTS_TOO_FEW}})
    try:
        # date first: it decides which times remain selectable
        if "date" in fields:
            flow.set_date(req.date)
        if "time" in fields:
            flow.set_time(req.time)
        if "participants" in fields:
            flow.set_participants(req.participants)
        if "note" in fields:
            flow.set_note(req.note)
    except BookingFlowBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return FlowStateSchema.from_flow(flow)


@router.put("/flows/{flow_id}/offering", response_model=FlowStateSchema)
async def change_offering(
    flow_id: str,
    req: ChangeOfferingRequestSchema,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    try:
        flow = registry.change_offering(flow_id, req.offering_id)
    except BookingFlowBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if flow is None:
        raise HTTPException(status_code=404, detail="Booking flow not found")
    return FlowStateSchema.from_flow(flow)


@router.post("/flows/{flow_id}/submit", response_model=FlowStateSchema)
async def submit_flow(
    flow_id: str,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    flow = _get_flow(flow_id, registry)
    result = await flow.submit()
    if result.accepted:
        return FlowStateSchema.from_flow(flow)

    if result.message == NO_SERVICE_SELECTED:
        raise HTTPException(status_code=400, detail=result.message)
    if result.message == ALREADY_SUBMITTING:
        raise HTTPException(status_code=409, detail=result.message)
    if result.message:
        # hand-off failure: the banner carries the message, the selection is kept
        raise HTTPException(status_code=502, detail=result.message)
    raise HTTPException(status_code=422, detail={"errors": result.errors.as_dict()})


@router.delete("/flows/{flow_id}/banner", response_model=FlowStateSchema)
async def dismiss_banner(
    flow_id: str,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    flow = _get_flow(flow_id, registry)
    flow.dismiss_banner()
    return FlowStateSchema.from_flow(flow)


@router.delete("/flows/{flow_id}", status_code=204)
async def discard_flow(
    flow_id: str,
    registry: BookingFlowRegistry = Depends(get_flow_registry),
):
    try:
        discarded = registry.discard(flow_id)
    except BookingFlowBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not discarded:
        raise HTTPException(status_code=404, detail="Booking flow not found")
    return Response(status_code=204)
