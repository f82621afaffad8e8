from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.application.exceptions import BookingFlowBusyError
from storefront.application.ports.cart import CartPort
from storefront.application.ports.catalog import CatalogPort
from storefront.application.use_cases.booking_flow import BookingFlowController
from storefront.domain.entities.booking_rules import BookingRules
from storefront.domain.entities.booking_selection import FlowStatus

DEFAULT_MAX_FLOWS = 500


class BookingFlowRegistry:
    """
    In-memory flows keyed by id. Flows never share a selection; all share one cart.
    At most ``max_flows`` are kept; the oldest idle flow is evicted to make room.
    """

    def __init__(
        self,
        cart: CartPort,
        catalog: CatalogPort,
        rules: BookingRules,
        controller_factory: Callable[..., BookingFlowController] = BookingFlowController,
        max_flows: int = DEFAULT_MAX_FLOWS,
        **controller_options,
    ) -> None:
        self._cart = cart
        self._catalog = catalog
        self._rules = rules
        self._controller_factory = controller_factory
        self._max_flows = max(max_flows, 1)
        self._controller_options = controller_options
        # insertion order doubles as age order for eviction
        self._flows: dict[str, BookingFlowController] = {}
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._flows)

    def start(self, offering_id: str | None) -> BookingFlowController:
        """
        Open a flow for ``offering_id``. A missing or unknown id opens the flow
        in the "no service selected" state instead of picking a default service.
        """
        offering = self._catalog.get_offering(offering_id) if offering_id else None
        if offering_id and offering is None:
            self._logger.warning(
                "Unknown offering requested for booking",
                extra={"offering_id": offering_id, "reason": "no_service_selected"},
            )
        self._make_room()
        flow = self._controller_factory(
            cart=self._cart,
            rules=self._rules,
            offering=offering,
            **self._controller_options,
        )
        self._flows[flow.flow_id] = flow
        self._logger.info(
            "Booking flow started",
            extra={"flow_id": flow.flow_id, "offering_id": offering.id if offering else None},
        )
        return flow

    def get(self, flow_id: str) -> BookingFlowController | None:
        return self._flows.get(flow_id)

    def change_offering(self, flow_id: str, offering_id: str | None) -> BookingFlowController | None:
        flow = self.get(flow_id)
        if flow is None:
            return None
        offering = self._catalog.get_offering(offering_id) if offering_id else None
        flow.select_offering(offering)
        return flow

    def discard(self, flow_id: str) -> bool:
        """Drop a flow. Raises BookingFlowBusyError while its submission is pending."""
        flow = self._flows.get(flow_id)
        if flow is None:
            return False
        if flow.status == FlowStatus.submitting:
            raise BookingFlowBusyError("Booking is being submitted; the flow cannot be discarded")
        del self._flows[flow_id]
        self._logger.info("Booking flow discarded", extra={"flow_id": flow_id, "status": flow.status.value})
        return True

    def _make_room(self) -> None:
        while len(self._flows) >= self._max_flows:
            idle = next(
                (fid for fid, flow in self._flows.items() if flow.status != FlowStatus.submitting),
                None,
            )
            if idle is None:
                # every retained flow is mid-submit; let the map grow until one finishes
                return
            evicted = self._flows.pop(idle)
            self._logger.info(
                "Booking flow evicted",
                extra={"flow_id": idle, "status": evicted.status.value, "reason": f"max_flows={self._max_flows}"},
            )
