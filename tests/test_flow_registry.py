"""
Tests for the in-memory booking flow registry.
"""

from __future__ import annotations

import asyncio

import pytest

from storefront.application.exceptions import BookingFlowBusyError
from storefront.application.use_cases.flow_registry import BookingFlowRegistry
from storefront.domain.entities.booking_selection import FlowStatus
from tests.helpers import NEXT_MONDAY, fixed_clock


def make_registry(cart, catalog, rules, **options) -> BookingFlowRegistry:
    options.setdefault("submit_delay_seconds", 0)
    return BookingFlowRegistry(cart=cart, catalog=catalog, rules=rules, clock=fixed_clock, **options)


def test_unknown_offering_opens_empty_state(cart, catalog, rules):
    registry = make_registry(cart, catalog, rules)
    flow = registry.start("does-not-exist")
    assert not flow.has_offering
    assert registry.get(flow.flow_id) is flow


def test_discard_removes_flow(cart, catalog, rules):
    registry = make_registry(cart, catalog, rules)
    flow = registry.start("juggling-sets")

    assert registry.discard(flow.flow_id)
    assert registry.get(flow.flow_id) is None
    assert not registry.discard(flow.flow_id)
    assert len(registry) == 0


def test_oldest_flows_are_evicted_beyond_cap(cart, catalog, rules):
    registry = make_registry(cart, catalog, rules, max_flows=3)
    flows = [registry.start("juggling-sets") for _ in range(50)]

    assert len(registry) == 3
    assert registry.get(flows[0].flow_id) is None
    assert [registry.get(f.flow_id) for f in flows[-3:]] == flows[-3:]


def test_submitting_flow_is_neither_discarded_nor_evicted(cart, catalog, rules):
    registry = make_registry(cart, catalog, rules, max_flows=1, submit_delay_seconds=0.01)
    flow = registry.start("juggling-sets")
    flow.set_date(NEXT_MONDAY)
    flow.set_time("10:00")

    async def during_submit():
        task = asyncio.ensure_future(flow.submit())
        await asyncio.sleep(0)
        assert flow.status == FlowStatus.submitting
        with pytest.raises(BookingFlowBusyError):
            registry.discard(flow.flow_id)
        registry.start("art-workshops")
        assert registry.get(flow.flow_id) is flow
        return await task

    assert asyncio.run(during_submit()).accepted
