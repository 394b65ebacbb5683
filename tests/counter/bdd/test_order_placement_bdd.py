"""BDD tests for order placement."""

from unittest.mock import patch

from counter.api.schemas import PlaceOrderItem, PlaceOrderRequest
from counter.catalog import CatalogUnavailable
from counter.order.errors import EmptyOrder, PlacementFailed
from counter.order.order import LineItemRepository
from counter.order.placement import OrderPlacement
from pytest_bdd import given, parsers, scenarios, when

scenarios("features/order_placement.feature")


def _codes(text):
    return [int(code) for code in text.split(",") if code.strip()]


def _place(catalog, store_faults, outcome, barista=(), kitchen=()):
    request = PlaceOrderRequest(
        barista_items=[PlaceOrderItem(item_type=t) for t in barista],
        kitchen_items=[PlaceOrderItem(item_type=t) for t in kitchen],
    )
    for fault in store_faults:
        fault.start()
    try:
        outcome["order_id"] = OrderPlacement(catalog).place(request)
    except (EmptyOrder, CatalogUnavailable, PlacementFailed) as exc:
        outcome["error"] = exc
    finally:
        for fault in store_faults:
            fault.stop()


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the store fails after the first line item")
def _(store_faults):
    original_add = LineItemRepository.add
    written = []

    def flaky_add(self, item):
        if written:
            raise RuntimeError("connection lost")
        written.append(item)
        return original_add(self, item)

    store_faults.append(patch.object(LineItemRepository, "add", flaky_add))


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('an order is placed with barista items "{barista}" and kitchen items "{kitchen}"'))
def _(catalog, store_faults, outcome, barista, kitchen):
    _place(catalog, store_faults, outcome, barista=_codes(barista), kitchen=_codes(kitchen))


@when(parsers.cfparse('an order is placed with only barista items "{barista}"'))
def _(catalog, store_faults, outcome, barista):
    _place(catalog, store_faults, outcome, barista=_codes(barista))


@when(parsers.cfparse('an order is placed with only kitchen items "{kitchen}"'))
def _(catalog, store_faults, outcome, kitchen):
    _place(catalog, store_faults, outcome, kitchen=_codes(kitchen))


@when("an empty order is placed")
def _(catalog, store_faults, outcome):
    _place(catalog, store_faults, outcome)
