"""Shared BDD fixtures and step definitions for the Counter domain."""

from decimal import Decimal

import pytest
from counter.catalog import CatalogUnavailable, FakeCatalogGateway
from counter.order.errors import EmptyOrder, PlacementFailed
from counter.order.reader import list_orders
from pytest_bdd import given, parsers, then


@pytest.fixture()
def catalog():
    return FakeCatalogGateway()


@pytest.fixture()
def store_faults():
    """Patches active while the When step runs."""
    return []


@pytest.fixture()
def outcome():
    return {}


def _lines():
    return [line for placed in list_orders() for line in placed.lines]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the catalog prices item type {item_type:d} at {price}"))
def _(catalog, item_type, price):
    catalog.set_price(item_type, price)


@given("the catalog is unavailable")
def _(catalog):
    catalog.configure(should_succeed=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order is listed with a line item count of {count:d}"))
def _(outcome, count):
    (placed,) = list_orders()
    assert str(placed.order.id) == outcome["order_id"]
    assert len(placed.lines) == count


@then(parsers.cfparse("line item type {item_type:d} costs {price} and is a {category} item"))
def _(item_type, price, category):
    line = next(line for line in _lines() if line.item_type == item_type)
    assert line.amount == Decimal(price)
    assert line.is_barista_order is (category == "barista")


@then(parsers.cfparse("every line item costs {price}"))
def _(price):
    assert all(line.amount == Decimal(price) for line in _lines())


@then(parsers.cfparse("the catalog was called {count:d} times"))
def _(catalog, count):
    assert len(catalog.calls) == count


@then("no orders are listed")
def _():
    assert list_orders() == []


@then("the order is rejected as empty")
def _(outcome):
    assert isinstance(outcome.get("error"), EmptyOrder)


@then("the order is rejected because the catalog is unavailable")
def _(outcome):
    assert isinstance(outcome.get("error"), CatalogUnavailable)


@then("the order is rejected because placement failed")
def _(outcome):
    assert isinstance(outcome.get("error"), PlacementFailed)
