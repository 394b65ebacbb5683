"""Turns a place-order request into persistable records.

Prices are resolved once per item category, never once per item: an order
with five barista items and three kitchen items costs two catalog lookups.
"""

from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal

from counter.order.errors import EmptyOrder
from counter.order.order import ItemCategory, LineItem, Order
from counter.shared.money import ZERO
from counter.utils.logging import get_logger

logger = get_logger(__name__)

PriceResolver = Callable[[Sequence[int]], Mapping[int, Decimal]]


def build_order(request, resolve_prices: PriceResolver) -> tuple[Order, list[LineItem]]:
    """Build the order header and its priced line items.

    Args:
        request: A PlaceOrderRequest; ``barista_items`` and ``kitchen_items``
            are lists of objects with an ``item_type`` and may be None.
        resolve_prices: Catalog lookup called with all item types of one
            category. Item types it leaves out are priced at zero.

    Raises:
        EmptyOrder: when both item lists are empty or absent. Checked before
            any catalog lookup.
    """
    categories = [
        (ItemCategory.BARISTA, [item.item_type for item in request.barista_items or []]),
        (ItemCategory.KITCHEN, [item.item_type for item in request.kitchen_items or []]),
    ]

    if not any(item_types for _, item_types in categories):
        raise EmptyOrder({"items": ["An order needs at least one barista or kitchen item"]})

    order = Order.place(
        order_source=request.order_source,
        loyalty_member_id=request.loyalty_member_id,
    )

    lines = []
    for category, item_types in categories:
        if not item_types:
            continue

        prices = resolve_prices(item_types)
        for item_type in item_types:
            price = prices.get(item_type)
            if price is None:
                # Unpriced items are sold at zero rather than rejected
                logger.warning("catalog_price_missing", item_type=item_type, category=category.value)
                price = ZERO
            lines.append(LineItem.for_item(order.id, item_type, price, category))

    return order, lines
