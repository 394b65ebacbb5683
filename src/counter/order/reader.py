"""Reconstitutes orders with their line items for listing."""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from counter.order.errors import StoreUnavailable
from counter.order.order import LineItem, Order
from counter.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PlacedOrder:
    order: Order
    lines: list[LineItem] = field(default_factory=list)


def list_orders() -> list[PlacedOrder]:
    """List every order with its line items.

    Line items are fetched per order. When that fetch fails for one order,
    the order is still listed, with no line items, and the failure is logged.

    Raises:
        StoreUnavailable: when the order headers themselves cannot be read.
    """
    try:
        orders = current_domain.repository_for(Order).list_all()
    except Exception as exc:
        logger.error("order_listing_unavailable", error=str(exc))
        raise StoreUnavailable(f"Orders could not be listed: {exc}") from exc

    line_repo = current_domain.repository_for(LineItem)

    placed = []
    for order in orders:
        try:
            lines = line_repo.for_order(order.id)
        except Exception as exc:
            logger.warning("store_read_degraded", order_id=str(order.id), error=str(exc))
            lines = []
        placed.append(PlacedOrder(order=order, lines=list(lines)))

    return placed
