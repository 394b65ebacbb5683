"""Prices a request and commits it as one unit."""

from counter.catalog.port import CatalogGateway
from counter.order.aggregation import build_order
from counter.order.writer import commit_order
from counter.utils.logging import get_logger

logger = get_logger(__name__)


class OrderPlacement:
    """Places counter orders against one catalog gateway.

    Validation and catalog failures are raised before the unit of work opens;
    persistence failures are raised as PlacementFailed. Nothing is retried.
    """

    def __init__(self, gateway: CatalogGateway) -> None:
        self.gateway = gateway

    def place(self, request) -> str:
        order, lines = build_order(request, self.gateway.resolve_prices)
        order_id = commit_order(order, lines)

        logger.info(
            "order_placed",
            order_id=order_id,
            barista_items=sum(1 for line in lines if line.is_barista_order),
            kitchen_items=sum(1 for line in lines if not line.is_barista_order),
        )
        return order_id
