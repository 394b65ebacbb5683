"""Transactional writer, the only place orders reach the store.

The order header and all of its line items are added inside one unit of work.
If any write (or the commit itself) fails, the unit is rolled back and
readers never see a partial order.
"""

from protean import UnitOfWork
from protean.utils.globals import current_domain

from counter.order.errors import PlacementFailed
from counter.order.order import LineItem, Order
from counter.utils.logging import get_logger

logger = get_logger(__name__)


def commit_order(order: Order, lines: list[LineItem]) -> str:
    """Persist ``order`` and ``lines`` atomically and return the order id.

    Raises:
        PlacementFailed: wrapping whatever aborted the unit of work.
    """
    try:
        with UnitOfWork():
            current_domain.repository_for(Order).add(order)

            line_repo = current_domain.repository_for(LineItem)
            for line in lines:
                line.order_id = order.id
                line_repo.add(line)
    except Exception as exc:
        logger.error(
            "order_placement_failed",
            order_id=str(order.id),
            line_count=len(lines),
            error=str(exc),
        )
        raise PlacementFailed(f"Order {order.id} was not persisted: {exc}") from exc

    return str(order.id)
