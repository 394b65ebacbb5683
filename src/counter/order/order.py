"""Order and LineItem aggregates.

An Order header and its line items live in separate tables: a LineItem points
back at its Order through ``order_id`` rather than being held by it. Both are
only ever created together, inside one unit of work (see ``writer``).
"""

from decimal import Decimal
from enum import Enum, IntEnum

from protean.fields import Boolean, Identifier, Integer, String

from counter.domain import counter
from counter.shared.money import ZERO, format_money


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderSource(IntEnum):
    COUNTER = 0
    WEB = 1


class OrderStatus(IntEnum):
    PLACED = 1
    IN_PROGRESS = 2
    FULFILLED = 3


class ItemStatus(IntEnum):
    NEW = 0
    IN_PROGRESS = 1
    FULFILLED = 2


class ItemCategory(Enum):
    BARISTA = "Barista"
    KITCHEN = "Kitchen"


UNKNOWN_ORDER_SOURCE = OrderSource.COUNTER.value
NO_LOYALTY_MEMBER = "00000000-0000-0000-0000-000000000000"


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------
@counter.aggregate
class Order:
    """A customer purchase placed at the counter.

    The source channel is kept as its raw integer code; codes outside
    ``OrderSource`` are stored as given.
    """

    order_source = Integer(default=UNKNOWN_ORDER_SOURCE)
    loyalty_member_id = Identifier(default=NO_LOYALTY_MEMBER)
    order_status = Integer(default=OrderStatus.PLACED.value)

    @classmethod
    def place(cls, order_source=None, loyalty_member_id=None):
        """Create a new order header in the Placed state."""
        return cls(
            order_source=UNKNOWN_ORDER_SOURCE if order_source is None else order_source,
            loyalty_member_id=NO_LOYALTY_MEMBER if loyalty_member_id is None else str(loyalty_member_id),
            order_status=OrderStatus.PLACED.value,
        )


@counter.aggregate
class LineItem:
    """One purchased catalog item, priced when the order was placed.

    ``price`` holds the fixed-point amount as text ("4.50"); use ``amount``
    for the Decimal value.
    """

    order_id = Identifier(required=True)
    item_type = Integer(required=True)
    name = String(required=True, max_length=50)
    price = String(required=True, max_length=20, default=str(ZERO))
    item_status = Integer(default=ItemStatus.NEW.value)
    is_barista_order = Boolean(default=False)

    @classmethod
    def for_item(cls, order_id, item_type: int, price: Decimal, category: ItemCategory):
        return cls(
            order_id=order_id,
            item_type=item_type,
            name=str(item_type),
            price=format_money(price),
            item_status=ItemStatus.NEW.value,
            is_barista_order=category is ItemCategory.BARISTA,
        )

    @property
    def amount(self) -> Decimal:
        return Decimal(self.price)

    @property
    def category(self) -> ItemCategory:
        return ItemCategory.BARISTA if self.is_barista_order else ItemCategory.KITCHEN


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------
@counter.repository(part_of=Order)
class OrderRepository:
    def list_all(self) -> list[Order]:
        """Every order header, in store order."""
        return self._dao.query.limit(None).all().items


@counter.repository(part_of=LineItem)
class LineItemRepository:
    def for_order(self, order_id) -> list[LineItem]:
        """Line items owned by one order."""
        return self._dao.query.filter(order_id=str(order_id)).limit(None).all().items
