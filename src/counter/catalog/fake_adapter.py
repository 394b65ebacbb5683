"""Configurable fake product catalog for development and testing.

Serves prices from an in-memory table and records every lookup, so callers
can assert how many catalog round trips a flow made.
"""

import time
from collections.abc import Mapping, Sequence
from decimal import Decimal

from counter.catalog.port import CatalogGateway, CatalogUnavailable, unique_item_types
from counter.shared.money import to_money


class FakeCatalogGateway(CatalogGateway):
    """In-process catalog gateway."""

    def __init__(self, prices: Mapping[int, object] | None = None) -> None:
        self.prices: dict[int, Decimal] = {item_type: to_money(price) for item_type, price in (prices or {}).items()}
        self.should_succeed: bool = True
        self.failure_reason: str = "Catalog service unreachable"
        self.delay: float = 0.0
        self.calls: list[list[int]] = []

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Catalog service unreachable",
        delay: float = 0.0,
    ) -> None:
        """Configure gateway behavior at runtime.

        ``delay`` is how long each lookup sleeps before answering, in seconds.
        """
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.delay = delay

    def set_price(self, item_type: int, price) -> None:
        self.prices[item_type] = to_money(price)

    def resolve_prices(self, item_types: Sequence[int]) -> dict[int, Decimal]:
        self.calls.append(list(item_types))

        if self.delay:
            time.sleep(self.delay)

        if not self.should_succeed:
            raise CatalogUnavailable(self.failure_reason)

        return {
            item_type: self.prices[item_type] for item_type in unique_item_types(item_types) if item_type in self.prices
        }
