"""Product catalog port (abstract interface).

The counter only needs one thing from the catalog: the current price of a
batch of item types. Adapters implement that lookup against the real catalog
service (HttpCatalogGateway) or an in-process table (FakeCatalogGateway).
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal


class CatalogUnavailable(Exception):
    """The catalog could not be reached or returned an unusable response."""


@dataclass(frozen=True)
class ItemPrice:
    """Price of one catalog item type."""

    item_type: int
    price: Decimal


class CatalogGateway(ABC):
    """Abstract product catalog interface."""

    @abstractmethod
    def resolve_prices(self, item_types: Sequence[int]) -> dict[int, Decimal]:
        """Return the current price of every known item type in ``item_types``.

        Unknown item types are left out of the mapping. Raises
        CatalogUnavailable when the lookup itself fails.
        """
        ...


def unique_item_types(item_types: Sequence[int]) -> list[int]:
    """Drop repeated item types, keeping first-seen order."""
    return list(dict.fromkeys(item_types))
