"""HTTP adapter for the product catalog service.

Calls ``GET {base_url}/v1/api/items-by-types/{codes}`` once per lookup, with
the item types comma-joined in the path, and reads back a JSON array of
``{"itemType": int, "price": number}`` objects.
"""

from collections.abc import Sequence
from decimal import Decimal

import requests

from counter.catalog.port import CatalogGateway, CatalogUnavailable, ItemPrice, unique_item_types
from counter.shared.money import to_money
from counter.utils.logging import get_logger

logger = get_logger(__name__)

ITEMS_BY_TYPES_PATH = "/v1/api/items-by-types"


class HttpCatalogGateway(CatalogGateway):
    """Catalog gateway backed by the catalog service's batch lookup endpoint.

    Single attempt per call; retrying is left to the caller.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, item_types: Sequence[int]) -> str:
        codes = ",".join(str(item_type) for item_type in unique_item_types(item_types))
        return f"{self.base_url}{ITEMS_BY_TYPES_PATH}/{codes}"

    def resolve_prices(self, item_types: Sequence[int]) -> dict[int, Decimal]:
        if not item_types:
            return {}

        url = self.url_for(item_types)
        logger.debug("catalog_request", url=url)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("catalog_unavailable", url=url, error=str(exc))
            raise CatalogUnavailable(f"Catalog lookup failed for {url}: {exc}") from exc

        return {item.item_type: item.price for item in _parse_prices(payload, url)}


def _parse_prices(payload, url: str) -> list[ItemPrice]:
    if not isinstance(payload, list):
        raise CatalogUnavailable(f"Catalog response from {url} is not a list")

    prices: list[ItemPrice] = []
    for entry in payload:
        try:
            item_type = entry["itemType"]
            if isinstance(item_type, bool) or not isinstance(item_type, int):
                raise TypeError(f"itemType must be an integer, got {item_type!r}")
            prices.append(ItemPrice(item_type=item_type, price=to_money(entry["price"])))
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("catalog_unavailable", url=url, error=str(exc))
            raise CatalogUnavailable(f"Malformed catalog entry from {url}: {entry!r}") from exc

    return prices
