"""Product catalog gateway factory.

Provides create_gateway() to build the catalog adapter from explicit settings:
- HttpCatalogGateway for the real catalog service
- FakeCatalogGateway for development and testing
"""

from counter.catalog.fake_adapter import FakeCatalogGateway
from counter.catalog.http_adapter import HttpCatalogGateway
from counter.catalog.port import CatalogGateway, CatalogUnavailable, ItemPrice
from counter.settings import Settings


def create_gateway(settings: Settings) -> CatalogGateway:
    """Return the catalog gateway configured by ``settings``."""
    return HttpCatalogGateway(settings.product_url, timeout=settings.catalog_timeout)


__all__ = [
    "CatalogGateway",
    "CatalogUnavailable",
    "FakeCatalogGateway",
    "HttpCatalogGateway",
    "ItemPrice",
    "create_gateway",
]
