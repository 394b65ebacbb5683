"""Counter bounded context: order intake for the point-of-sale counter.

Accepts barista and kitchen orders, prices them against the product catalog
and persists each order together with its line items.
"""

from protean.domain import Domain

from counter.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
counter = Domain(name="counter")
