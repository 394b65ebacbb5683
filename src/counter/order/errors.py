"""Errors raised while placing or listing orders."""

from protean.exceptions import ValidationError


class EmptyOrder(ValidationError):
    """The order has neither barista nor kitchen items."""


class PlacementFailed(Exception):
    """The unit of work persisting an order was aborted; nothing was written."""


class StoreUnavailable(Exception):
    """Order headers could not be read from the store."""
