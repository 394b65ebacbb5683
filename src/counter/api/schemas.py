"""Pydantic request/response schemas for the Counter API.

These are external contracts (anti-corruption layer); JSON keys are
camelCase, matching the point-of-sale clients.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderItem(CamelModel):
    item_type: int


class PlaceOrderRequest(CamelModel):
    command_type: int | None = None
    order_source: int | None = None
    order_status: int | None = None
    location: int | None = None
    loyalty_member_id: UUID | None = None
    barista_items: list[PlaceOrderItem] | None = None
    kitchen_items: list[PlaceOrderItem] | None = None
    timestamp: datetime | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "commandType": 0,
                    "orderSource": 0,
                    "location": 0,
                    "loyaltyMemberId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                    "baristaItems": [{"itemType": 0}, {"itemType": 1}],
                    "kitchenItems": [{"itemType": 7}],
                    "timestamp": "2026-01-15T08:30:00Z",
                }
            ]
        },
    )


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderLineResponse(CamelModel):
    id: str
    item_type: int
    name: str
    price: Decimal
    item_status: int
    is_barista_order: bool
    order_id: str | None = None


class OrderResponse(CamelModel):
    id: str
    order_source: int
    loyalty_member_id: str
    order_status: int
    order_lines: list[OrderLineResponse] = []
