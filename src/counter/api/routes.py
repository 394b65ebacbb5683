"""FastAPI routes for the Counter domain: order placement and listing."""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from counter.api.schemas import OrderLineResponse, OrderResponse, PlaceOrderRequest
from counter.catalog.port import CatalogGateway
from counter.order.errors import StoreUnavailable
from counter.order.placement import OrderPlacement
from counter.order.reader import PlacedOrder, list_orders

order_router = APIRouter(prefix="/v1/api", tags=["orders"])
health_router = APIRouter(tags=["health"])


def get_catalog_gateway(request: Request) -> CatalogGateway:
    return request.app.state.catalog_gateway


def get_order_placement(gateway: CatalogGateway = Depends(get_catalog_gateway)) -> OrderPlacement:
    return OrderPlacement(gateway)


def _to_response(placed: PlacedOrder) -> OrderResponse:
    order = placed.order
    return OrderResponse(
        id=str(order.id),
        order_source=order.order_source,
        loyalty_member_id=str(order.loyalty_member_id),
        order_status=order.order_status,
        order_lines=[
            OrderLineResponse(
                id=str(line.id),
                item_type=line.item_type,
                name=line.name,
                price=line.amount,
                item_status=line.item_status,
                is_barista_order=line.is_barista_order,
                order_id=str(line.order_id),
            )
            for line in placed.lines
        ],
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
@order_router.get("/fulfillment-orders", response_model=list[OrderResponse])
def get_fulfillment_orders() -> list[OrderResponse]:
    """List every order with its line items.

    A store failure yields an empty list rather than an error status.
    """
    try:
        placed_orders = list_orders()
    except StoreUnavailable:
        return []
    return [_to_response(placed) for placed in placed_orders]


@order_router.post("/orders", response_class=PlainTextResponse)
def place_order(body: PlaceOrderRequest, placement: OrderPlacement = Depends(get_order_placement)) -> str:
    """Place an order and return its id as plain text."""
    return placement.place(body)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@health_router.get("/")
def home() -> Response:
    return Response(status_code=200)


@health_router.get("/health")
def health(request: Request) -> dict:
    return {"status": "ok", "domain": request.app.state.domain.name}
