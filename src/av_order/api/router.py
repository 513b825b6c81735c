"""av_order REST endpoints.

POST /orders/buy-now   - single-item purchase, cart untouched
GET  /orders           - order history, oldest first
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.av_common.response import ApiResponse, request_response
from src.av_engine.service import MarketplaceService
from src.av_gateway.dependencies import get_marketplace, get_request_id
from src.av_order.application.schemas import BuyNowRequest, OrderListResponse, OrderResponse

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/buy-now", status_code=201)
async def buy_now(
    req: BuyNowRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    order = market.buy_now(req.listing_id)
    return request_response(
        request_id, OrderResponse.from_domain(order).model_dump(mode="json"), market.last_message
    )


@router.get("")
async def order_history(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    orders = market.order_history()
    result = OrderListResponse(items=[OrderResponse.from_domain(o) for o in orders])
    return request_response(request_id, result.model_dump(mode="json"))
