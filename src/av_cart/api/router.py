"""av_cart REST endpoints.

GET   /cart                       - current cart with totals
POST  /cart/items                 - add one piece of a listing
PATCH /cart/items/{listing_id}    - adjust a line's quantity by delta
POST  /cart/checkout              - turn the whole cart into one order
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.av_cart.application.schemas import (
    AddToCartRequest,
    AdjustQuantityRequest,
    CartResponse,
)
from src.av_common.response import ApiResponse, request_response
from src.av_engine.service import MarketplaceService
from src.av_gateway.dependencies import get_marketplace, get_request_id
from src.av_order.application.schemas import OrderResponse

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("")
async def view_cart(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    cart = market.view_cart()
    return request_response(request_id, CartResponse.from_domain(cart).model_dump())


@router.post("/items")
async def add_to_cart(
    req: AddToCartRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    cart = market.add_to_cart(req.listing_id)
    return request_response(request_id, CartResponse.from_domain(cart).model_dump(), market.last_message)


@router.patch("/items/{listing_id}")
async def adjust_quantity(
    listing_id: int,
    req: AdjustQuantityRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    cart = market.adjust_cart_quantity(listing_id, req.delta)
    return request_response(request_id, CartResponse.from_domain(cart).model_dump())


@router.post("/checkout", status_code=201)
async def checkout(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    order = market.checkout()
    return request_response(
        request_id, OrderResponse.from_domain(order).model_dump(mode="json"), market.last_message
    )
