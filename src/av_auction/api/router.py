"""av_auction REST endpoints.

GET  /auction           - live auction state
PUT  /auction/bid-draft - stage bid text without placing it
POST /auction/bids      - place a bid (numeric text, dollars); no amount places the draft
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.av_auction.application.schemas import (
    AuctionResponse,
    PlaceBidRequest,
    StageBidRequest,
)
from src.av_common.response import ApiResponse, request_response
from src.av_engine.service import MarketplaceService
from src.av_gateway.dependencies import get_marketplace, get_request_id

router = APIRouter(prefix="/auction", tags=["auction"])


@router.get("")
async def view_auction(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    auction = market.view_auction()
    increment = market.settings.BID_INCREMENT_HINT_CENTS
    return request_response(request_id, AuctionResponse.from_domain(auction, increment).model_dump())


@router.post("/bids")
async def place_bid(
    req: PlaceBidRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    auction = market.place_bid(req.amount)
    increment = market.settings.BID_INCREMENT_HINT_CENTS
    return request_response(
        request_id,
        AuctionResponse.from_domain(auction, increment).model_dump(),
        market.last_message,
    )


@router.put("/bid-draft")
async def stage_bid(
    req: StageBidRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    auction = market.stage_bid(req.amount)
    increment = market.settings.BID_INCREMENT_HINT_CENTS
    return request_response(request_id, AuctionResponse.from_domain(auction, increment).model_dump())
