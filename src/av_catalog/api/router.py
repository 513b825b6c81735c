"""av_catalog REST endpoints.

GET  /catalog               - all listings, insertion order
GET  /catalog/{listing_id}  - one listing
POST /catalog               - seller adds a listing
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.av_catalog.application.schemas import (
    AddListingRequest,
    CatalogResponse,
    ListingResponse,
)
from src.av_common.response import ApiResponse, request_response
from src.av_engine.service import MarketplaceService
from src.av_gateway.dependencies import get_marketplace, get_request_id

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("")
async def list_catalog(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    listings = market.list_catalog()
    result = CatalogResponse(items=[ListingResponse.from_domain(li) for li in listings])
    return request_response(request_id, result.model_dump())


@router.get("/{listing_id}")
async def get_listing(
    listing_id: int,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    listing = market.get_listing(listing_id)
    return request_response(request_id, ListingResponse.from_domain(listing).model_dump())


@router.post("", status_code=201)
async def add_listing(
    req: AddListingRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    listing = market.add_listing(req.to_draft())
    return request_response(
        request_id, ListingResponse.from_domain(listing).model_dump(), market.last_message
    )
