"""FastAPI dependency: get_marketplace.

The HTTP adapter serves exactly one in-process session, stored on app.state
at startup:

    @router.get("/cart")
    async def view(market: MarketplaceService = Depends(get_marketplace)):
        ...
"""

from fastapi import Request

from src.av_engine.service import MarketplaceService


def get_marketplace(request: Request) -> MarketplaceService:
    return request.app.state.marketplace


def get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)
