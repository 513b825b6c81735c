"""av_session REST endpoints.

POST /session/login    - presence-checked login as buyer or seller
POST /session/logout   - end session, drop the cart
GET  /session          - current session
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.av_common.response import ApiResponse, request_response
from src.av_engine.service import MarketplaceService
from src.av_gateway.dependencies import get_marketplace, get_request_id
from src.av_session.application.schemas import LoginRequest, SessionResponse

router = APIRouter(prefix="/session", tags=["session"])


@router.post("/login")
async def login(
    req: LoginRequest,
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    session = market.login(req.email, req.password, req.role)
    return request_response(
        request_id, SessionResponse.from_domain(session).model_dump(), market.last_message
    )


@router.post("/logout")
async def logout(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    session = market.logout()
    return request_response(
        request_id, SessionResponse.from_domain(session).model_dump(), market.last_message
    )


@router.get("")
async def get_session(
    market: Annotated[MarketplaceService, Depends(get_marketplace)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ApiResponse:
    return request_response(request_id, SessionResponse.from_domain(market.state.session).model_dump())
