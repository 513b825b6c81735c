"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000

The app serves a single in-process marketplace session; restarting the
process starts a new session.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.av_auction.api.router import router as auction_router
from src.av_cart.api.router import router as cart_router
from src.av_catalog.api.router import router as catalog_router
from src.av_common.errors import AppError
from src.av_common.response import error_response
from src.av_engine.service import MarketplaceService
from src.av_gateway.middleware.request_log import RequestLogMiddleware
from src.av_order.api.router import router as order_router
from src.av_session.api.router import router as session_router

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
)

app.state.marketplace = MarketplaceService(settings)

app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(session_router, prefix="/api/v1")
app.include_router(catalog_router, prefix="/api/v1")
app.include_router(cart_router, prefix="/api/v1")
app.include_router(order_router, prefix="/api/v1")
app.include_router(auction_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
