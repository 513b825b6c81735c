"""Request logging middleware.

One log line per HTTP request, tagged with the session role that was active
when the request arrived. A caller-supplied X-Request-ID is kept, otherwise a
short one is minted; either way it lands on request.state (for the
ApiResponse envelope) and on the response header.

    INFO    [POST] /api/v1/cart/checkout 201 (3ms) role=buyer req_a1b2c3d4e5f6
    WARNING [POST] /api/v1/auction/bids 422 (1ms) role=buyer req_0f9e8d7c6b5a
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("av.request")

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_REQUEST_ID_LEN = 64


def _request_id_from(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if incoming and len(incoming) <= _MAX_REQUEST_ID_LEN:
        return incoming
    return f"req_{uuid.uuid4().hex[:12]}"


def _session_role(request: Request) -> str:
    market = getattr(request.app.state, "marketplace", None)
    if market is None:
        return "-"
    role = market.state.session.role
    return role.value if role is not None else "anonymous"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _request_id_from(request)
        request.state.request_id = request_id
        role = _session_role(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        level = logging.WARNING if 400 <= response.status_code < 500 else logging.INFO
        logger.log(
            level,
            "[%s] %s %d (%.0fms) role=%s %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            role,
            request_id,
        )
        return response
