"""Request logging middleware.

Tags each request with an id, stored on ``request.state.request_id`` so the
response envelope can carry it, and echoed back in ``X-Request-ID``. A caller
that already sends ``X-Request-ID`` keeps its own id.

Log format:
    INFO [POST] /api/v1/draws → 200 (2534ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("rf.request")

REQUEST_ID_HEADER = "X-Request-ID"
MAX_INBOUND_ID_LENGTH = 64
QUIET_PATHS = frozenset({"/health"})


def resolve_request_id(inbound: str | None) -> str:
    if inbound and inbound.strip():
        return inbound.strip()[:MAX_INBOUND_ID_LENGTH]
    return f"req_{uuid.uuid4().hex[:12]}"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        logger.log(
            level,
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
