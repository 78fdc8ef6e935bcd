"""Response envelope shared by every rf_raffle endpoint.

{
    "code": 0,           // 0 on success, an AppError code otherwise
    "message": "success",
    "data": { ... },     // null on error
    "timestamp": "...",  // UTC, ISO 8601
    "request_id": "..."  // same id as the X-Request-ID header
}
"""

import uuid
from typing import Any

from fastapi import Request
from pydantic import BaseModel, Field

from src.rf_common.datetime_utils import utc_now


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def _bind(resp: ApiResponse, request: Request | None) -> ApiResponse:
    if request is not None:
        resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


def success_response(data: Any = None, request: Request | None = None) -> ApiResponse:
    return _bind(ApiResponse(data=data), request)


def error_response(code: int, message: str, request: Request | None = None) -> ApiResponse:
    return _bind(ApiResponse(code=code, message=message, data=None), request)
