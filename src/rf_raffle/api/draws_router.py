"""Draw endpoints.

POST   /draws             — run a draw; blocks for the animation duration
GET    /draws/readiness   — can a draw of this size run now, and if not, why
POST   /draws/cancel      — abort the in-flight draw before it commits
GET    /draws/current     — results of the latest draw
DELETE /draws/current     — clear the latest results (history untouched)
GET    /draws/history     — completed draws, most recent first
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from config.settings import settings
from src.rf_common.response import ApiResponse, success_response
from src.rf_raffle.api.dependencies import get_controller
from src.rf_raffle.application.schemas import (
    DrawRequest,
    DrawResponse,
    DrawResultOut,
    HistoryEntryOut,
    ReadinessResponse,
)
from src.rf_raffle.application.service import RaffleController

router = APIRouter(prefix="/draws", tags=["draws"])

Controller = Annotated[RaffleController, Depends(get_controller)]


@router.post("")
async def execute_draw(req: DrawRequest, request: Request, raffle: Controller) -> ApiResponse:
    results = await raffle.execute_draw(req.category, req.group_size)
    resp = DrawResponse(
        executed=bool(results),
        results=[
            DrawResultOut.from_domain(r, raffle.owner_by_ticket(r.ticket_number))
            for r in results
        ],
    )
    return success_response(resp.model_dump(), request)


@router.get("/readiness")
async def draw_readiness(
    request: Request,
    raffle: Controller,
    category: str = Query(..., description="Category label"),
    group_size: int = Query(1, ge=1, le=settings.MAX_GROUP_SIZE),
) -> ApiResponse:
    label = category.strip().upper()
    reason = raffle.draw_shortfall(label, group_size)
    resp = ReadinessResponse(
        category=label,
        group_size=group_size,
        can_draw=reason is None and not raffle.is_drawing,
        reason=reason,
        is_drawing=raffle.is_drawing,
    )
    return success_response(resp.model_dump(), request)


@router.post("/cancel")
async def cancel_draw(request: Request, raffle: Controller) -> ApiResponse:
    return success_response({"cancelled": raffle.cancel_draw()}, request)


@router.get("/current")
async def current_results(request: Request, raffle: Controller) -> ApiResponse:
    results = [
        DrawResultOut.from_domain(r, raffle.owner_by_ticket(r.ticket_number)).model_dump()
        for r in raffle.current_results()
    ]
    return success_response(results, request)


@router.delete("/current")
async def clear_current_results(request: Request, raffle: Controller) -> ApiResponse:
    raffle.clear_current_results()
    return success_response([], request)


@router.get("/history")
async def draw_history(
    request: Request,
    raffle: Controller,
    limit: int = Query(50, ge=1, le=500),
) -> ApiResponse:
    entries = [HistoryEntryOut.from_domain(e).model_dump() for e in raffle.history()[:limit]]
    return success_response(entries, request)
