"""Prize catalog endpoints.

GET    /prizes?category=A&available=true
POST   /prizes
POST   /prizes/bulk
PUT    /prizes/{prize_id}
DELETE /prizes/{prize_id}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.rf_common.errors import CategoryNotFoundError, PrizeNotFoundError
from src.rf_common.response import ApiResponse, success_response
from src.rf_raffle.api.dependencies import get_controller
from src.rf_raffle.application.schemas import BulkPrizesRequest, PrizeIn, PrizeOut
from src.rf_raffle.application.service import RaffleController

router = APIRouter(prefix="/prizes", tags=["prizes"])

Controller = Annotated[RaffleController, Depends(get_controller)]


def _require_category(raffle: RaffleController, category: str) -> None:
    # The catalog trusts its callers; this layer is the caller.
    if not raffle.has_category(category):
        raise CategoryNotFoundError(category)


@router.get("")
async def list_prizes(
    request: Request,
    raffle: Controller,
    category: str | None = Query(None, description="Filter by category label"),
    available: bool = Query(False, description="Only unassigned prizes"),
) -> ApiResponse:
    if category is None:
        prizes = [p for p in raffle.prizes() if not (available and p.is_assigned)]
    else:
        label = category.strip().upper()
        prizes = raffle.available_prizes(label) if available else raffle.prizes_by_category(label)
    return success_response([PrizeOut.from_domain(p).model_dump() for p in prizes], request)


@router.post("", status_code=201)
async def add_prize(req: PrizeIn, request: Request, raffle: Controller) -> ApiResponse:
    _require_category(raffle, req.category)
    prize = raffle.add_prize(req.name, req.category)
    return success_response(PrizeOut.from_domain(prize).model_dump(), request)


@router.post("/bulk", status_code=201)
async def add_bulk_prizes(
    req: BulkPrizesRequest, request: Request, raffle: Controller
) -> ApiResponse:
    for entry in req.prizes:
        _require_category(raffle, entry.category)
    created = raffle.add_bulk_prizes((p.name, p.category) for p in req.prizes)
    return success_response({"created": created}, request)


@router.put("/{prize_id}")
async def update_prize(
    prize_id: str, req: PrizeIn, request: Request, raffle: Controller
) -> ApiResponse:
    if raffle.get_prize(prize_id) is None:
        raise PrizeNotFoundError(prize_id)
    _require_category(raffle, req.category)
    raffle.update_prize(prize_id, req.name, req.category)
    prize = raffle.get_prize(prize_id)
    return success_response(PrizeOut.from_domain(prize).model_dump(), request)  # type: ignore[arg-type]


@router.delete("/{prize_id}")
async def delete_prize(prize_id: str, request: Request, raffle: Controller) -> ApiResponse:
    if raffle.get_prize(prize_id) is None:
        raise PrizeNotFoundError(prize_id)
    raffle.delete_prize(prize_id)
    return success_response({"deleted": prize_id}, request)
