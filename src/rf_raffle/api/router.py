"""rf_raffle REST endpoints: snapshot, reset, tickets, categories.

GET    /raffle                  — counts, prize stats, last draw time, current results
POST   /raffle/reset            — clear everything, restore default categories
GET    /tickets                 — ticket pool
POST   /tickets                 — add tickets (duplicates ignored)
POST   /tickets/range           — add start..end inclusive
POST   /tickets/remove          — remove listed tickets
DELETE /tickets                 — clear pool
GET    /categories              — per-category stats
POST   /categories              — add category
DELETE /categories/{name}       — delete category (409 while prizes reference it)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.rf_common.datetime_utils import iso_or_none
from src.rf_common.errors import CategoryInUseError, DuplicateCategoryError
from src.rf_common.response import ApiResponse, success_response
from src.rf_raffle.api.dependencies import get_controller
from src.rf_raffle.application.schemas import (
    AddCategoryRequest,
    AddTicketsRequest,
    CategoryStatsOut,
    DrawResultOut,
    RaffleSnapshot,
    TicketChangeResponse,
    TicketRangeRequest,
    TicketsResponse,
)
from src.rf_raffle.application.service import RaffleController
from src.rf_raffle.domain.categories import normalize_category

router = APIRouter(tags=["raffle"])

Controller = Annotated[RaffleController, Depends(get_controller)]


@router.get("/raffle")
async def get_snapshot(request: Request, raffle: Controller) -> ApiResponse:
    state = raffle.state
    last = raffle.last_draw()
    snapshot = RaffleSnapshot(
        ticket_count=len(state.tickets),
        categories=[CategoryStatsOut.from_domain(s) for s in raffle.category_stats()],
        prize_count=len(state.prizes),
        owner_count=len(state.owners),
        history_count=len(state.history),
        last_draw_at=iso_or_none(last.timestamp if last is not None else None),
        current_results=[
            DrawResultOut.from_domain(r, raffle.owner_by_ticket(r.ticket_number))
            for r in raffle.current_results()
        ],
        is_drawing=raffle.is_drawing,
    )
    return success_response(snapshot.model_dump(), request)


@router.post("/raffle/reset")
async def reset_all(request: Request, raffle: Controller) -> ApiResponse:
    raffle.reset_all()
    return success_response({"categories": raffle.categories()}, request)


# ---------------------------------------------------------------------------
# Tickets
# ---------------------------------------------------------------------------


def _ticket_change(raffle: RaffleController, changed: int) -> dict:
    return TicketChangeResponse(changed=changed, count=len(raffle.state.tickets)).model_dump()


@router.get("/tickets")
async def list_tickets(request: Request, raffle: Controller) -> ApiResponse:
    tickets = raffle.tickets()
    return success_response(
        TicketsResponse(count=len(tickets), tickets=tickets).model_dump(), request
    )


@router.post("/tickets", status_code=201)
async def add_tickets(req: AddTicketsRequest, request: Request, raffle: Controller) -> ApiResponse:
    added = raffle.add_tickets(req.tickets)
    return success_response(_ticket_change(raffle, added), request)


@router.post("/tickets/range", status_code=201)
async def add_ticket_range(
    req: TicketRangeRequest, request: Request, raffle: Controller
) -> ApiResponse:
    added = raffle.add_ticket_range(req.start, req.end)
    return success_response(_ticket_change(raffle, added), request)


@router.post("/tickets/remove")
async def remove_tickets(
    req: AddTicketsRequest, request: Request, raffle: Controller
) -> ApiResponse:
    removed = raffle.remove_tickets(req.tickets)
    return success_response(_ticket_change(raffle, removed), request)


@router.delete("/tickets")
async def clear_tickets(request: Request, raffle: Controller) -> ApiResponse:
    before = len(raffle.state.tickets)
    raffle.clear_tickets()
    return success_response(_ticket_change(raffle, before), request)


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


@router.get("/categories")
async def list_categories(request: Request, raffle: Controller) -> ApiResponse:
    stats = [CategoryStatsOut.from_domain(s).model_dump() for s in raffle.category_stats()]
    return success_response(stats, request)


@router.post("/categories", status_code=201)
async def add_category(
    req: AddCategoryRequest, request: Request, raffle: Controller
) -> ApiResponse:
    if not raffle.add_category(req.name):
        raise DuplicateCategoryError(req.name)
    return success_response({"categories": raffle.categories()}, request)


@router.delete("/categories/{name}")
async def delete_category(name: str, request: Request, raffle: Controller) -> ApiResponse:
    label = normalize_category(name)
    if not raffle.delete_category(label):
        raise CategoryInUseError(label)
    return success_response({"categories": raffle.categories()}, request)
