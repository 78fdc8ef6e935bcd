"""Ticket owner directory endpoints.

GET    /owners                     — owners + total ticket count
POST   /owners                     — add owner
POST   /owners/bulk                — add many (rows already decoded from CSV by the client)
PUT    /owners/{owner_id}          — replace name and tickets
DELETE /owners/{owner_id}
DELETE /owners                     — remove every owner
GET    /owners/by-ticket/{ticket}  — first owner holding the ticket
GET    /owners/tickets             — union of all owners' tickets
GET    /owners/template            — CSV template for the bulk import
"""

import csv
import io
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from src.rf_common.errors import OwnerNotFoundError
from src.rf_common.response import ApiResponse, success_response
from src.rf_raffle.api.dependencies import get_controller
from src.rf_raffle.application.schemas import (
    BulkOwnersRequest,
    OwnerIn,
    OwnerListResponse,
    OwnerOut,
)
from src.rf_raffle.application.service import RaffleController

router = APIRouter(prefix="/owners", tags=["owners"])

Controller = Annotated[RaffleController, Depends(get_controller)]

TEMPLATE_ROWS: list[tuple[str, list[str]]] = [
    ("John Doe", ["1", "2", "3"]),
    ("Jane Smith", ["10", "11"]),
]


def render_owner_csv(rows: list[tuple[str, list[str]]]) -> str:
    """``name,tickets`` table; the tickets cell is comma-joined and therefore quoted."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["name", "tickets"])
    for name, tickets in rows:
        writer.writerow([name, ",".join(tickets)])
    return buf.getvalue()


@router.get("")
async def list_owners(request: Request, raffle: Controller) -> ApiResponse:
    resp = OwnerListResponse(
        items=[OwnerOut.from_domain(o) for o in raffle.owners()],
        total_tickets=raffle.state.owners.total_tickets(),
    )
    return success_response(resp.model_dump(), request)


@router.post("", status_code=201)
async def add_owner(req: OwnerIn, request: Request, raffle: Controller) -> ApiResponse:
    owner = raffle.add_owner(req.name, req.ticket_numbers)
    return success_response(OwnerOut.from_domain(owner).model_dump(), request)


@router.post("/bulk", status_code=201)
async def add_bulk_owners(
    req: BulkOwnersRequest, request: Request, raffle: Controller
) -> ApiResponse:
    created = raffle.add_bulk_owners((o.name, o.ticket_numbers) for o in req.owners)
    return success_response({"created": created}, request)


@router.get("/template")
async def owner_template() -> Response:
    return Response(
        content=render_owner_csv(TEMPLATE_ROWS),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="ticket-owners-template.csv"'},
    )


@router.get("/tickets")
async def all_owner_tickets(request: Request, raffle: Controller) -> ApiResponse:
    return success_response(raffle.all_owner_tickets(), request)


@router.get("/by-ticket/{ticket}")
async def owner_by_ticket(ticket: str, request: Request, raffle: Controller) -> ApiResponse:
    owner = raffle.owner_by_ticket(ticket)
    data = OwnerOut.from_domain(owner).model_dump() if owner is not None else None
    return success_response(data, request)


@router.put("/{owner_id}")
async def update_owner(
    owner_id: str, req: OwnerIn, request: Request, raffle: Controller
) -> ApiResponse:
    if raffle.get_owner(owner_id) is None:
        raise OwnerNotFoundError(owner_id)
    raffle.update_owner(owner_id, req.name, req.ticket_numbers)
    owner = raffle.get_owner(owner_id)
    return success_response(OwnerOut.from_domain(owner).model_dump(), request)  # type: ignore[arg-type]


@router.delete("/{owner_id}")
async def delete_owner(owner_id: str, request: Request, raffle: Controller) -> ApiResponse:
    if raffle.get_owner(owner_id) is None:
        raise OwnerNotFoundError(owner_id)
    raffle.delete_owner(owner_id)
    return success_response({"deleted": owner_id}, request)


@router.delete("")
async def reset_owners(request: Request, raffle: Controller) -> ApiResponse:
    raffle.reset_owners()
    return success_response({"owners": 0}, request)
