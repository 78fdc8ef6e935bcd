"""Raffle invariant verification after each committed draw."""

import logging

from src.rf_raffle.domain.models import DrawResult
from src.rf_raffle.domain.state import RaffleState

logger = logging.getLogger(__name__)


def verify_invariants(state: RaffleState) -> None:
    """Verify state invariants. Raises AssertionError if violated.

    - the ticket registry holds no duplicates
    - every assigned prize names its ticket, and that ticket left the registry
    """
    tickets = state.tickets.as_list()
    assert len(tickets) == len(set(tickets)), "Invariant violated: duplicate tickets in registry"

    for prize in state.prizes:
        if not prize.is_assigned:
            continue
        assert prize.assigned_to is not None, (
            f"Invariant violated: prize {prize.id} assigned without a ticket"
        )
        assert prize.assigned_to not in state.tickets, (
            f"Invariant violated: prize {prize.id} won by {prize.assigned_to} still in registry"
        )

    logger.debug(
        "Invariants OK: tickets=%d, prizes=%d, draws=%d",
        len(state.tickets),
        len(state.prizes),
        len(state.history),
    )


def verify_draw_results(results: list[DrawResult], category: str) -> None:
    """Per-draw checks: distinct tickets and prizes, all in ``category``, all paired."""
    tickets = [r.ticket_number for r in results]
    prize_ids = [r.prize.id for r in results]
    assert len(tickets) == len(set(tickets)), "ticket selected twice in one draw"
    assert len(prize_ids) == len(set(prize_ids)), "prize awarded twice in one draw"
    for r in results:
        assert r.category == category == r.prize.category, (
            f"result {r.id} category mismatch: {r.prize.category} != {category}"
        )
        assert r.prize.is_assigned and r.prize.assigned_to == r.ticket_number, (
            f"result {r.id} prize snapshot not paired with ticket {r.ticket_number}"
        )
