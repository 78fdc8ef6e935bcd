"""RaffleController, the single owner of raffle state.

Every command from the outer layers goes through one controller instance,
which is handed to callers explicitly (FastAPI dependency in ``api/``).
All commands are synchronous except ``execute_draw``.
"""

import logging
from collections.abc import Iterable, Sequence

from config.settings import Settings
from src.rf_raffle.domain.categories import normalize_category
from src.rf_raffle.domain.models import DrawHistoryEntry, DrawResult, Owner, Prize
from src.rf_raffle.domain.prizes import CategoryStats
from src.rf_raffle.domain.state import DEFAULT_CATEGORIES, RaffleState
from src.rf_raffle.engine.engine import (
    DrawEngine,
    TickCallback,
    draw_shortfall,
    validate_group_size,
)

logger = logging.getLogger(__name__)


class RaffleController:
    def __init__(
        self,
        engine: DrawEngine | None = None,
        default_categories: Sequence[str] = DEFAULT_CATEGORIES,
    ) -> None:
        self._engine = engine or DrawEngine()
        self._default_categories = tuple(default_categories)
        self._state = RaffleState.fresh(self._default_categories)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RaffleController":
        engine = DrawEngine(
            animation_ms=settings.DRAW_ANIMATION_MS,
            tick_ms=settings.DRAW_TICK_MS,
        )
        return cls(engine=engine, default_categories=settings.DEFAULT_CATEGORIES)

    @property
    def state(self) -> RaffleState:
        """Live state. Read it, do not mutate it; mutations go through commands."""
        return self._state

    @property
    def default_categories(self) -> tuple[str, ...]:
        return self._default_categories

    # --- Tickets ---

    def add_tickets(self, tickets: Iterable[str]) -> int:
        return self._state.tickets.add(tickets)

    def add_ticket_range(self, start: int, end: int) -> int:
        return self._state.tickets.add_range(start, end)

    def remove_tickets(self, tickets: Iterable[str]) -> int:
        return self._state.tickets.remove(tickets)

    def clear_tickets(self) -> None:
        self._state.tickets.clear()

    def tickets(self) -> list[str]:
        return self._state.tickets.as_list()

    # --- Categories ---

    def add_category(self, name: str) -> bool:
        return self._state.categories.add(name)

    def delete_category(self, name: str) -> bool:
        return self._state.categories.delete(name, self._state.prizes)

    def categories(self) -> list[str]:
        return self._state.categories.as_list()

    def has_category(self, name: str) -> bool:
        return normalize_category(name) in self._state.categories

    # --- Prizes ---

    def add_prize(self, name: str, category: str) -> Prize:
        return self._state.prizes.add(name, category)

    def add_bulk_prizes(self, entries: Iterable[tuple[str, str]]) -> int:
        return self._state.prizes.add_bulk(entries)

    def update_prize(self, prize_id: str, name: str, category: str) -> None:
        self._state.prizes.update(prize_id, name, category)

    def delete_prize(self, prize_id: str) -> None:
        self._state.prizes.delete(prize_id)

    def get_prize(self, prize_id: str) -> Prize | None:
        return self._state.prizes.get(prize_id)

    def prizes(self) -> list[Prize]:
        return list(self._state.prizes)

    def available_prizes(self, category: str) -> list[Prize]:
        return self._state.prizes.available_in_category(category)

    def prizes_by_category(self, category: str) -> list[Prize]:
        return self._state.prizes.all_in_category(category)

    def category_stats(self) -> list[CategoryStats]:
        return [self._state.prizes.stats(c) for c in self._state.categories]

    # --- Owners ---

    def add_owner(self, name: str, ticket_numbers: Sequence[str]) -> Owner:
        return self._state.owners.add(name, ticket_numbers)

    def update_owner(self, owner_id: str, name: str, ticket_numbers: Sequence[str]) -> None:
        self._state.owners.update(owner_id, name, ticket_numbers)

    def delete_owner(self, owner_id: str) -> None:
        self._state.owners.delete(owner_id)

    def add_bulk_owners(self, entries: Iterable[tuple[str, Sequence[str]]]) -> int:
        return self._state.owners.add_bulk(entries)

    def reset_owners(self) -> None:
        self._state.owners.reset()

    def get_owner(self, owner_id: str) -> Owner | None:
        return self._state.owners.get(owner_id)

    def owners(self) -> list[Owner]:
        return list(self._state.owners)

    def owner_by_ticket(self, ticket: str) -> Owner | None:
        return self._state.owners.find_by_ticket(ticket)

    def all_owner_tickets(self) -> list[str]:
        return self._state.owners.all_tickets()

    # --- Draw ---

    async def execute_draw(
        self,
        category: str,
        group_size: int,
        on_tick: TickCallback | None = None,
    ) -> list[DrawResult]:
        return await self._engine.execute_draw(self._state, category, group_size, on_tick)

    def draw_shortfall(self, category: str, group_size: int) -> str | None:
        return draw_shortfall(self._state, category, validate_group_size(group_size))

    def cancel_draw(self) -> bool:
        return self._engine.cancel()

    @property
    def is_drawing(self) -> bool:
        return self._state.is_drawing

    def current_results(self) -> list[DrawResult]:
        return list(self._state.current_results)

    def clear_current_results(self) -> None:
        self._state.current_results = []

    def history(self) -> list[DrawHistoryEntry]:
        return self._state.history.as_list()

    def last_draw(self) -> DrawHistoryEntry | None:
        return self._state.history.latest()

    # --- Global ---

    def reset_all(self) -> None:
        """Swap in a fresh state in one step; an in-flight draw is cancelled first."""
        if self._engine.cancel():
            logger.warning("Reset cancelled an in-flight draw")
        self._state = RaffleState.fresh(self._default_categories)
        logger.info("Raffle reset: categories=%s", ",".join(self._default_categories))
