"""DrawEngine: selects winning tickets and assigns prizes for one category."""

import asyncio
import logging
import math
import secrets
from collections.abc import Awaitable, Callable

from src.rf_common.datetime_utils import utc_now
from src.rf_common.errors import DrawCancelledError, InvalidGroupSizeError
from src.rf_common.id_generator import generate_id
from src.rf_raffle.domain.invariants import verify_draw_results, verify_invariants
from src.rf_raffle.domain.models import DrawHistoryEntry, DrawResult
from src.rf_raffle.domain.state import RaffleState
from src.rf_raffle.engine.random_source import preview_sample, select_without_replacement

logger = logging.getLogger(__name__)

TickCallback = Callable[[list[str]], None]


def validate_group_size(group_size: object) -> int:
    # bool is an int subclass; True must not read as a group of one
    if isinstance(group_size, bool) or not isinstance(group_size, int) or group_size <= 0:
        raise InvalidGroupSizeError(group_size)
    return group_size


def draw_shortfall(state: RaffleState, category: str, group_size: int) -> str | None:
    """Why a draw cannot run right now, or None when it can."""
    tickets = len(state.tickets)
    if tickets < group_size:
        return f"Need {group_size - tickets} more tickets"
    prizes = len(state.prizes.available_in_category(category))
    if prizes < group_size:
        return f"Need {group_size - prizes} more prizes in Category {category}"
    return None


class DrawEngine:
    """Runs draws against a RaffleState.

    A draw has two phases. The animation phase only feeds random previews to
    ``on_tick`` and touches no state; it suspends between ticks so readers stay
    responsive. The selection phase runs without suspending, so its result is
    committed atomically with respect to every other command.
    """

    def __init__(
        self,
        animation_ms: int = 2500,
        tick_ms: int = 80,
        randbits: Callable[[int], int] = secrets.randbits,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self._ticks = math.ceil(animation_ms / tick_ms) if animation_ms > 0 else 0
        self._tick_seconds = tick_ms / 1000
        self._randbits = randbits
        self._sleep = sleep
        self._cancel_event: asyncio.Event | None = None

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def in_flight(self) -> bool:
        return self._cancel_event is not None

    def cancel(self) -> bool:
        """Abort the in-flight draw before it commits. Returns False if none is running."""
        if self._cancel_event is None:
            return False
        self._cancel_event.set()
        return True

    async def execute_draw(
        self,
        state: RaffleState,
        category: str,
        group_size: int,
        on_tick: TickCallback | None = None,
    ) -> list[DrawResult]:
        """Draw ``group_size`` winners in ``category``.

        Returns an empty list without touching state when another draw is in
        flight or when there are fewer tickets or available prizes than
        ``group_size``.
        """
        validate_group_size(group_size)

        if state.is_drawing:
            logger.info("Draw rejected: another draw is in flight (category=%s)", category)
            return []
        shortfall = draw_shortfall(state, category, group_size)
        if shortfall is not None:
            logger.info("Draw skipped: category=%s size=%d: %s", category, group_size, shortfall)
            return []

        # No await between the checks above and this flag: nothing can interleave.
        state.is_drawing = True
        cancel_event = asyncio.Event()
        self._cancel_event = cancel_event
        try:
            await self._animate(state, group_size, on_tick, cancel_event)
            if cancel_event.is_set():
                logger.warning("Draw cancelled: category=%s size=%d", category, group_size)
                raise DrawCancelledError(category)
            return self._select_and_commit(state, category, group_size)
        finally:
            state.is_drawing = False
            if self._cancel_event is cancel_event:
                self._cancel_event = None

    async def _animate(
        self,
        state: RaffleState,
        group_size: int,
        on_tick: TickCallback | None,
        cancel_event: asyncio.Event,
    ) -> None:
        for _ in range(self._ticks):
            await self._sleep(self._tick_seconds)
            if cancel_event.is_set():
                return
            if on_tick is not None:
                on_tick(preview_sample(state.tickets.as_list(), group_size))

    def _select_and_commit(
        self, state: RaffleState, category: str, group_size: int
    ) -> list[DrawResult]:
        # Other commands may have run during the animation; re-check on current state.
        shortfall = draw_shortfall(state, category, group_size)
        if shortfall is not None:
            logger.warning(
                "Draw abandoned after animation: category=%s size=%d: %s",
                category,
                group_size,
                shortfall,
            )
            return []

        prizes = state.prizes.available_in_category(category)[:group_size]
        selected = select_without_replacement(
            state.tickets.as_list(), group_size, self._randbits
        )

        now = utc_now()
        state.tickets.remove(selected)
        results: list[DrawResult] = []
        for ticket, prize in zip(selected, prizes):
            state.prizes.assign(prize.id, ticket)
            results.append(
                DrawResult(
                    id=generate_id("res_"),
                    ticket_number=ticket,
                    prize=prize.snapshot(),
                    category=category,
                    timestamp=now,
                )
            )

        state.current_results = list(results)
        state.history.prepend(
            DrawHistoryEntry(
                id=generate_id("drw_"),
                results=tuple(results),
                category=category,
                group_size=group_size,
                timestamp=now,
            )
        )

        verify_draw_results(results, category)
        verify_invariants(state)
        logger.info(
            "Draw committed: category=%s winners=%s",
            category,
            ",".join(f"{r.ticket_number}->{r.prize.name}" for r in results),
        )
        return results
