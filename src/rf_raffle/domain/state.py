"""RaffleState: the one explicit state struct every command operates on."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from src.rf_raffle.domain.categories import CategorySet
from src.rf_raffle.domain.history import HistoryLog
from src.rf_raffle.domain.models import DrawResult
from src.rf_raffle.domain.owners import OwnerDirectory
from src.rf_raffle.domain.prizes import PrizeCatalog
from src.rf_raffle.domain.tickets import TicketRegistry

DEFAULT_CATEGORIES: tuple[str, ...] = ("A", "B", "C")


@dataclass
class RaffleState:
    tickets: TicketRegistry = field(default_factory=TicketRegistry)
    prizes: PrizeCatalog = field(default_factory=PrizeCatalog)
    categories: CategorySet = field(default_factory=lambda: CategorySet(DEFAULT_CATEGORIES))
    owners: OwnerDirectory = field(default_factory=OwnerDirectory)
    history: HistoryLog = field(default_factory=HistoryLog)
    current_results: list[DrawResult] = field(default_factory=list)
    is_drawing: bool = False

    @classmethod
    def fresh(cls, default_categories: Iterable[str] = DEFAULT_CATEGORIES) -> "RaffleState":
        return cls(categories=CategorySet(default_categories))
