"""Domain models for rf_raffle. Plain dataclasses, no business logic.

Tickets are bare ``str`` identifiers and categories are bare upper-case
``str`` labels; neither gets a wrapper type.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Owner:
    id: str
    name: str
    ticket_numbers: list[str] = field(default_factory=list)


@dataclass
class Prize:
    id: str
    name: str
    category: str
    is_assigned: bool = False
    assigned_to: str | None = None  # set together with is_assigned, by a draw only

    def snapshot(self) -> "PrizeSnapshot":
        return PrizeSnapshot(
            id=self.id,
            name=self.name,
            category=self.category,
            is_assigned=self.is_assigned,
            assigned_to=self.assigned_to,
        )


@dataclass(frozen=True)
class PrizeSnapshot:
    """Read-only copy of a prize as it stood when a draw awarded it."""

    id: str
    name: str
    category: str
    is_assigned: bool
    assigned_to: str | None


@dataclass(frozen=True)
class DrawResult:
    """One winning ticket of a single draw invocation."""

    id: str
    ticket_number: str
    prize: PrizeSnapshot
    category: str
    timestamp: datetime


@dataclass(frozen=True)
class DrawHistoryEntry:
    id: str
    results: tuple[DrawResult, ...]
    category: str
    group_size: int
    timestamp: datetime
