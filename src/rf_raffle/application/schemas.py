"""Pydantic schemas for rf_raffle API requests and responses."""

from pydantic import BaseModel, Field, field_validator, model_validator

from config.settings import settings
from src.rf_raffle.domain.models import (
    DrawHistoryEntry,
    DrawResult,
    Owner,
    Prize,
    PrizeSnapshot,
)
from src.rf_raffle.domain.prizes import CategoryStats


def _clean_tickets(tickets: list[str]) -> list[str]:
    return [t.strip() for t in tickets if t.strip()]


# ---------------------------------------------------------------------------
# Tickets
# ---------------------------------------------------------------------------


class AddTicketsRequest(BaseModel):
    tickets: list[str]

    @field_validator("tickets")
    @classmethod
    def strip_blank(cls, v: list[str]) -> list[str]:
        return _clean_tickets(v)


class TicketRangeRequest(BaseModel):
    start: int
    end: int

    @model_validator(mode="after")
    def bounded_size(self) -> "TicketRangeRequest":
        # end < start is left to the registry, which raises InvalidRangeError
        if self.end - self.start + 1 > settings.MAX_TICKET_RANGE:
            raise ValueError(f"Range covers more than {settings.MAX_TICKET_RANGE} tickets")
        return self


class TicketsResponse(BaseModel):
    count: int
    tickets: list[str]


class TicketChangeResponse(BaseModel):
    changed: int
    count: int


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class AddCategoryRequest(BaseModel):
    name: str


class CategoryStatsOut(BaseModel):
    category: str
    total: int
    available: int

    @classmethod
    def from_domain(cls, s: CategoryStats) -> "CategoryStatsOut":
        return cls(category=s.category, total=s.total, available=s.available)


# ---------------------------------------------------------------------------
# Prizes
# ---------------------------------------------------------------------------


class PrizeIn(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return v.strip().upper()


class BulkPrizesRequest(BaseModel):
    prizes: list[PrizeIn]


class PrizeOut(BaseModel):
    id: str
    name: str
    category: str
    is_assigned: bool
    assigned_to: str | None

    @classmethod
    def from_domain(cls, p: Prize | PrizeSnapshot) -> "PrizeOut":
        return cls(
            id=p.id,
            name=p.name,
            category=p.category,
            is_assigned=p.is_assigned,
            assigned_to=p.assigned_to,
        )


# ---------------------------------------------------------------------------
# Owners
# ---------------------------------------------------------------------------


class OwnerIn(BaseModel):
    name: str = Field(min_length=1)
    ticket_numbers: list[str]

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("ticket_numbers")
    @classmethod
    def require_tickets(cls, v: list[str]) -> list[str]:
        cleaned = _clean_tickets(v)
        if not cleaned:
            raise ValueError("at least one ticket number is required")
        return cleaned


class BulkOwnersRequest(BaseModel):
    owners: list[OwnerIn]


class OwnerOut(BaseModel):
    id: str
    name: str
    ticket_numbers: list[str]

    @classmethod
    def from_domain(cls, o: Owner) -> "OwnerOut":
        return cls(id=o.id, name=o.name, ticket_numbers=list(o.ticket_numbers))


class OwnerListResponse(BaseModel):
    items: list[OwnerOut]
    total_tickets: int


# ---------------------------------------------------------------------------
# Draws
# ---------------------------------------------------------------------------


class DrawRequest(BaseModel):
    category: str
    group_size: int = Field(1, ge=1, le=settings.MAX_GROUP_SIZE)

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return v.strip().upper()


class DrawResultOut(BaseModel):
    id: str
    ticket_number: str
    prize: PrizeOut
    category: str
    timestamp: str
    owner_name: str | None = None

    @classmethod
    def from_domain(cls, r: DrawResult, owner: Owner | None = None) -> "DrawResultOut":
        return cls(
            id=r.id,
            ticket_number=r.ticket_number,
            prize=PrizeOut.from_domain(r.prize),
            category=r.category,
            timestamp=r.timestamp.isoformat(),
            owner_name=owner.name if owner is not None else None,
        )


class DrawResponse(BaseModel):
    executed: bool
    results: list[DrawResultOut]


class HistoryEntryOut(BaseModel):
    id: str
    category: str
    group_size: int
    timestamp: str
    results: list[DrawResultOut]

    @classmethod
    def from_domain(cls, e: DrawHistoryEntry) -> "HistoryEntryOut":
        return cls(
            id=e.id,
            category=e.category,
            group_size=e.group_size,
            timestamp=e.timestamp.isoformat(),
            results=[DrawResultOut.from_domain(r) for r in e.results],
        )


class ReadinessResponse(BaseModel):
    category: str
    group_size: int
    can_draw: bool
    reason: str | None
    is_drawing: bool


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


class RaffleSnapshot(BaseModel):
    ticket_count: int
    categories: list[CategoryStatsOut]
    prize_count: int
    owner_count: int
    history_count: int
    last_draw_at: str | None
    current_results: list[DrawResultOut]
    is_drawing: bool
