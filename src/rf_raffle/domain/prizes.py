"""PrizeCatalog: prizes tagged with a category, plus assignment status.

The catalog does not check that a category exists in the CategorySet; callers
validate before adding (the HTTP layer does, see ``api/router.py``).
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from src.rf_common.errors import PrizeAlreadyAssignedError
from src.rf_common.id_generator import generate_id
from src.rf_raffle.domain.models import Prize


@dataclass
class CategoryStats:
    category: str
    total: int
    available: int


class PrizeCatalog:
    def __init__(self) -> None:
        self._prizes: list[Prize] = []

    def add(self, name: str, category: str) -> Prize:
        prize = Prize(id=generate_id("prz_"), name=name, category=category)
        self._prizes.append(prize)
        return prize

    def add_bulk(self, entries: Iterable[tuple[str, str]]) -> int:
        """Add one prize per ``(name, category)`` entry; returns the count created.

        Entries are assumed pre-filtered; there is no partial-failure mode.
        """
        created = [
            Prize(id=generate_id("prz_"), name=name, category=category)
            for name, category in entries
        ]
        self._prizes.extend(created)
        return len(created)

    def get(self, prize_id: str) -> Prize | None:
        for prize in self._prizes:
            if prize.id == prize_id:
                return prize
        return None

    def update(self, prize_id: str, name: str, category: str) -> None:
        """Replace name and category. No-op for unknown ids.

        Assigned prizes are frozen: editing one would drift away from the
        snapshot held in the draw history.
        """
        prize = self.get(prize_id)
        if prize is None:
            return
        if prize.is_assigned:
            raise PrizeAlreadyAssignedError(prize_id)
        prize.name = name
        prize.category = category

    def delete(self, prize_id: str) -> None:
        self._prizes = [p for p in self._prizes if p.id != prize_id]

    def assign(self, prize_id: str, ticket: str) -> None:
        prize = self.get(prize_id)
        if prize is None or prize.is_assigned:
            raise AssertionError(f"prize {prize_id} not assignable")
        prize.is_assigned = True
        prize.assigned_to = ticket

    def available_in_category(self, category: str) -> list[Prize]:
        return [p for p in self._prizes if p.category == category and not p.is_assigned]

    def all_in_category(self, category: str) -> list[Prize]:
        return [p for p in self._prizes if p.category == category]

    def has_category(self, category: str) -> bool:
        return any(p.category == category for p in self._prizes)

    def stats(self, category: str) -> CategoryStats:
        in_category = self.all_in_category(category)
        return CategoryStats(
            category=category,
            total=len(in_category),
            available=sum(1 for p in in_category if not p.is_assigned),
        )

    def __len__(self) -> int:
        return len(self._prizes)

    def __iter__(self) -> Iterator[Prize]:
        return iter(self._prizes)
