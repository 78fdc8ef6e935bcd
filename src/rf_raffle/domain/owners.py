"""OwnerDirectory: who holds which tickets.

A lookup aid only: draws never consult it, and its ticket lists may name
tickets that are not (or no longer) in the TicketRegistry. Ownership is not
exclusive, so ``find_by_ticket`` returns the first match in directory order.
"""

from collections.abc import Iterable, Iterator, Sequence

from src.rf_common.id_generator import generate_id
from src.rf_raffle.domain.models import Owner


class OwnerDirectory:
    def __init__(self) -> None:
        self._owners: list[Owner] = []

    def add(self, name: str, ticket_numbers: Sequence[str]) -> Owner:
        owner = Owner(id=generate_id("own_"), name=name, ticket_numbers=list(ticket_numbers))
        self._owners.append(owner)
        return owner

    def add_bulk(self, entries: Iterable[tuple[str, Sequence[str]]]) -> int:
        created = [
            Owner(id=generate_id("own_"), name=name, ticket_numbers=list(tickets))
            for name, tickets in entries
        ]
        self._owners.extend(created)
        return len(created)

    def get(self, owner_id: str) -> Owner | None:
        for owner in self._owners:
            if owner.id == owner_id:
                return owner
        return None

    def update(self, owner_id: str, name: str, ticket_numbers: Sequence[str]) -> None:
        owner = self.get(owner_id)
        if owner is None:
            return
        owner.name = name
        owner.ticket_numbers = list(ticket_numbers)

    def delete(self, owner_id: str) -> None:
        self._owners = [o for o in self._owners if o.id != owner_id]

    def reset(self) -> None:
        self._owners = []

    def find_by_ticket(self, ticket: str) -> Owner | None:
        for owner in self._owners:
            if ticket in owner.ticket_numbers:
                return owner
        return None

    def all_tickets(self) -> list[str]:
        """De-duplicated union of every owner's tickets, first appearance wins."""
        seen: dict[str, None] = {}
        for owner in self._owners:
            seen.update(dict.fromkeys(owner.ticket_numbers))
        return list(seen)

    def total_tickets(self) -> int:
        return sum(len(o.ticket_numbers) for o in self._owners)

    def __len__(self) -> int:
        return len(self._owners)

    def __iter__(self) -> Iterator[Owner]:
        return iter(self._owners)
