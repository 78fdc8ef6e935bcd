from collections.abc import Iterable, Iterator

from src.rf_common.errors import InvalidRangeError


class TicketRegistry:
    """Tickets eligible for draws. Ordered set: insertion order of first appearance."""

    def __init__(self, tickets: Iterable[str] = ()) -> None:
        # dict keys give O(1) membership with stable iteration order
        self._tickets: dict[str, None] = dict.fromkeys(tickets)

    def add(self, identifiers: Iterable[str]) -> int:
        """Union ``identifiers`` into the registry. Returns how many were new."""
        before = len(self._tickets)
        for ticket in identifiers:
            self._tickets.setdefault(ticket, None)
        return len(self._tickets) - before

    def add_range(self, start: int, end: int) -> int:
        if end < start:
            raise InvalidRangeError(start, end)
        return self.add(str(n) for n in range(start, end + 1))

    def remove(self, identifiers: Iterable[str]) -> int:
        removed = 0
        for ticket in identifiers:
            if ticket in self._tickets:
                del self._tickets[ticket]
                removed += 1
        return removed

    def clear(self) -> None:
        self._tickets.clear()

    def as_list(self) -> list[str]:
        return list(self._tickets)

    def __len__(self) -> int:
        return len(self._tickets)

    def __contains__(self, ticket: object) -> bool:
        return ticket in self._tickets

    def __iter__(self) -> Iterator[str]:
        return iter(self._tickets)
