from collections.abc import Iterator

from src.rf_raffle.domain.models import DrawHistoryEntry


class HistoryLog:
    """Append-only ledger of completed draws, most recent first."""

    def __init__(self) -> None:
        self._entries: list[DrawHistoryEntry] = []

    def prepend(self, entry: DrawHistoryEntry) -> None:
        self._entries.insert(0, entry)

    def latest(self) -> DrawHistoryEntry | None:
        return self._entries[0] if self._entries else None

    def as_list(self) -> list[DrawHistoryEntry]:
        return list(self._entries)

    def __getitem__(self, index: int) -> DrawHistoryEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DrawHistoryEntry]:
        return iter(self._entries)
