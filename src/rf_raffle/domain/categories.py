import logging
from collections.abc import Iterable, Iterator

from src.rf_raffle.domain.prizes import PrizeCatalog

logger = logging.getLogger(__name__)


def normalize_category(name: str) -> str:
    return name.strip().upper()


class CategorySet:
    """Valid category labels, in creation order. Labels are opaque upper-case strings."""

    def __init__(self, labels: Iterable[str] = ()) -> None:
        self._labels: list[str] = []
        for label in labels:
            self.add(label)

    def add(self, name: str) -> bool:
        label = normalize_category(name)
        if not label or label in self._labels:
            return False
        self._labels.append(label)
        logger.info("Category added: %s", label)
        return True

    def delete(self, name: str, prizes: PrizeCatalog) -> bool:
        """Remove ``name`` unless a prize still references it.

        Deleting an unknown label succeeds without effect, the same as the
        other delete operations.
        """
        label = normalize_category(name)
        if prizes.has_category(label):
            return False
        if label in self._labels:
            self._labels.remove(label)
            logger.info("Category deleted: %s", label)
        return True

    def as_list(self) -> list[str]:
        return list(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)
