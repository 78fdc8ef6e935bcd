"""Random sources for the draw.

Winner selection uses ``secrets`` with rejection sampling so every remaining
ticket is equally likely. Taking ``randbits(32) % n`` directly over-weights low
indices whenever ``n`` does not divide 2**32; values at or above the largest
multiple of ``n`` are discarded and redrawn instead.

The animation preview only needs to look random and uses ``random``.
"""

import random
import secrets
from collections.abc import Callable, Sequence

_RANDOM_BITS = 32
_RANDOM_SPAN = 1 << _RANDOM_BITS


def secure_index(n: int, randbits: Callable[[int], int] = secrets.randbits) -> int:
    """Uniform index in ``[0, n)`` from a cryptographically strong source."""
    if n <= 0:
        raise ValueError(f"pool size must be positive, got {n}")
    if n > _RANDOM_SPAN:
        raise ValueError(f"pool size {n} exceeds {_RANDOM_BITS}-bit sampling range")
    limit = _RANDOM_SPAN - (_RANDOM_SPAN % n)
    while True:
        value = randbits(_RANDOM_BITS)
        if value < limit:
            return value % n


def select_without_replacement(
    pool: Sequence[str],
    count: int,
    randbits: Callable[[int], int] = secrets.randbits,
) -> list[str]:
    """Pick ``count`` distinct items, one uniform draw from the shrinking pool at a time."""
    remaining = list(pool)
    if count > len(remaining):
        raise ValueError(f"cannot select {count} from a pool of {len(remaining)}")
    selected: list[str] = []
    for _ in range(count):
        index = secure_index(len(remaining), randbits)
        selected.append(remaining.pop(index))
    return selected


def preview_sample(pool: Sequence[str], count: int, rng: random.Random | None = None) -> list[str]:
    """Display-only sample for animation ticks. Not fair, not secure."""
    if not pool:
        return []
    return (rng or random).sample(list(pool), min(count, len(pool)))
