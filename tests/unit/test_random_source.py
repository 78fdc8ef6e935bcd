"""Unit tests for the draw random sources."""

import random
from collections import Counter

import pytest

from src.rf_raffle.engine.random_source import (
    preview_sample,
    secure_index,
    select_without_replacement,
)


def _scripted(values: list[int]):
    it = iter(values)
    calls: list[int] = []

    def randbits(bits: int) -> int:
        calls.append(bits)
        return next(it)

    return randbits, calls


class TestSecureIndex:
    def test_value_below_limit_is_reduced_mod_n(self) -> None:
        randbits, calls = _scripted([5])
        assert secure_index(3, randbits) == 2
        assert calls == [32]

    def test_value_in_biased_tail_is_redrawn(self) -> None:
        # 2**32 % 3 == 1, so 2**32 - 1 is the single rejected value for n=3
        randbits, calls = _scripted([2**32 - 1, 4])
        assert secure_index(3, randbits) == 1
        assert len(calls) == 2

    def test_power_of_two_never_rejects(self) -> None:
        randbits, calls = _scripted([2**32 - 1])
        assert secure_index(4, randbits) == 3
        assert len(calls) == 1

    def test_pool_of_one(self) -> None:
        randbits, _ = _scripted([123456])
        assert secure_index(1, randbits) == 0

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_pool_rejected(self, n: int) -> None:
        with pytest.raises(ValueError):
            secure_index(n)

    def test_roughly_uniform_with_real_source(self) -> None:
        counts = Counter(secure_index(3) for _ in range(3000))
        assert set(counts) == {0, 1, 2}
        assert all(800 < c < 1200 for c in counts.values())


class TestSelectWithoutReplacement:
    def test_picks_from_shrinking_pool(self) -> None:
        # index 0 of [a,b,c] -> a; index 1 of [b,c] -> c
        randbits, _ = _scripted([0, 1])
        assert select_without_replacement(["a", "b", "c"], 2, randbits) == ["a", "c"]

    def test_all_distinct(self) -> None:
        pool = [str(i) for i in range(50)]
        selected = select_without_replacement(pool, 50)
        assert sorted(selected, key=int) == pool

    def test_does_not_mutate_input(self) -> None:
        pool = ["a", "b"]
        select_without_replacement(pool, 1)
        assert pool == ["a", "b"]

    def test_count_larger_than_pool(self) -> None:
        with pytest.raises(ValueError):
            select_without_replacement(["a"], 2)


class TestPreviewSample:
    def test_sample_size_and_membership(self) -> None:
        pool = ["1", "2", "3", "4"]
        sample = preview_sample(pool, 2, random.Random(7))
        assert len(sample) == 2
        assert set(sample) <= set(pool)

    def test_clamped_to_pool(self) -> None:
        assert sorted(preview_sample(["1", "2"], 5)) == ["1", "2"]

    def test_empty_pool(self) -> None:
        assert preview_sample([], 3) == []
