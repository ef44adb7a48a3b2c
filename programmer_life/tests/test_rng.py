from __future__ import annotations

import pytest

from programmer_life.core.rng import DeterministicRNG, WeightedEntry, pick_weighted, seed_to_uint32


def test_same_seed_replays_the_same_stream() -> None:
    first = DeterministicRNG.from_seed(42)
    second = DeterministicRNG.from_seed(42)
    assert [first.next_int(0, 1000) for _ in range(20)] == [second.next_int(0, 1000) for _ in range(20)]
    assert first.calls == second.calls == 20


def test_string_and_int_seeds_are_distinct_but_stable() -> None:
    assert seed_to_uint32("42") == seed_to_uint32(42)
    assert seed_to_uint32("alpha") == seed_to_uint32("alpha")
    assert seed_to_uint32("alpha") != seed_to_uint32("beta")
    assert seed_to_uint32("alpha") != 0


def test_floats_and_ints_stay_in_range() -> None:
    rng = DeterministicRNG.from_seed("range")
    for _ in range(500):
        value = rng.next_float()
        assert 0.0 <= value < 1.0
        assert 3 <= rng.next_int(3, 9) < 9


def test_next_int_rejects_empty_range() -> None:
    rng = DeterministicRNG.from_seed(1)
    with pytest.raises(ValueError):
        rng.next_int(5, 5)


def test_pick_weighted_requires_entries() -> None:
    with pytest.raises(ValueError):
        pick_weighted(DeterministicRNG.from_seed(1), [])


def test_pick_weighted_skips_zero_weight_entries(scripted_rng) -> None:
    entries = [WeightedEntry("never", 0), WeightedEntry("always", 4)]
    for roll in range(4):
        assert pick_weighted(scripted_rng(ints=[roll]), entries) == "always"


def test_pick_weighted_all_zero_returns_last(scripted_rng) -> None:
    entries = [WeightedEntry("a", 0), WeightedEntry("b", 0)]
    rng = scripted_rng()
    assert pick_weighted(rng, entries) == "b"
    assert rng.int_calls == [(0, 1)]
