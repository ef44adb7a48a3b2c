from __future__ import annotations

import pytest

from programmer_life.core.engine import GameEngineService, SelectionContext


def test_base_weight_floors_at_one(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    context = SelectionContext()
    assert engine.effective_weight(event_factory("zero", weight=0), base_player, context) == 1
    assert engine.effective_weight(event_factory("negative", weight=-5), base_player, context) == 1
    assert engine.effective_weight(event_factory("heavy", weight=7), base_player, context) == 7


@pytest.mark.parametrize(
    ("rarity", "expected"),
    [("Common", 10), ("Uncommon", 11), ("rare", 8), ("EPIC", 7), (" Mythic ", 6), ("Legendary", 10)],
)
def test_rarity_adjustment_is_case_insensitive(rarity, expected, base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    event = event_factory("rated", weight=10, rarity=rarity)
    assert engine.effective_weight(event, base_player, SelectionContext()) == expected


def test_rare_rarity_floor_keeps_weight_positive(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    event = event_factory("mythic", weight=1, rarity="Mythic")
    assert engine.effective_weight(event, base_player, SelectionContext()) == 1


def test_state_driven_tag_boosts(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    context = SelectionContext()
    burnout = event_factory("burnout", weight=2, tags=["burnout"])
    health = event_factory("health", weight=2, tags=["health"])
    innovation = event_factory("innovation", weight=2, tags=["innovation"])

    base_player.stress = 69
    base_player.health = 46
    base_player.motivation = 49
    assert engine.effective_weight(burnout, base_player, context) == 2
    assert engine.effective_weight(health, base_player, context) == 2
    assert engine.effective_weight(innovation, base_player, context) == 2

    base_player.stress = 70
    base_player.health = 45
    base_player.motivation = 50
    assert engine.effective_weight(burnout, base_player, context) == 8
    assert engine.effective_weight(health, base_player, context) == 7
    assert engine.effective_weight(innovation, base_player, context) == 6


def test_unlock_flags_boost_tagged_events(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    base_player.motivation = 10
    innovation = event_factory("lab", weight=1, tags=["innovation"])
    cosmic = event_factory("dream", weight=1, tags=["cosmic"])

    locked = SelectionContext()
    unlocked = SelectionContext(rare_event_unlocked=True, cosmic_insight_unlocked=True)

    assert engine.effective_weight(innovation, base_player, locked) == 1
    assert engine.effective_weight(innovation, base_player, unlocked) == 7
    assert engine.effective_weight(cosmic, base_player, locked) == 1
    assert engine.effective_weight(cosmic, base_player, unlocked) == 9


def test_repeatable_seen_event_gets_bonus(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    review = event_factory("review", weight=3, allow_repeat=True)
    once = event_factory("once", weight=3)
    anonymous = event_factory("", title="Anonymous", weight=3, allow_repeat=True)
    context = SelectionContext(seen_event_ids={"review", "once", ""})

    assert engine.effective_weight(review, base_player, context) == 5
    assert engine.effective_weight(once, base_player, context) == 3
    assert engine.effective_weight(anonymous, base_player, context) == 3


def test_starter_events_fade_after_month_six(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    starter = event_factory("welcome", weight=10, tags=["starter"])
    assert engine.effective_weight(starter, base_player, SelectionContext(month=6)) == 10
    assert engine.effective_weight(starter, base_player, SelectionContext(month=7)) == 4


def test_quirky_bonus(base_player, event_factory, scripted_rng) -> None:
    engine = GameEngineService(scripted_rng())
    quirky = event_factory("duck", weight=2, tags=["quirky"])
    assert engine.effective_weight(quirky, base_player, SelectionContext()) == 3


def test_empty_and_single_pools_skip_the_rng(base_player, event_factory, scripted_rng) -> None:
    rng = scripted_rng()
    engine = GameEngineService(rng)
    only = event_factory("only")

    assert engine.select_weighted_event([], base_player, SelectionContext()) is None
    assert engine.select_weighted_event([only], base_player, SelectionContext()) is only
    assert rng.int_calls == []


def test_roll_walks_cumulative_weights(base_player, event_factory, scripted_rng) -> None:
    first = event_factory("first", weight=2)
    second = event_factory("second", weight=3)
    third = event_factory("third", weight=5)
    pool = [first, second, third]

    for roll, expected in [(0, first), (1, first), (2, second), (4, second), (5, third), (9, third)]:
        rng = scripted_rng(ints=[roll])
        engine = GameEngineService(rng)
        assert engine.select_weighted_event(pool, base_player, SelectionContext()) is expected
        assert rng.int_calls == [(0, 10)]
