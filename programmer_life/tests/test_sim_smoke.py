from __future__ import annotations

import pytest

from programmer_life.core.autoplay import choose_option, run_simulation
from programmer_life.core.loader import builtin_content, load_content
from programmer_life.core.models import EventOption, GameEvent


@pytest.mark.parametrize("policy", ["safe", "random", "greedy"])
def test_smoke_run_full_career_without_crash(policy):
    content = load_content()
    session = run_simulation(9991, content, policy=policy)

    assert session.is_completed
    assert session.months_played == 36
    assert session.events_completed == 36
    assert session.player.age == 25
    assert session.timeline[-1].type == "ending"


def test_builtin_content_plays_a_long_career():
    session = run_simulation("builtin", builtin_content(), policy="greedy", total_months=60, trait_name="Work-Life Balance")
    assert session.is_completed
    assert session.events_completed == 60


def test_policies_pick_expected_options(scripted_rng):
    calm = EventOption(text="Calm", stress_delta=-2, health_delta=1)
    rich = EventOption(text="Rich", salary_delta=5000, programming_skill_delta=2, stress_delta=6)
    bold = EventOption(text="Bold", leadership_delta=4, stress_delta=-2, health_delta=3)
    event = GameEvent(id="pick", title="Pick", options=[calm, rich, bold])

    assert choose_option("safe", event, scripted_rng()) is bold
    assert choose_option("greedy", event, scripted_rng()) is rich
    assert choose_option("random", event, scripted_rng(ints=[1])) is rich
    assert choose_option("safe", GameEvent(title="Empty"), scripted_rng()) is None
