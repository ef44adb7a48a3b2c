from __future__ import annotations

import os
from typing import Iterable

import pytest

from programmer_life.core.models import EventOption, GameEvent, Player

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class ScriptedRandom:
    """Random source that replays predetermined draws.

    Once a script runs out, floats default to 0.99 (no ambient event, no bias)
    and ints default to the lower bound.
    """

    def __init__(self, ints: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        self.ints = list(ints)
        self.floats = list(floats)
        self.int_calls: list[tuple[int, int]] = []
        self.float_calls = 0

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        self.int_calls.append((min_inclusive, max_exclusive))
        if not self.ints:
            return min_inclusive
        value = self.ints.pop(0)
        assert min_inclusive <= value < max_exclusive
        return value

    def next_float(self) -> float:
        self.float_calls += 1
        if not self.floats:
            return 0.99
        return self.floats.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def base_player() -> Player:
    return Player(
        name="Ada",
        programming_skill=50,
        algorithm_skill=45,
        debugging_skill=40,
        communication_skill=35,
        stress=20,
        health=80,
        motivation=70,
        salary=8000,
    )


def make_event(event_id: str, **overrides) -> GameEvent:
    payload = {
        "id": event_id,
        "title": event_id.replace("-", " ").title() or "Untitled",
        "options": [EventOption(text="Do it", stress_delta=1)],
    }
    payload.update(overrides)
    return GameEvent(**payload)


@pytest.fixture
def event_factory():
    return make_event
