from __future__ import annotations

from typing import Literal

from .character import create_player
from .engine import GameEngineService
from .loader import ContentBundle
from .models import EventOption, GameEvent
from .rng import DeterministicRNG, RandomSource
from .session import DEFAULT_TOTAL_MONTHS, GameSession

AutopickPolicy = Literal["safe", "random", "greedy"]

SIMULATED_PLAYER_NAME = "Sim Dev"


def _gain_score(option: EventOption) -> int:
    return (
        option.programming_skill_delta
        + option.algorithm_skill_delta
        + option.debugging_skill_delta
        + option.communication_skill_delta
        + option.salary_delta // 500
        + option.leadership_delta
        + option.innovation_delta
    )


def choose_option(policy: AutopickPolicy, event: GameEvent, rng: RandomSource) -> EventOption | None:
    options = event.options
    if not options:
        return None

    if policy == "random":
        return options[rng.next_int(0, len(options))]

    if policy == "safe":
        ordered = sorted(
            enumerate(options),
            key=lambda pair: (pair[1].stress_delta, -pair[1].health_delta, pair[0]),
        )
        return ordered[0][1]

    # greedy
    ordered = sorted(
        enumerate(options),
        key=lambda pair: (_gain_score(pair[1]), -pair[1].stress_delta, -pair[0]),
        reverse=True,
    )
    return ordered[0][1]


def run_simulation(
    seed: int | str,
    content: ContentBundle,
    policy: AutopickPolicy = "safe",
    total_months: int = DEFAULT_TOTAL_MONTHS,
    trait_name: str | None = None,
) -> GameSession:
    trait = content.trait_by_name[trait_name] if trait_name else content.traits[0]
    rng = DeterministicRNG.from_seed(seed)
    session = GameSession(
        player=create_player(SIMULATED_PLAYER_NAME, trait),
        content=content,
        engine=GameEngineService(rng),
        rng=rng,
        total_months=total_months,
    )
    while not session.is_completed and session.current_event is not None:
        option = choose_option(policy, session.current_event, rng)
        if option is None:
            session.complete_game()
            break
        session.select_option(option)
    return session
