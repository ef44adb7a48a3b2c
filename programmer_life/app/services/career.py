from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from programmer_life.core.engine import GameEngineService
from programmer_life.core.loader import ContentBundle, load_content_or_default
from programmer_life.core.models import Player
from programmer_life.core.rng import DeterministicRNG
from programmer_life.core.session import GameSession
from programmer_life.core.settings import GameplaySettings

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "PLS_SEED"


def _normalize_seed(raw_seed: str) -> int | str:
    try:
        return int(raw_seed)
    except ValueError:
        return raw_seed


def compute_run_seed(gameplay: GameplaySettings, run_counter: int) -> int | str:
    env_seed = os.environ.get(SEED_ENV_VAR, "").strip()
    if env_seed:
        return _normalize_seed(env_seed)
    if gameplay.seeded_mode:
        return gameplay.base_seed + run_counter
    return int(time.time_ns() & 0xFFFFFFFF)


def load_game_content(gameplay: GameplaySettings) -> ContentBundle:
    content_dir = Path(gameplay.content_dir) if gameplay.content_dir else None
    return load_content_or_default(content_dir)


def start_session(
    player: Player,
    content: ContentBundle,
    gameplay: GameplaySettings,
    run_counter: int,
) -> GameSession:
    seed = compute_run_seed(gameplay, run_counter)
    rng = DeterministicRNG.from_seed(seed)
    logger.info("Starting run %d for %s with seed %s.", run_counter, player.name, seed)
    return GameSession(
        player=player,
        content=content,
        engine=GameEngineService(rng),
        rng=rng,
        total_months=gameplay.total_months,
    )
