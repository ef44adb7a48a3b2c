"""Core career simulation: models, randomness, engine rules and the monthly session."""

from .autoplay import choose_option, run_simulation
from .character import CharacterCreationError, CharacterDraft, can_start, create_base_player, create_player
from .engine import ENDING_RULES, GameEngineService, SelectionContext
from .loader import ContentBundle, ContentValidationError, builtin_content, load_content, load_content_or_default
from .models import CareerProgress, EventOption, EventRequirement, GameEnding, GameEvent, GameStats, Player, Trait
from .rng import DeterministicRNG, RandomSource, WeightedEntry, pick_weighted
from .session import GameSession

__all__ = [
    "CareerProgress",
    "CharacterCreationError",
    "CharacterDraft",
    "ContentBundle",
    "ContentValidationError",
    "DeterministicRNG",
    "ENDING_RULES",
    "EventOption",
    "EventRequirement",
    "GameEnding",
    "GameEngineService",
    "GameEvent",
    "GameSession",
    "GameStats",
    "Player",
    "RandomSource",
    "SelectionContext",
    "Trait",
    "WeightedEntry",
    "builtin_content",
    "can_start",
    "choose_option",
    "create_base_player",
    "create_player",
    "load_content",
    "load_content_or_default",
    "pick_weighted",
    "run_simulation",
]
