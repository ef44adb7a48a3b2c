from __future__ import annotations

from dataclasses import dataclass, field

from .models import START_AGE, Player, Trait

ANONYMOUS_NAME = "Anonymous Dev"


class CharacterCreationError(ValueError):
    pass


def create_base_player(name: str) -> Player:
    clean_name = name.strip() if name else ""
    return Player(
        name=clean_name or ANONYMOUS_NAME,
        age=START_AGE,
        programming_skill=50,
        algorithm_skill=45,
        debugging_skill=40,
        communication_skill=35,
        stress=20,
        health=80,
        motivation=70,
        salary=8000,
    )


def can_start(name: str | None, trait: Trait | None) -> bool:
    return bool(name and name.strip()) and trait is not None


def create_player(name: str | None, trait: Trait | None) -> Player:
    if name is None or trait is None or not can_start(name, trait):
        raise CharacterCreationError("A non-blank name and a trait are required to start a career.")
    player = create_base_player(name)
    player.apply_trait(trait)
    return player


@dataclass(slots=True)
class CharacterDraft:
    traits: list[Trait]
    name: str = ""
    selected_index: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.selected_index is None and self.traits:
            self.selected_index = 0

    @property
    def selected_trait(self) -> Trait | None:
        if self.selected_index is None or not (0 <= self.selected_index < len(self.traits)):
            return None
        return self.traits[self.selected_index]

    def select(self, index: int | None) -> None:
        if index is not None and not (0 <= index < len(self.traits)):
            raise IndexError(f"Trait index {index} out of range.")
        self.selected_index = index

    def can_start(self) -> bool:
        return can_start(self.name, self.selected_trait)

    def build(self) -> Player:
        return create_player(self.name, self.selected_trait)
