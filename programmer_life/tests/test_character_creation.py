from __future__ import annotations

import pytest

from programmer_life.core.character import (
    ANONYMOUS_NAME,
    CharacterCreationError,
    CharacterDraft,
    can_start,
    create_base_player,
    create_player,
)
from programmer_life.core.loader import builtin_content


def test_base_player_starting_stats() -> None:
    player = create_base_player("  Grace  ")
    assert player.name == "Grace"
    assert player.age == 22
    assert (player.programming_skill, player.algorithm_skill, player.debugging_skill, player.communication_skill) == (
        50,
        45,
        40,
        35,
    )
    assert (player.stress, player.health, player.motivation, player.salary) == (20, 80, 70, 8000)


def test_blank_base_name_becomes_anonymous() -> None:
    assert create_base_player("   ").name == ANONYMOUS_NAME


def test_traits_apply_on_creation() -> None:
    traits = builtin_content().trait_by_name
    ace = create_player("Ada", traits["Algorithm Ace"])
    assert ace.algorithm_skill == 60
    assert ace.programming_skill == 55

    balanced = create_player("Lin", traits["Work-Life Balance"])
    assert balanced.health == 90
    assert balanced.stress == 10

    learner = create_player("Sam", traits["Learning Machine"])
    assert learner.communication_skill == 40
    assert learner.health == 75


def test_start_requires_name_and_trait() -> None:
    trait = builtin_content().traits[0]
    assert can_start("Ada", trait)
    assert not can_start("   ", trait)
    assert not can_start(None, trait)
    assert not can_start("Ada", None)
    with pytest.raises(CharacterCreationError):
        create_player(" ", trait)
    with pytest.raises(CharacterCreationError):
        create_player("Ada", None)
    with pytest.raises(CharacterCreationError):
        create_player(None, trait)


def test_draft_defaults_to_first_trait() -> None:
    traits = builtin_content().traits
    draft = CharacterDraft(traits)
    assert draft.selected_trait is traits[0]
    assert not draft.can_start()

    draft.name = "Ada"
    draft.select(2)
    assert draft.can_start()
    player = draft.build()
    assert player.communication_skill == 50
    assert player.motivation == 75


def test_draft_selection_bounds() -> None:
    draft = CharacterDraft(builtin_content().traits, name="Ada")
    with pytest.raises(IndexError):
        draft.select(99)
    draft.select(None)
    assert draft.selected_trait is None
    assert not draft.can_start()


def test_draft_without_traits_cannot_start() -> None:
    draft = CharacterDraft([], name="Ada")
    assert draft.selected_index is None
    assert not draft.can_start()
