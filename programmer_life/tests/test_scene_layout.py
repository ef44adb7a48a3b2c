from __future__ import annotations

import pygame
import pytest

from programmer_life.app.scenes.character_creation import CharacterCreationScene
from programmer_life.app.scenes.core import Scene
from programmer_life.app.scenes.ending import EndingScene
from programmer_life.app.scenes.game import GameScene
from programmer_life.core.engine import GameEngineService
from programmer_life.core.loader import ContentBundle, load_content
from programmer_life.core.models import EventOption, EventRequirement, GameEvent, Player, Trait
from programmer_life.core.rng import DeterministicRNG
from programmer_life.core.session import GameSession


class _AppStub:
    def __init__(self, size: tuple[int, int] = (1280, 720), total_months: int = 36, content: ContentBundle | None = None) -> None:
        pygame.init()
        self.screen = pygame.Surface(size)
        self.content = content or load_content()
        self.session: GameSession | None = None
        self.total_months = total_months
        self.changed_scene = None
        self.quit_called = False
        self.ended = False

    def virtual_mouse_pos(self) -> tuple[int, int]:
        return (0, 0)

    def change_scene(self, scene) -> None:
        self.changed_scene = scene

    def start_career(self, player: Player) -> GameSession:
        rng = DeterministicRNG.from_seed(11)
        self.session = GameSession(player, self.content, GameEngineService(rng), rng, total_months=self.total_months)
        return self.session

    def end_career(self) -> None:
        self.ended = True
        self.session = None

    def quit(self) -> None:
        self.quit_called = True


def _contains(container: pygame.Rect, child: pygame.Rect) -> bool:
    return container.left <= child.left and container.top <= child.top and container.right >= child.right and container.bottom >= child.bottom


def _key(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="")


def test_character_creation_layout_and_start() -> None:
    app = _AppStub()
    scene = CharacterCreationScene()
    scene._build_layout(app)
    screen = app.screen.get_rect()
    assert _contains(screen, scene._panel_rect)
    assert _contains(scene._panel_rect, scene.start_button.rect)
    assert len(scene.trait_list.items) == len(app.content.traits)
    assert scene.start_button.enabled is False

    scene.handle_event(app, pygame.event.Event(pygame.TEXTINPUT, text="Ada"))
    scene.handle_event(app, _key(pygame.K_DOWN))
    assert scene.draft.name == "Ada"
    assert scene.draft.selected_index == 1

    scene.handle_event(app, _key(pygame.K_RETURN))
    assert isinstance(app.changed_scene, GameScene)
    assert app.session is not None
    assert app.session.player.debugging_skill == 55


def test_start_goes_straight_to_ending_when_no_event_is_eligible() -> None:
    later = GameEvent(id="later", title="Later", requirement=EventRequirement(min_month=3), options=[EventOption(text="Go")])
    app = _AppStub(content=ContentBundle.build([later], [Trait(name="Steady")], source="builtin"))
    scene = CharacterCreationScene()
    scene._build_layout(app)
    scene.draft.name = "Ada"
    scene.draft.select(0)

    scene._start(app)

    assert app.session.is_completed
    assert isinstance(app.changed_scene, EndingScene)


def test_character_creation_render_does_not_crash() -> None:
    app = _AppStub()
    scene = CharacterCreationScene(message="Enter a name and pick a trait first.")
    scene.render(app, app.screen)
    scene.handle_event(app, _key(pygame.K_ESCAPE))
    assert app.quit_called


def test_game_scene_hotkeys_advance_the_career() -> None:
    app = _AppStub()
    app.start_career(Player(name="Ada", programming_skill=50, stress=20, health=80, motivation=70))
    scene = GameScene()
    scene._build_layout(app)

    screen = app.screen.get_rect()
    for rect in (scene._header_rect, scene._stats_rect, scene._status_rect, scene._event_rect, scene._options_rect):
        assert _contains(screen, rect)
    assert len(scene.option_buttons) == len(app.session.current_event.options)
    for button in scene.option_buttons:
        assert _contains(scene._options_rect, button.rect)

    scene.render(app, app.screen)
    scene.handle_event(app, _key(pygame.K_1))
    assert app.session.month == 2
    assert app.session.events_completed == 1

    scene.render(app, app.screen)
    assert scene._bound_event is app.session.current_event


def test_game_scene_switches_to_ending_when_career_completes() -> None:
    app = _AppStub(total_months=1)
    app.start_career(Player(name="Ada"))
    scene = GameScene()
    scene.handle_event(app, _key(pygame.K_1))

    assert app.session.is_completed
    assert isinstance(app.changed_scene, EndingScene)

    ending = EndingScene()
    ending.render(app, app.screen)
    assert _contains(app.screen.get_rect(), ending._panel_rect)

    ending.handle_event(app, _key(pygame.K_RETURN))
    assert app.ended
    assert isinstance(app.changed_scene, CharacterCreationScene)


def test_game_scene_needs_a_running_career() -> None:
    app = _AppStub()
    with pytest.raises(RuntimeError, match="No career"):
        GameScene().render(app, app.screen)


def test_interactive_scenes_override_handle_event() -> None:
    for scene_cls in (CharacterCreationScene, GameScene, EndingScene):
        assert scene_cls.handle_event is not Scene.handle_event
        assert scene_cls.render is not Scene.render
