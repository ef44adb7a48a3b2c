from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, TypeVar

from pydantic import TypeAdapter, ValidationError

from .defaults import default_events, default_traits
from .models import GameEvent, Trait

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parents[1] / "content"

ContentSource = Literal["disk", "builtin"]


class ContentValidationError(ValueError):
    def __init__(self, message: str, details: list[str] | None = None) -> None:
        self.details = details or []
        suffix = "\n".join(self.details)
        super().__init__(f"{message}\n{suffix}" if suffix else message)


@dataclass(slots=True)
class ContentBundle:
    events: list[GameEvent]
    traits: list[Trait]
    event_by_id: dict[str, GameEvent]
    trait_by_name: dict[str, Trait]
    source: ContentSource = "disk"

    @classmethod
    def build(cls, events: list[GameEvent], traits: list[Trait], source: ContentSource) -> "ContentBundle":
        return cls(
            events=events,
            traits=traits,
            event_by_id={event.id: event for event in events if event.id.strip()},
            trait_by_name={trait.name: trait for trait in traits},
            source=source,
        )

    @property
    def playable_events(self) -> list[GameEvent]:
        return [event for event in self.events if not event.is_passive]

    @property
    def passive_events(self) -> list[GameEvent]:
        return [event for event in self.events if event.is_passive]


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ContentValidationError(f"Missing content file: {path}") from exc
    except OSError as exc:
        raise ContentValidationError(f"Unreadable content file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ContentValidationError(f"Content file {path.name} is not valid UTF-8: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise ContentValidationError(f"Invalid JSON in {path.name}: {exc.msg} at line {exc.lineno}") from exc


def _load_typed_list(path: Path, item_type: type[T]) -> list[T]:
    data = _load_json(path)
    adapter = TypeAdapter(list[item_type])  # type: ignore[index]
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        errors = []
        for issue in exc.errors():
            issue_path = ".".join(str(part) for part in issue.get("loc", [])) or "(root)"
            errors.append(f"{path.name}:{issue_path}: {issue.get('msg', 'validation error')}")
        raise ContentValidationError(f"Schema validation failed for {path.name}.", errors) from exc


def _event_label(index: int, event: GameEvent) -> str:
    return f"event '{event.id}'" if event.id.strip() else f"event[{index}] '{event.title}'"


def _validate_events(events: list[GameEvent]) -> None:
    errors: list[str] = []
    seen_ids: set[str] = set()
    for index, event in enumerate(events):
        label = _event_label(index, event)
        if event.id.strip():
            if event.id in seen_ids:
                errors.append(f"Duplicate event id '{event.id}'.")
            seen_ids.add(event.id)

        if event.is_passive:
            if event.passive_effect is None:
                errors.append(f"{label} is passive but has no passiveEffect.")
        elif not event.options:
            errors.append(f"{label} must define at least one option.")

        option_texts: set[str] = set()
        for option in event.options:
            if option.text in option_texts:
                errors.append(f"{label} has duplicate option text '{option.text}'.")
            option_texts.add(option.text)

    if not any(not event.is_passive for event in events):
        errors.append("events.json must contain at least one non-passive event.")
    if errors:
        raise ContentValidationError("Event content failed validation.", errors)


def _validate_traits(traits: list[Trait]) -> None:
    if not traits:
        raise ContentValidationError("traits.json must contain at least one trait.")
    names: set[str] = set()
    for trait in traits:
        if trait.name in names:
            raise ContentValidationError(f"Duplicate trait name '{trait.name}'.")
        names.add(trait.name)


def load_content(content_dir: Path | str = DEFAULT_CONTENT_DIR) -> ContentBundle:
    base_path = Path(content_dir)
    events = _load_typed_list(base_path / "events.json", GameEvent)
    traits = _load_typed_list(base_path / "traits.json", Trait)

    _validate_events(events)
    _validate_traits(traits)

    return ContentBundle.build(events, traits, source="disk")


def builtin_content() -> ContentBundle:
    return ContentBundle.build(default_events(), default_traits(), source="builtin")


def load_content_or_default(content_dir: Path | str | None = None) -> ContentBundle:
    """Load content from disk, falling back to the built-in career events.

    Any failure to read or validate the files is logged and replaced by the
    built-in bundle, so callers always receive a playable set.
    """
    base_path = Path(content_dir) if content_dir is not None else DEFAULT_CONTENT_DIR
    try:
        bundle = load_content(base_path)
    except ContentValidationError as exc:
        logger.warning("Falling back to built-in content: %s", exc)
        return builtin_content()
    logger.info("Loaded %d events and %d traits from %s", len(bundle.events), len(bundle.traits), base_path)
    return bundle
