from __future__ import annotations

import logging
from typing import Any

from .engine import GameEngineService, SelectionContext
from .loader import ContentBundle
from .models import (
    MINOR_IMPACT,
    START_AGE,
    CareerProgress,
    EventOption,
    GameEnding,
    GameEvent,
    GameStats,
    LogEntry,
    Player,
    RunAverages,
)
from .rng import RandomSource

gameplay_logger = logging.getLogger("programmer_life.gameplay")

MONTHS_PER_YEAR = 12
DEFAULT_TOTAL_MONTHS = 36
NOVELTY_BIAS_CHANCE = 0.45
REPEAT_BIAS_CHANCE = 0.3
AMBIENT_EVENT_CHANCE = 0.15
MAX_RECENT_HIGHLIGHTS = 3


def career_phase_for_month(month: int) -> str:
    if month <= 12:
        return "Rookie phase: absorbing and adapting"
    if month <= 24:
        return "Growth phase: building experience and influence"
    if month <= 36:
        return "Breakthrough phase: sprinting for a personal brand"
    return "Legendary chapter"


def impact_details(option: EventOption) -> str:
    summary = option.impact_summary()
    if summary == MINOR_IMPACT:
        return "This event barely moved your stats."
    return f"Impact: {summary}"


class GameSession:
    """One career run: monthly event draws, choices, and the final ending."""

    def __init__(
        self,
        player: Player,
        content: ContentBundle,
        engine: GameEngineService,
        rng: RandomSource,
        total_months: int = DEFAULT_TOTAL_MONTHS,
    ) -> None:
        if total_months < 1:
            raise ValueError("total_months must be at least 1.")
        self.player = player
        self.content = content
        self.engine = engine
        self.rng = rng
        self.total_months = total_months

        self.month = 1
        self.progress = CareerProgress()
        self.current_event: GameEvent | None = None
        self.ending: GameEnding | None = None
        self.event_result_message = ""
        self.last_impact_details = ""
        self.status_warnings: list[str] = []
        self.recent_highlights: list[str] = []
        self.timeline: list[LogEntry] = []

        self.events_completed = 0
        self._total_stress = 0
        self._total_health = 0
        self._total_motivation = 0
        # Identity of played events, so events without ids are tracked too.
        self._played: list[GameEvent] = []
        self._seen_event_ids: set[str] = set()

        self._log("start", f"{player.name} starts a career at age {player.age}.", {"seed": getattr(rng, "seed", None)})
        self.refresh_warnings()
        self.load_next_event()

    @property
    def is_completed(self) -> bool:
        return self.ending is not None

    @property
    def has_highlights(self) -> bool:
        return bool(self.recent_highlights)

    @property
    def seen_event_ids(self) -> frozenset[str]:
        return frozenset(self._seen_event_ids)

    @property
    def time_display(self) -> str:
        year = (self.month - 1) // MONTHS_PER_YEAR + 1
        return f"Year {year} · Month {self.month}"

    @property
    def timeline_display(self) -> str:
        return f"Career timeline: month {min(self.month, self.total_months)} / {self.total_months}"

    @property
    def timeline_progress(self) -> float:
        return max(0.0, min(1.0, (self.month - 1) / self.total_months))

    @property
    def career_phase(self) -> str:
        return career_phase_for_month(self.month)

    @property
    def goal_progress_summary(self) -> str:
        return f"Promotion {self.progress.leadership}/100 · Startup spark {self.progress.innovation}/100"

    @property
    def ending_title(self) -> str:
        return self.ending.title if self.ending else ""

    @property
    def months_played(self) -> int:
        return min(self.month - 1, self.total_months)

    def _log(self, entry_type: str, line: str, data: dict[str, Any] | None = None) -> None:
        entry = LogEntry(month=self.month, type=entry_type, line=line, data=data)
        self.timeline.append(entry)
        gameplay_logger.info(entry.format())

    def _context(self) -> SelectionContext:
        return SelectionContext.from_progress(self.progress, self._seen_event_ids, self.month)

    def _is_played(self, event: GameEvent) -> bool:
        return any(played is event for played in self._played)

    def _mark_played(self, event: GameEvent) -> None:
        if not event.allow_repeat and not self._is_played(event):
            self._played.append(event)

    def eligible_events(self, passive: bool = False) -> list[GameEvent]:
        return [
            event
            for event in self.content.events
            if event.is_passive == passive
            and event.is_eligible(self.player, self.month)
            and (event.allow_repeat or not self._is_played(event))
        ]

    def refresh_warnings(self) -> None:
        self.status_warnings = self.engine.status_warnings(self.player)

    def load_next_event(self) -> None:
        if self.month > self.total_months:
            self.complete_game()
            return

        self._try_ambient_event()

        available = self.eligible_events()
        if not available:
            self._played.clear()
            available = self.eligible_events()
        if not available:
            self._log("exhausted", "No eligible events remain.")
            self.complete_game()
            return

        candidates = self._apply_biases(available)
        selected = self.engine.select_weighted_event(candidates, self.player, self._context())
        if selected is None:
            return
        self._mark_played(selected)
        if selected.id.strip():
            self._seen_event_ids.add(selected.id)

        self.current_event = selected
        self._log("event", f"{self.time_display}: {selected.title}", {"event_id": selected.id, "rarity": selected.rarity})

    def _try_ambient_event(self) -> None:
        ambient = self.eligible_events(passive=True)
        if not ambient:
            return
        if self.rng.next_float() > AMBIENT_EVENT_CHANCE:
            return

        selected = self.engine.select_weighted_event(ambient, self.player, self._context())
        if selected is None:
            return
        self._mark_played(selected)
        if selected.passive_effect is None:
            return

        self.engine.apply_option_effects(self.player, selected.passive_effect, self.progress)
        self.refresh_warnings()
        highlight = f"{selected.title}: {selected.passive_effect.effect_description}"
        self.recent_highlights.insert(0, highlight)
        del self.recent_highlights[MAX_RECENT_HIGHLIGHTS:]
        self._log("ambient", highlight, {"event_id": selected.id, "impact": selected.passive_effect.impact_summary()})

    def _apply_biases(self, pool: list[GameEvent]) -> list[GameEvent]:
        unseen = [event for event in pool if not event.id.strip() or event.id not in self._seen_event_ids]
        if unseen and self.rng.next_float() < NOVELTY_BIAS_CHANCE:
            return unseen
        if self.rng.next_float() < REPEAT_BIAS_CHANCE:
            repeatable = [event for event in pool if event.allow_repeat]
            if repeatable:
                return repeatable
        return pool

    def choose(self, index: int) -> None:
        if self.current_event is None:
            return
        options = self.current_event.options
        if not (0 <= index < len(options)):
            raise IndexError(f"Option index {index} out of range for '{self.current_event.title}'.")
        self.select_option(options[index])

    def select_option(self, option: EventOption | None) -> None:
        if option is None or self.is_completed or self.current_event is None:
            return
        if not any(candidate is option for candidate in self.current_event.options):
            raise ValueError(f"Option '{option.text}' does not belong to event '{self.current_event.title}'.")

        self.engine.apply_option_effects(self.player, option, self.progress)
        self.event_result_message = option.effect_description
        self.events_completed += 1
        self._total_stress += self.player.stress
        self._total_health += self.player.health
        self._total_motivation += self.player.motivation

        self._log(
            "choice",
            f"{option.text} -> {option.impact_summary()}",
            {"event_id": self.current_event.id, "option": option.text},
        )

        self.month += 1
        self.player.age = START_AGE + (self.month - 1) // MONTHS_PER_YEAR
        self.last_impact_details = impact_details(option)
        self.refresh_warnings()
        self.load_next_event()

    def averages(self) -> RunAverages:
        if self.events_completed == 0:
            return RunAverages(stress=self.player.stress, health=self.player.health, motivation=self.player.motivation)
        return RunAverages(
            stress=self._total_stress // self.events_completed,
            health=self._total_health // self.events_completed,
            motivation=self._total_motivation // self.events_completed,
        )

    def complete_game(self) -> None:
        self.current_event = None
        self.event_result_message = ""
        self.ending = self.engine.check_for_ending(self.player, self.averages(), self.progress)
        self._log("ending", f"{self.ending.title} after {self.months_played} months.", {"ending": self.ending.key})

    def stats(self) -> GameStats:
        skill_name, skill_value = self.player.highest_skill()
        averages = self.averages()
        return GameStats(
            total_events_completed=self.events_completed,
            total_months_played=self.months_played,
            highest_skill=skill_value,
            highest_skill_name=skill_name,
            final_salary=self.player.salary,
            average_stress=averages.stress,
            average_health=averages.health,
            average_motivation=averages.motivation,
        )

    @property
    def game_summary(self) -> str:
        if self.ending is None:
            return ""
        stats = self.stats()
        return (
            f"{self.ending.description}\n\n"
            f"Career: {stats.total_months_played} months, {stats.total_events_completed} events handled.\n"
            f"Strongest skill: {stats.highest_skill_name} {stats.highest_skill}. Final salary: {stats.final_salary}.\n"
            f"Average stress {stats.average_stress} · health {stats.average_health} · "
            f"motivation {stats.average_motivation}.\n"
            f"{self.goal_progress_summary}"
        )
