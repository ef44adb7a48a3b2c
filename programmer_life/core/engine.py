from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from .models import (
    CareerProgress,
    EventOption,
    GameEnding,
    GameEvent,
    Player,
    RunAverages,
    clamp_salary,
    clamp_stat,
)
from .rng import RandomSource, WeightedEntry, pick_weighted

WARNING_STRESS_CRITICAL = "Stress is critical; a burnout event could hit at any moment."
WARNING_STRESS_HIGH = "Stress is running high; be careful with further risks."
WARNING_HEALTH_LOW = "Health is failing; prioritise rest or medical care."
WARNING_MOTIVATION_LOW = "Motivation is low; long-term goals may stall."

RARITY_ADJUSTMENT: dict[str, int] = {
    "uncommon": 1,
    "rare": -2,
    "epic": -3,
    "mythic": -4,
}
STARTER_CUTOFF_MONTH = 6


@dataclass(slots=True)
class SelectionContext:
    rare_event_unlocked: bool = False
    cosmic_insight_unlocked: bool = False
    seen_event_ids: set[str] = field(default_factory=set)
    month: int = 1

    @classmethod
    def from_progress(cls, progress: CareerProgress, seen_event_ids: set[str], month: int) -> "SelectionContext":
        return cls(
            rare_event_unlocked=progress.rare_event_unlocked,
            cosmic_insight_unlocked=progress.cosmic_insight_unlocked,
            seen_event_ids=seen_event_ids,
            month=month,
        )


EndingGuard = Callable[[Player, RunAverages, CareerProgress], bool]


@dataclass(frozen=True, slots=True)
class EndingRule:
    key: str
    title: str
    description: str
    guard: EndingGuard

    def build(self, player: Player) -> GameEnding:
        skill_name, _ = player.highest_skill()
        return GameEnding(key=self.key, title=self.title, description=self.description.format(skill=skill_name.lower()))


def _highest_skill_value(player: Player) -> int:
    return player.highest_skill()[1]


# First matching rule wins; the last rule always matches.
ENDING_RULES: tuple[EndingRule, ...] = (
    EndingRule(
        "burnout",
        "Burnout Alarm",
        "Years of pressure and overdrafts have left you exhausted. It may be time to stop and redraw "
        "the line between work and life.",
        lambda p, avg, prog: p.health <= 25 or avg.stress >= 75,
    ),
    EndingRule(
        "new_direction",
        "Seeking a New Direction",
        "The job no longer sparks anything in you. You step away from the office to look for new "
        "inspiration and new dreams.",
        lambda p, avg, prog: p.motivation <= 30 or avg.motivation <= 45,
    ),
    EndingRule(
        "grind_loop",
        "The Grind Loop",
        "Overtime after overtime, you keep running in place. Nothing broke you, but nothing moved "
        "you forward either.",
        lambda p, avg, prog: 65 <= avg.stress < 75 and p.salary < 12000,
    ),
    EndingRule(
        "promotion",
        "Promoted to the Top",
        "Level after level, you built real influence and became the engineering manager the team "
        "looks up to.",
        lambda p, avg, prog: prog.leadership >= 90,
    ),
    EndingRule(
        "startup",
        "Startup Rising Star",
        "Ideas and execution finally lined up. Your side project becomes a company and a new "
        "adventure begins.",
        lambda p, avg, prog: prog.innovation >= 90,
    ),
    EndingRule(
        "cosmic_architect",
        "Cosmic Architect",
        "You resonate with a strange kind of inspiration and now design next-generation systems "
        "only a handful of people understand.",
        lambda p, avg, prog: prog.cosmic_insight_unlocked and prog.innovation >= 70,
    ),
    EndingRule(
        "tech_star",
        "Tech Star",
        "Outstanding {skill} and a salary to match make you the irreplaceable technical benchmark "
        "of the team.",
        lambda p, avg, prog: _highest_skill_value(p) >= 90 and p.salary >= 25000,
    ),
    EndingRule(
        "digital_nomad",
        "Digital Nomad",
        "Solid skills and a free spirit let you work remotely from anywhere you like.",
        lambda p, avg, prog: p.salary >= 28000 and p.stress <= 45 and p.motivation >= 85,
    ),
    EndingRule(
        "indie_hacker",
        "Indie Hacker",
        "You turn down process and meetings and roam between cool projects on charm and creativity.",
        lambda p, avg, prog: p.motivation >= 95 and prog.innovation >= 60 and prog.leadership <= 40,
    ),
    EndingRule(
        "team_leader",
        "Team Leader",
        "Great communication and the ability to inspire carry your team through its bottleneck "
        "and open a new chapter as a manager.",
        lambda p, avg, prog: p.communication_skill >= 80 and p.motivation >= 60,
    ),
    EndingRule(
        "slow_life_mentor",
        "Slow-Life Mentor",
        "You found the rhythm of work and life. Colleagues call you the wellness role model and "
        "you gladly share your secrets.",
        lambda p, avg, prog: avg.health >= 80 and prog.leadership < 40 and p.stress <= 35,
    ),
    EndingRule(
        "balance_master",
        "Balance Master",
        "You kept health and work winning together and became the company's model of steady "
        "excellence.",
        lambda p, avg, prog: avg.health >= 70 and avg.stress <= 45,
    ),
    EndingRule(
        "steady_progress",
        "Steady Progress",
        "You kept growing in your role and built a solid toolkit. The next breakthrough is within reach.",
        lambda p, avg, prog: True,
    ),
)


class GameEngineService:
    """Stat arithmetic, warnings, weighted event draws and ending decisions."""

    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    def apply_option_effects(self, player: Player, option: EventOption, progress: CareerProgress) -> None:
        player.programming_skill = clamp_stat(player.programming_skill + option.programming_skill_delta)
        player.algorithm_skill = clamp_stat(player.algorithm_skill + option.algorithm_skill_delta)
        player.debugging_skill = clamp_stat(player.debugging_skill + option.debugging_skill_delta)
        player.communication_skill = clamp_stat(player.communication_skill + option.communication_skill_delta)
        player.salary = clamp_salary(player.salary + option.salary_delta)

        player.stress = clamp_stat(player.stress + option.stress_delta)
        player.health = clamp_stat(player.health + option.health_delta)
        player.motivation = clamp_stat(player.motivation + option.motivation_delta)

        progress.add(leadership=option.leadership_delta, innovation=option.innovation_delta)
        if option.unlocks_rare_event:
            progress.rare_event_unlocked = True
        if option.unlocks_cosmic_insight:
            progress.cosmic_insight_unlocked = True

    def status_warnings(self, player: Player) -> list[str]:
        warnings: list[str] = []
        if player.stress >= 80:
            warnings.append(WARNING_STRESS_CRITICAL)
        elif player.stress >= 60:
            warnings.append(WARNING_STRESS_HIGH)
        if player.health <= 35:
            warnings.append(WARNING_HEALTH_LOW)
        if player.motivation <= 30:
            warnings.append(WARNING_MOTIVATION_LOW)
        return warnings

    def check_for_ending(self, player: Player, averages: RunAverages, progress: CareerProgress) -> GameEnding:
        for rule in ENDING_RULES:
            if rule.guard(player, averages, progress):
                return rule.build(player)
        # Unreachable while the catch-all rule is last.
        return ENDING_RULES[-1].build(player)

    def effective_weight(self, event: GameEvent, player: Player, context: SelectionContext) -> int:
        weight = max(event.weight, 1)
        weight += RARITY_ADJUSTMENT.get(event.rarity_key, 0)

        if player.stress >= 70 and event.has_tag("burnout"):
            weight += 6
        if player.health <= 45 and event.has_tag("health"):
            weight += 5
        if player.motivation >= 50 and event.has_tag("innovation"):
            weight += 4

        if context.rare_event_unlocked and event.has_tag("innovation"):
            weight += 6
        if context.cosmic_insight_unlocked and event.has_tag("cosmic"):
            weight += 8

        if event.allow_repeat and event.id.strip() and event.id in context.seen_event_ids:
            weight += 2
        if event.has_tag("starter") and context.month > STARTER_CUTOFF_MONTH:
            weight -= 6
        if event.has_tag("quirky"):
            weight += 1

        return max(1, weight)

    def select_weighted_event(
        self,
        pool: Sequence[GameEvent],
        player: Player,
        context: SelectionContext,
    ) -> GameEvent | None:
        if not pool:
            return None
        if len(pool) == 1:
            return pool[0]
        entries = [WeightedEntry(value=event, weight=self.effective_weight(event, player, context)) for event in pool]
        return pick_weighted(self.rng, entries)
