from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SkillName = Literal["programming_skill", "algorithm_skill", "debugging_skill", "communication_skill"]
Rarity = Literal["common", "uncommon", "rare", "epic", "mythic"]

START_AGE = 22
STAT_MIN = 0
STAT_MAX = 100
PROGRESS_MAX = 120

SKILL_NAMES: tuple[SkillName, SkillName, SkillName, SkillName] = (
    "programming_skill",
    "algorithm_skill",
    "debugging_skill",
    "communication_skill",
)
SKILL_LABELS: dict[str, str] = {
    "programming_skill": "Programming",
    "algorithm_skill": "Algorithms",
    "debugging_skill": "Debugging",
    "communication_skill": "Communication",
}
RARITY_NAMES: tuple[Rarity, ...] = ("common", "uncommon", "rare", "epic", "mythic")

# Order matters: it is the order deltas are listed in impact summaries.
OPTION_DELTA_LABELS: tuple[tuple[str, str], ...] = (
    ("programming_skill_delta", "Programming"),
    ("algorithm_skill_delta", "Algorithms"),
    ("debugging_skill_delta", "Debugging"),
    ("communication_skill_delta", "Communication"),
    ("stress_delta", "Stress"),
    ("health_delta", "Health"),
    ("motivation_delta", "Motivation"),
    ("salary_delta", "Salary"),
    ("leadership_delta", "Promotion"),
    ("innovation_delta", "Startup spark"),
)
MINOR_IMPACT = "Minor impact"


def clamp_stat(value: int) -> int:
    return max(STAT_MIN, min(STAT_MAX, int(value)))


def clamp_salary(value: int) -> int:
    return max(0, int(value))


def clamp_progress(value: int) -> int:
    return max(0, min(PROGRESS_MAX, int(value)))


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class Trait(StrictModel):
    name: str = Field(min_length=1)
    description: str = ""
    programming_skill_bonus: int = Field(default=0, alias="programmingSkillBonus")
    algorithm_skill_bonus: int = Field(default=0, alias="algorithmSkillBonus")
    debugging_skill_bonus: int = Field(default=0, alias="debuggingSkillBonus")
    communication_skill_bonus: int = Field(default=0, alias="communicationSkillBonus")
    stress_delta: int = Field(default=0, alias="stressDelta")
    health_delta: int = Field(default=0, alias="healthDelta")
    motivation_delta: int = Field(default=0, alias="motivationDelta")


class Player(StrictModel):
    name: str = Field(min_length=1)
    age: int = Field(default=START_AGE, ge=0)
    programming_skill: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX)
    algorithm_skill: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX)
    debugging_skill: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX)
    communication_skill: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX)
    stress: int = Field(default=0, ge=STAT_MIN, le=STAT_MAX)
    health: int = Field(default=100, ge=STAT_MIN, le=STAT_MAX)
    motivation: int = Field(default=50, ge=STAT_MIN, le=STAT_MAX)
    salary: int = Field(default=0, ge=0)

    def apply_trait(self, trait: Trait) -> None:
        self.programming_skill = clamp_stat(self.programming_skill + trait.programming_skill_bonus)
        self.algorithm_skill = clamp_stat(self.algorithm_skill + trait.algorithm_skill_bonus)
        self.debugging_skill = clamp_stat(self.debugging_skill + trait.debugging_skill_bonus)
        self.communication_skill = clamp_stat(self.communication_skill + trait.communication_skill_bonus)
        self.stress = clamp_stat(self.stress + trait.stress_delta)
        self.health = clamp_stat(self.health + trait.health_delta)
        self.motivation = clamp_stat(self.motivation + trait.motivation_delta)

    def total_skills(self) -> int:
        return sum(getattr(self, skill) for skill in SKILL_NAMES)

    def highest_skill(self) -> tuple[str, int]:
        best_name = SKILL_NAMES[0]
        best_value = getattr(self, best_name)
        for skill in SKILL_NAMES[1:]:
            value = getattr(self, skill)
            if value > best_value:
                best_name, best_value = skill, value
        return SKILL_LABELS[best_name], best_value


class EventOption(StrictModel):
    text: str = Field(min_length=1)
    effect_description: str = Field(default="", alias="effectDescription")
    programming_skill_delta: int = Field(default=0, alias="programmingSkillDelta")
    algorithm_skill_delta: int = Field(default=0, alias="algorithmSkillDelta")
    debugging_skill_delta: int = Field(default=0, alias="debuggingSkillDelta")
    communication_skill_delta: int = Field(default=0, alias="communicationSkillDelta")
    stress_delta: int = Field(default=0, alias="stressDelta")
    health_delta: int = Field(default=0, alias="healthDelta")
    motivation_delta: int = Field(default=0, alias="motivationDelta")
    salary_delta: int = Field(default=0, alias="salaryDelta")
    leadership_delta: int = Field(default=0, alias="leadershipDelta")
    innovation_delta: int = Field(default=0, alias="innovationDelta")
    unlocks_rare_event: bool = Field(default=False, alias="unlocksRareEvent")
    unlocks_cosmic_insight: bool = Field(default=False, alias="unlocksCosmicInsight")

    def deltas(self) -> dict[str, int]:
        return {label: getattr(self, attr) for attr, label in OPTION_DELTA_LABELS if getattr(self, attr) != 0}

    def impact_summary(self) -> str:
        parts = [f"{label} {delta:+d}" for label, delta in self.deltas().items()]
        return " / ".join(parts) if parts else MINOR_IMPACT


class EventRequirement(StrictModel):
    min_month: int | None = Field(default=None, alias="minMonth", ge=1)
    max_month: int | None = Field(default=None, alias="maxMonth", ge=1)
    min_stress: int | None = Field(default=None, alias="minStress")
    max_stress: int | None = Field(default=None, alias="maxStress")
    min_health: int | None = Field(default=None, alias="minHealth")
    max_health: int | None = Field(default=None, alias="maxHealth")
    min_skill_total: int | None = Field(default=None, alias="minSkillTotal")

    @model_validator(mode="after")
    def validate_bounds(self) -> "EventRequirement":
        for low, high, label in (
            (self.min_month, self.max_month, "month"),
            (self.min_stress, self.max_stress, "stress"),
            (self.min_health, self.max_health, "health"),
        ):
            if low is not None and high is not None and low > high:
                raise ValueError(f"Requirement min {label} cannot exceed max {label}.")
        return self

    def is_satisfied(self, player: Player, month: int) -> bool:
        if self.min_month is not None and month < self.min_month:
            return False
        if self.max_month is not None and month > self.max_month:
            return False
        if self.min_stress is not None and player.stress < self.min_stress:
            return False
        if self.max_stress is not None and player.stress > self.max_stress:
            return False
        if self.min_health is not None and player.health < self.min_health:
            return False
        if self.max_health is not None and player.health > self.max_health:
            return False
        if self.min_skill_total is not None and player.total_skills() < self.min_skill_total:
            return False
        return True


class GameEvent(StrictModel):
    id: str = ""
    title: str = Field(min_length=1)
    description: str = ""
    category: str = "general"
    rarity: str = "Common"
    is_passive: bool = Field(default=False, alias="isPassive")
    allow_repeat: bool = Field(default=False, alias="allowRepeat")
    weight: int = 1
    tags: list[str] = Field(default_factory=list)
    requirement: EventRequirement | None = None
    passive_effect: EventOption | None = Field(default=None, alias="passiveEffect")
    options: list[EventOption] = Field(default_factory=list)

    @property
    def rarity_key(self) -> str:
        return self.rarity.strip().lower()

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def is_eligible(self, player: Player, month: int) -> bool:
        return self.requirement is None or self.requirement.is_satisfied(player, month)


class CareerProgress(StrictModel):
    leadership: int = Field(default=0, ge=0, le=PROGRESS_MAX)
    innovation: int = Field(default=0, ge=0, le=PROGRESS_MAX)
    rare_event_unlocked: bool = False
    cosmic_insight_unlocked: bool = False

    def add(self, leadership: int = 0, innovation: int = 0) -> None:
        self.leadership = clamp_progress(self.leadership + leadership)
        self.innovation = clamp_progress(self.innovation + innovation)


@dataclass(frozen=True, slots=True)
class RunAverages:
    stress: int
    health: int
    motivation: int


@dataclass(frozen=True, slots=True)
class GameEnding:
    key: str
    title: str
    description: str


@dataclass(slots=True)
class GameStats:
    total_events_completed: int
    total_months_played: int
    highest_skill: int
    highest_skill_name: str
    final_salary: int
    average_stress: int
    average_health: int
    average_motivation: int


@dataclass(slots=True)
class LogEntry:
    month: int
    type: str
    line: str
    data: dict[str, Any] | None = field(default=None)

    def format(self) -> str:
        return f"[m={self.month:03d}] [{self.type.upper()}] {self.line}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "type": self.type,
            "line": self.line,
            "data": self.data or {},
        }
