from __future__ import annotations

from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from programmer_life.core.models import SKILL_LABELS, SKILL_NAMES, STAT_MAX, GameEvent, LogEntry, Player, Trait
from programmer_life.core.session import GameSession

RARITY_STYLES = {
    "common": "white",
    "uncommon": "green",
    "rare": "cyan",
    "epic": "magenta",
    "mythic": "bold yellow",
}


def _bar(value: int, style: str) -> ProgressBar:
    return ProgressBar(total=STAT_MAX, completed=value, width=24, complete_style=style, finished_style=style)


def player_widget(player: Player) -> Panel:
    table = Table.grid(expand=True, padding=(0, 1))
    table.add_column(style="bold")
    table.add_column()
    table.add_column(justify="right")
    for skill in SKILL_NAMES:
        value = getattr(player, skill)
        table.add_row(SKILL_LABELS[skill], _bar(value, "blue"), str(value))
    table.add_row("Stress", _bar(player.stress, "red"), str(player.stress))
    table.add_row("Health", _bar(player.health, "green"), str(player.health))
    table.add_row("Motivation", _bar(player.motivation, "yellow"), str(player.motivation))
    table.add_row("Salary", "", f"{player.salary:,}")
    return Panel(table, title=f"{player.name} · age {player.age}", border_style="cyan")


def career_widget(session: GameSession) -> Panel:
    table = Table.grid(expand=True)
    table.add_column()
    table.add_row(f"[bold]{session.time_display}[/bold]  [dim]{session.timeline_display}[/dim]")
    table.add_row(ProgressBar(total=1.0, completed=session.timeline_progress, width=48))
    table.add_row(f"[italic]{session.career_phase}[/italic]")
    table.add_row(session.goal_progress_summary)
    return Panel(table, title="Career", border_style="blue")


def warnings_widget(warnings: list[str]) -> Panel | None:
    if not warnings:
        return None
    text = Text("\n".join(f"! {line}" for line in warnings), style="bold red")
    return Panel(text, title="Warnings", border_style="red")


def highlights_widget(highlights: list[str]) -> Panel | None:
    if not highlights:
        return None
    return Panel(Text("\n".join(highlights)), title="Recent happenings", border_style="magenta")


def event_widget(event: GameEvent) -> Panel:
    style = RARITY_STYLES.get(event.rarity_key, "white")
    table = Table.grid(expand=True)
    table.add_column()
    table.add_row(Text(event.description))
    table.add_row("")
    for index, option in enumerate(event.options, start=1):
        table.add_row(f"[bold][{index}][/bold] {option.text}  [dim]({option.impact_summary()})[/dim]")
    return Panel(table, title=f"[{style}]{event.title}[/{style}] [dim]{event.rarity}[/dim]", border_style=style)


def trait_table(traits: list[Trait]) -> Table:
    table = Table(title="Starting traits", expand=True)
    table.add_column("#", justify="right")
    table.add_column("Trait", style="bold")
    table.add_column("Effect")
    for index, trait in enumerate(traits, start=1):
        table.add_row(str(index), trait.name, trait.description)
    return table


def log_widget(log_entries: list[LogEntry], tail: int = 10) -> Panel:
    lines = [entry.format() for entry in log_entries[-tail:]]
    if not lines:
        lines = ["(no log entries yet)"]
    return Panel(Text("\n".join(lines)), title="Timeline", border_style="magenta")


def ending_widget(session: GameSession) -> Panel:
    title = session.ending_title or "Career over"
    return Panel(Text(session.game_summary), title=f"[bold green]{title}[/bold green]", border_style="green")
