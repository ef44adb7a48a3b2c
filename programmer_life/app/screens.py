from __future__ import annotations

from typing import Literal

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from programmer_life.app.widgets import (
    career_widget,
    ending_widget,
    event_widget,
    highlights_widget,
    log_widget,
    player_widget,
    trait_table,
    warnings_widget,
)
from programmer_life.core.character import CharacterDraft
from programmer_life.core.loader import ContentBundle
from programmer_life.core.models import GameEvent, Player
from programmer_life.core.session import GameSession

RunExit = Literal["completed", "quit"]
MAX_INPUT_RETRIES = 5

HELP_LINES = [
    "Each month brings one career event; pick an option by its number.",
    "Skills, stress, health and motivation stay between 0 and 100.",
    "Promotion and startup progress unlock the rarest endings.",
    "Small happenings may strike between months and change your stats.",
    "Controls: type an option number to choose; L shows the full timeline, H this help and Q quits.",
]


def show_help_screen(console: Console) -> None:
    table = Table.grid(expand=True)
    table.add_column()
    for line in HELP_LINES:
        table.add_row(f"- {line}")
    console.print(Panel(table, title="Help", border_style="blue"))


class CharacterCreationScreen:
    def __init__(self, console: Console, content: ContentBundle) -> None:
        self.console = console
        self.content = content

    def run(self) -> Player | None:
        draft = CharacterDraft(traits=list(self.content.traits))
        self.console.rule("[bold cyan]New Career[/bold cyan]")

        for _ in range(MAX_INPUT_RETRIES):
            draft.name = Prompt.ask("Your name")
            if draft.name.strip():
                break
            self.console.print("[red]A name is required.[/red]")
        else:
            return None

        self.console.print(trait_table(draft.traits))
        choices = [str(index) for index in range(1, len(draft.traits) + 1)]
        picked = Prompt.ask("Pick a starting trait", choices=choices, default="1")
        draft.select(int(picked) - 1)

        if not draft.can_start():
            return None
        player = draft.build()
        self.console.print(f"[green]Welcome aboard, {player.name}. Trait: {draft.selected_trait.name}.[/green]")
        return player


class GameScreen:
    def __init__(self, console: Console, session: GameSession) -> None:
        self.console = console
        self.session = session

    def _render_hud(self) -> None:
        self.console.rule(f"[bold]{self.session.time_display}[/bold]")
        self.console.print(player_widget(self.session.player))
        self.console.print(career_widget(self.session))
        for panel in (warnings_widget(self.session.status_warnings), highlights_widget(self.session.recent_highlights)):
            if panel is not None:
                self.console.print(panel)
        if self.session.event_result_message:
            self.console.print(
                Panel(
                    f"{self.session.event_result_message}\n[dim]{self.session.last_impact_details}[/dim]",
                    title="Last month",
                    border_style="green",
                )
            )

    def _prompt_choice(self, event: GameEvent) -> int | Literal["quit"]:
        self.console.print(event_widget(event))
        for _ in range(MAX_INPUT_RETRIES):
            raw = Prompt.ask("Choose").strip().lower()
            if raw in {"q", "quit", "exit"}:
                return "quit"
            if raw in {"h", "help"}:
                show_help_screen(self.console)
                continue
            if raw in {"l", "log"}:
                self.console.print(log_widget(self.session.timeline, tail=len(self.session.timeline)))
                continue
            if raw.isdigit() and 1 <= int(raw) <= len(event.options):
                return int(raw) - 1
            self.console.print("[red]Unknown choice.[/red]")
        return "quit"

    def run(self) -> RunExit:
        while not self.session.is_completed:
            event = self.session.current_event
            if event is None:
                break
            self._render_hud()
            choice = self._prompt_choice(event)
            if choice == "quit":
                if Confirm.ask("Abandon this career?", default=False):
                    return "quit"
                continue
            self.session.choose(choice)
        return "completed"


class EndingScreen:
    def __init__(self, console: Console) -> None:
        self.console = console

    def show(self, session: GameSession) -> bool:
        self.console.rule("[bold green]Career Complete[/bold green]")
        self.console.print(player_widget(session.player))
        self.console.print(ending_widget(session))
        return Confirm.ask("Start a new career?", default=True)
