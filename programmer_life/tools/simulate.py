from __future__ import annotations

import hashlib
import json
from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from programmer_life.core.autoplay import AutopickPolicy, run_simulation
from programmer_life.core.loader import DEFAULT_CONTENT_DIR, ContentValidationError, builtin_content, load_content
from programmer_life.core.session import GameSession

app = typer.Typer(add_completion=False, help="Run deterministic headless careers for balancing and testing.")
console = Console()


def _normalize_seed(raw_seed: str) -> int | str:
    try:
        return int(raw_seed)
    except ValueError:
        return raw_seed


def _session_signature_payload(session: GameSession) -> dict:
    player = session.player
    return {
        "seed": getattr(session.rng, "seed", None),
        "month": session.month,
        "player": player.model_dump(mode="python"),
        "progress": session.progress.model_dump(mode="python"),
        "ending": session.ending.key if session.ending else None,
        "events_completed": session.events_completed,
        "highlights": list(session.recent_highlights),
        "timeline": [entry.to_dict() for entry in session.timeline],
    }


def session_signature(session: GameSession) -> str:
    payload = _session_signature_payload(session)
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode("utf-8")).hexdigest()[:16]


@app.command()
def main(
    seed: str = typer.Option("123", "--seed", help="Seed value (int or string)."),
    months: int = typer.Option(36, "--months", min=1, help="Career length in months."),
    autopick: AutopickPolicy = typer.Option("safe", "--autopick", help="Choice policy: safe|random|greedy."),
    trait: Optional[str] = typer.Option(None, "--trait", help="Starting trait name (defaults to the first trait)."),
    content_dir: Path = typer.Option(DEFAULT_CONTENT_DIR, "--content", help="Directory holding events.json and traits.json."),
    builtin: bool = typer.Option(False, "--builtin", help="Ignore --content and use the built-in career events."),
    runs: int = typer.Option(1, "--runs", min=1, help="Number of consecutive seeds to play."),
    show_timeline: bool = typer.Option(True, "--timeline/--no-timeline", help="Print the timeline of single runs."),
) -> None:
    if builtin:
        content = builtin_content()
    else:
        try:
            content = load_content(content_dir)
        except ContentValidationError as exc:
            console.print(f"[bold red]Content load failed:[/bold red] {exc}")
            raise typer.Exit(1) from exc

    if trait is not None and trait not in content.trait_by_name:
        console.print(f"[bold red]Unknown trait '{trait}'.[/bold red]")
        raise typer.Exit(1)

    base_seed = _normalize_seed(seed)
    if runs > 1:
        if not isinstance(base_seed, int):
            console.print("[bold red]--runs requires an integer seed.[/bold red]")
            raise typer.Exit(1)
        endings: Counter[str] = Counter()
        for offset in range(runs):
            session = run_simulation(base_seed + offset, content, policy=autopick, total_months=months, trait_name=trait)
            endings[session.ending_title or "-"] += 1
        table = Table(title=f"Ending distribution over {runs} runs")
        table.add_column("Ending", style="cyan")
        table.add_column("Runs", justify="right")
        table.add_column("Share", justify="right")
        for title, count in endings.most_common():
            table.add_row(title, str(count), f"{count / runs:.1%}")
        console.print(table)
        return

    session = run_simulation(base_seed, content, policy=autopick, total_months=months, trait_name=trait)
    if show_timeline:
        for entry in session.timeline:
            console.print(entry.format(), markup=False)

    player = session.player
    summary = Table(title="Simulation Summary")
    summary.add_column("Field", style="cyan", no_wrap=True)
    summary.add_column("Value", style="white")
    summary.add_row("Seed", str(base_seed))
    summary.add_row("Policy", autopick)
    summary.add_row("Content", content.source)
    summary.add_row("Months", f"{session.months_played}/{months}")
    summary.add_row("Events", str(session.events_completed))
    summary.add_row(
        "Skills",
        (
            f"programming={player.programming_skill}, algorithms={player.algorithm_skill}, "
            f"debugging={player.debugging_skill}, communication={player.communication_skill}"
        ),
    )
    summary.add_row("Wellbeing", f"stress={player.stress}, health={player.health}, motivation={player.motivation}")
    summary.add_row("Salary", f"{player.salary:,}")
    summary.add_row("Goals", session.goal_progress_summary)
    summary.add_row("Ending", session.ending_title or "-")
    console.print()
    console.print(summary)
    console.print(f"\n[bold green]Deterministic signature:[/bold green] {session_signature(session)}")


if __name__ == "__main__":
    app()
