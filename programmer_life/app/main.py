from __future__ import annotations

from rich.console import Console

from programmer_life.app.screens import CharacterCreationScreen, EndingScreen, GameScreen
from programmer_life.app.services.career import load_game_content, start_session
from programmer_life.app.services.logger import configure_logging
from programmer_life.app.services.paths import resolve_user_paths
from programmer_life.app.services.settings_store import SettingsStore


def main() -> None:
    console = Console()
    paths = resolve_user_paths()
    loggers = configure_logging(paths.logs, console=console)
    logger = loggers.app
    settings = SettingsStore(paths.settings_file).load()

    console.print("[bold]Starting Programmer Life Simulator...[/bold]")
    logger.info("Starting terminal frontend.")

    content = load_game_content(settings.gameplay)
    if content.source == "builtin":
        console.print("[yellow]Event files unavailable; playing with the built-in career events.[/yellow]")

    run_counter = 0
    try:
        while True:
            player = CharacterCreationScreen(console=console, content=content).run()
            if player is None:
                console.print("[bold]Goodbye.[/bold]")
                return

            session = start_session(player, content, settings.gameplay, run_counter)
            run_counter += 1
            if GameScreen(console=console, session=session).run() == "quit":
                console.print("[bold]Career abandoned. Goodbye.[/bold]")
                logger.info("Exited from game screen via quit command.")
                return

            logger.info("Run finished with ending '%s'.", session.ending.key if session.ending else "-")
            if not EndingScreen(console=console).show(session):
                console.print("[bold]Goodbye.[/bold]")
                return
    except KeyboardInterrupt:
        console.print("\n[bold]Interrupted. Goodbye.[/bold]")
    except Exception:
        logger.exception("Unhandled exception in game loop.")
        console.print(f"[bold red]A fatal error occurred.[/bold red] See {loggers.latest_log_path}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
