"""CLI for CLIFIT.

Loads workout definitions and either steps through them interactively or
prints them.
"""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from clifit.config.settings import settings
from clifit.core.logger import setup_logger
from clifit.terminal.driver import WorkoutSession
from clifit.view.styles import StyleTag, format_text
from clifit.workouts.errors import WorkoutLoadError
from clifit.workouts.loader import load_catalog
from clifit.workouts.models import Workout, WorkoutCatalog

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="clifit",
    help="CLIFIT - step through a workout routine from the terminal",
    add_completion=False,
)

FileOption = typer.Option(None, "--file", "-f", help="Workout definitions (YAML); defaults to CLIFIT_WORKOUTS_FILE")


def _setup_logging(debug: bool = False, interactive: bool = False) -> None:
    """Set up logging for a CLI invocation.

    Args:
        debug: Enable debug logging level
        interactive: Keep the console quiet below WARNING while the UI owns the screen
    """
    level = "DEBUG" if debug else settings.log_level
    console_level = "WARNING" if interactive else level
    setup_logger(level=level, log_file=settings.log_file or None, console_level=console_level)


def _load_or_exit(file: Path | None) -> WorkoutCatalog:
    """Load the catalog, printing a one-line diagnostic and exiting 1 on failure."""
    path = file or Path(settings.workouts_file)
    try:
        return load_catalog(path)
    except WorkoutLoadError as e:
        logger.bind(file_only=True).error(f"Failed to load workouts from {path}: {e}")
        console.print(f"[red]Error loading workouts:[/red] {escape(str(e))}", style="bold red", soft_wrap=True)
        raise typer.Exit(1) from e


def _select_workout_or_exit(catalog: WorkoutCatalog, name: str) -> Workout:
    workout = catalog.get(name)
    if workout is None:
        available = ", ".join(catalog.names())
        console.print(f"[red]Error:[/red] No workout named '{escape(name)}'. Available: {escape(available)}", style="bold red")
        raise typer.Exit(1)
    return workout


def _workout_tree(workout: Workout) -> Tree:
    tree = Tree(format_text(workout.name.upper(), StyleTag.TITLE))
    for block in workout.blocks:
        branch = tree.add(format_text(block.label, StyleTag.BLOCK))
        for exercise in block.exercises:
            label = Text()
            label.append_text(format_text(exercise.name, StyleTag.HIGHLIGHT))
            details = [value for value in (exercise.sets, exercise.tempo) if value]
            if details:
                label.append_text(format_text(f"  {' • '.join(details)}", StyleTag.EXERCISE))
            if exercise.notes:
                label.append_text(format_text(f"  ({exercise.notes})", StyleTag.DIM))
            branch.add(label)
    return tree


@app.command()
def run(
    file: Path | None = FileOption,
    workout: str | None = typer.Option(None, "--workout", "-w", help="Go straight into this workout (no menu)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Step through a workout interactively.

    Without --workout a menu lists every workout in the file.
    """
    _setup_logging(debug=debug, interactive=True)
    catalog = _load_or_exit(file)

    has_menu = True
    if workout:
        selected = _select_workout_or_exit(catalog, workout)
        catalog = catalog.only(selected.name)
        has_menu = False

    WorkoutSession(catalog, has_menu=has_menu, console=console).run()


@app.command("list")
def list_workouts(file: Path | None = FileOption) -> None:
    """List workouts with their block and exercise counts."""
    _setup_logging()
    catalog = _load_or_exit(file)

    table = Table(title="Workouts")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Workout", style="bold")
    table.add_column("Blocks", justify="right")
    table.add_column("Exercises", justify="right")
    for index, item in enumerate(catalog.workouts, start=1):
        table.add_row(str(index), item.name, str(len(item.blocks)), str(item.exercise_count))
    console.print(table)


@app.command()
def show(
    name: str = typer.Argument(..., help="Workout name (case-insensitive)"),
    file: Path | None = FileOption,
) -> None:
    """Print every block and exercise of a workout."""
    _setup_logging()
    catalog = _load_or_exit(file)
    console.print(_workout_tree(_select_workout_or_exit(catalog, name)))


@app.command()
def validate(file: Path | None = FileOption) -> None:
    """Check that a workouts file loads."""
    _setup_logging()
    catalog = _load_or_exit(file)
    total_exercises = sum(item.exercise_count for item in catalog.workouts)
    console.print(
        Panel(
            Text("Workouts file is valid", style="bold green"),
            subtitle=f"{len(catalog)} workouts, {total_exercises} exercises",
            border_style="green",
        )
    )


if __name__ == "__main__":
    app()
