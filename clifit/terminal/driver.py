"""Interactive session loop.

Owns the single NavigationState for the process: paint the current view,
wait for a key, dispatch it, repeat until the dispatcher signals quit.
"""

from collections.abc import Callable

from loguru import logger
from rich.console import Console

from clifit.navigation.dispatcher import dispatch
from clifit.navigation.state import NavigationState, initial_state
from clifit.terminal.keys import read_key
from clifit.view.projector import render
from clifit.view.styles import to_renderable
from clifit.workouts.models import WorkoutCatalog


class WorkoutSession:
    """Keyboard-driven walk through a workout catalog.

    Args:
        catalog: Loaded workouts
        has_menu: Show the workout menu; False for the single-workout variant
        console: Console to paint on
        key_reader: Callable returning the next key token
    """

    def __init__(
        self,
        catalog: WorkoutCatalog,
        has_menu: bool = True,
        console: Console | None = None,
        key_reader: Callable[[], str] = read_key,
    ) -> None:
        self.catalog = catalog
        self.state: NavigationState = initial_state(catalog, has_menu=has_menu)
        self.console = console or Console()
        self.key_reader = key_reader

    def paint(self) -> None:
        view = render(self.catalog, self.state)
        if self.console.is_terminal:
            self.console.clear()
        self.console.print(to_renderable(view.lines))

    def step(self, key: str) -> bool:
        """Apply one key. Returns False once the session should end."""
        result = dispatch(self.catalog, self.state, key)
        self.state = result.state
        return not result.quit

    def run(self) -> NavigationState:
        """Run until quit and return the final state."""
        logger.info(f"Session started with {len(self.catalog)} workouts (menu={self.state.has_menu})")
        running = True
        while running:
            self.paint()
            running = self.step(self.key_reader())
        logger.info(f"Session ended in phase={self.state.phase}")
        return self.state
