"""Key dispatch.

Maps key tokens to navigation actions, gated by the current phase, and
applies the matching transition. Unrecognized keys are ignored.

Key tokens are "up", "down", "enter", "space", "ctrl+c" or a single
printable character. Letter keys are case-sensitive.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from loguru import logger

from clifit.navigation import transitions
from clifit.navigation.state import NavigationState, Phase
from clifit.workouts.models import WorkoutCatalog


class Action(StrEnum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    ADVANCE = "advance"
    RETREAT = "retreat"
    SKIP_BLOCK = "skip_block"
    MENU = "menu"
    QUIT = "quit"


QUIT_KEYS = frozenset({"q", "ctrl+c"})

MENU_KEYS: dict[str, Action] = {
    "up": Action.MOVE_UP,
    "k": Action.MOVE_UP,
    "down": Action.MOVE_DOWN,
    "j": Action.MOVE_DOWN,
    "enter": Action.CONFIRM,
}

WORKOUT_KEYS: dict[str, Action] = {
    "enter": Action.ADVANCE,
    "space": Action.ADVANCE,
    "n": Action.ADVANCE,
    "p": Action.RETREAT,
    "b": Action.RETREAT,
    "s": Action.SKIP_BLOCK,
    "m": Action.MENU,
}

DONE_KEYS: dict[str, Action] = {
    "m": Action.MENU,
}

KEYMAPS: dict[Phase, dict[str, Action]] = {
    Phase.MENU: MENU_KEYS,
    Phase.WORKOUT: WORKOUT_KEYS,
    Phase.DONE: DONE_KEYS,
}


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one key press.

    Attributes:
        state: State after the key was applied (unchanged for ignored keys)
        quit: True when the driver should end the session
    """

    state: NavigationState
    quit: bool = False


def resolve_action(phase: Phase, key: str, has_menu: bool = True) -> Action | None:
    """Look up the action bound to key in phase, or None if the key is unbound."""
    if key in QUIT_KEYS:
        return Action.QUIT
    action = KEYMAPS[phase].get(key)
    if action == Action.MENU and not has_menu:
        return None
    return action


_HANDLERS: dict[Action, Callable[[WorkoutCatalog, NavigationState], NavigationState]] = {
    Action.MOVE_UP: lambda catalog, state: transitions.move_selection(catalog, state, -1),
    Action.MOVE_DOWN: lambda catalog, state: transitions.move_selection(catalog, state, 1),
    Action.CONFIRM: transitions.confirm_selection,
    Action.ADVANCE: transitions.advance,
    Action.RETREAT: transitions.retreat,
    Action.SKIP_BLOCK: transitions.skip_block,
    Action.MENU: transitions.return_to_menu,
}


def apply_action(catalog: WorkoutCatalog, state: NavigationState, action: Action) -> NavigationState:
    """Apply a non-quit action to state. Unhandled actions leave state unchanged."""
    handler = _HANDLERS.get(action)
    if handler is None:
        return state
    return handler(catalog, state)


def dispatch(catalog: WorkoutCatalog, state: NavigationState, key: str) -> DispatchResult:
    """Handle one key press.

    Args:
        catalog: Loaded workouts
        state: Current navigation state
        key: Key token

    Returns:
        DispatchResult with the next state and the quit flag
    """
    action = resolve_action(state.phase, key, state.has_menu)
    if action is None:
        return DispatchResult(state=state)
    if action == Action.QUIT:
        logger.debug(f"Quit requested from phase={state.phase}")
        return DispatchResult(state=state, quit=True)

    new_state = apply_action(catalog, state, action)
    logger.debug(
        f"{action} in {state.phase}: "
        f"w={new_state.workout_index} b={new_state.block_index} e={new_state.exercise_index} -> {new_state.phase}"
    )
    return DispatchResult(state=new_state)
