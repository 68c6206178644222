"""Navigation state (where the user is in a workout).

NavigationState is immutable: every transition returns a new instance via
replace(). The dispatch loop owns the single current value.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from clifit.workouts.models import Block, Exercise, Workout, WorkoutCatalog


class Phase(StrEnum):
    MENU = "menu"
    WORKOUT = "workout"
    DONE = "done"


@dataclass(frozen=True)
class NavigationState:
    """Immutable navigation position.

    Attributes:
        phase: Coarse mode (menu, workout, done)
        workout_index: Selected workout (menu cursor while in the menu)
        block_index: Current block within the selected workout
        exercise_index: Current exercise within the current block
        has_menu: False for the single-workout variant, which never shows a menu
    """

    phase: Phase = Phase.MENU
    workout_index: int = 0
    block_index: int = 0
    exercise_index: int = 0
    has_menu: bool = True

    def replace(self, **changes: object) -> "NavigationState":
        """Create a new state instance with updated fields."""
        return replace(self, **changes)


def initial_state(catalog: WorkoutCatalog, has_menu: bool = True) -> NavigationState:
    """Build the starting state for a catalog.

    With a menu the session starts in the menu with the first workout
    highlighted. Without one the catalog must hold exactly one workout and
    the session starts on its first exercise.

    Raises:
        ValueError: If a menu-less start is requested for a catalog that is
            not exactly one workout
    """
    if has_menu:
        return NavigationState(phase=Phase.MENU, has_menu=True)
    if len(catalog) != 1:
        raise ValueError(f"Single-workout mode needs exactly one workout, got {len(catalog)}")
    return NavigationState(phase=Phase.WORKOUT, has_menu=False)


def current_workout(catalog: WorkoutCatalog, state: NavigationState) -> Workout | None:
    if 0 <= state.workout_index < len(catalog):
        return catalog[state.workout_index]
    return None


def current_block(catalog: WorkoutCatalog, state: NavigationState) -> Block | None:
    workout = current_workout(catalog, state)
    if workout is None or not 0 <= state.block_index < len(workout.blocks):
        return None
    return workout.blocks[state.block_index]


def current_exercise(catalog: WorkoutCatalog, state: NavigationState) -> Exercise | None:
    block = current_block(catalog, state)
    if block is None or not 0 <= state.exercise_index < len(block.exercises):
        return None
    return block.exercises[state.exercise_index]
