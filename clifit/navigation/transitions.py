"""Pure navigation transitions.

Every function takes the catalog and a NavigationState and returns a
NavigationState. A transition called in the wrong phase, or against
degenerate data (no blocks, an empty block), returns the input state
unchanged. Nothing here raises on navigation input.

Ordering policy for advance: exercises of the current block are exhausted
before moving to the next block, and only finishing the last exercise of
the last block (or skipping the last block) reaches DONE.
"""

from clifit.navigation.state import NavigationState, Phase, current_block, current_exercise, current_workout
from clifit.workouts.models import WorkoutCatalog


def select_workout(catalog: WorkoutCatalog, state: NavigationState, target_index: int) -> NavigationState:
    """Move the menu cursor to target_index, clamped to the catalog."""
    if state.phase != Phase.MENU or not state.has_menu or len(catalog) == 0:
        return state
    clamped = max(0, min(target_index, len(catalog) - 1))
    if clamped == state.workout_index:
        return state
    return state.replace(workout_index=clamped)


def move_selection(catalog: WorkoutCatalog, state: NavigationState, delta: int) -> NavigationState:
    """Move the menu cursor by delta entries (negative is up)."""
    return select_workout(catalog, state, state.workout_index + delta)


def confirm_selection(catalog: WorkoutCatalog, state: NavigationState) -> NavigationState:
    """Start the highlighted workout at its first exercise."""
    if state.phase != Phase.MENU or current_workout(catalog, state) is None:
        return state
    return state.replace(phase=Phase.WORKOUT, block_index=0, exercise_index=0)


def advance(catalog: WorkoutCatalog, state: NavigationState) -> NavigationState:
    """Go to the next exercise, rolling over into the next block or DONE."""
    if state.phase != Phase.WORKOUT:
        return state
    workout = current_workout(catalog, state)
    block = current_block(catalog, state)
    if workout is None or block is None or current_exercise(catalog, state) is None:
        return state

    if state.exercise_index < len(block.exercises) - 1:
        return state.replace(exercise_index=state.exercise_index + 1)
    if state.block_index < len(workout.blocks) - 1:
        if not workout.blocks[state.block_index + 1].exercises:
            return state
        return state.replace(block_index=state.block_index + 1, exercise_index=0)
    return state.replace(phase=Phase.DONE)


def retreat(catalog: WorkoutCatalog, state: NavigationState) -> NavigationState:
    """Go to the previous exercise, stepping back into the previous block.

    At the first exercise of the first block this is a no-op.
    """
    if state.phase != Phase.WORKOUT:
        return state
    workout = current_workout(catalog, state)
    if workout is None or current_exercise(catalog, state) is None:
        return state

    if state.exercise_index > 0:
        return state.replace(exercise_index=state.exercise_index - 1)
    if state.block_index > 0:
        previous = workout.blocks[state.block_index - 1]
        if not previous.exercises:
            return state
        return state.replace(block_index=state.block_index - 1, exercise_index=len(previous.exercises) - 1)
    return state


def skip_block(catalog: WorkoutCatalog, state: NavigationState) -> NavigationState:
    """Jump to the first exercise of the next block; from the last block, finish."""
    if state.phase != Phase.WORKOUT:
        return state
    workout = current_workout(catalog, state)
    if workout is None or current_exercise(catalog, state) is None:
        return state

    if state.block_index < len(workout.blocks) - 1:
        if not workout.blocks[state.block_index + 1].exercises:
            return state
        return state.replace(block_index=state.block_index + 1, exercise_index=0)
    return state.replace(phase=Phase.DONE)


def return_to_menu(catalog: WorkoutCatalog, state: NavigationState) -> NavigationState:
    """Leave the workout (or completion screen) for the menu.

    The menu cursor stays on the workout just left; the in-workout position
    is discarded. Without a menu this is a no-op.
    """
    if not state.has_menu or state.phase == Phase.MENU:
        return state
    return state.replace(phase=Phase.MENU, block_index=0, exercise_index=0)
