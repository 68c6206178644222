"""Tests for navigation transitions.

Covers the boundary behaviour of advance/retreat/skip_block, menu
selection, and the invariants that must hold over every reachable state.
"""

import pytest

from clifit.navigation import transitions
from clifit.navigation.state import NavigationState, Phase, current_exercise, initial_state
from clifit.workouts.models import Block, Exercise, Workout, WorkoutCatalog


def _in_workout(block_index: int = 0, exercise_index: int = 0, workout_index: int = 0) -> NavigationState:
    return NavigationState(
        phase=Phase.WORKOUT,
        workout_index=workout_index,
        block_index=block_index,
        exercise_index=exercise_index,
    )


def _position(state: NavigationState) -> tuple[Phase, int, int]:
    return state.phase, state.block_index, state.exercise_index


def test_pull_day_scenario(pull_day: WorkoutCatalog):
    """Test the Pull Day walk-through: A(3) then B(2) then done."""
    state = transitions.confirm_selection(pull_day, initial_state(pull_day))
    assert _position(state) == (Phase.WORKOUT, 0, 0)

    for _ in range(3):
        state = transitions.advance(pull_day, state)
    assert _position(state) == (Phase.WORKOUT, 1, 0)

    back = transitions.retreat(pull_day, state)
    assert _position(back) == (Phase.WORKOUT, 0, 2)

    for _ in range(2):
        state = transitions.advance(pull_day, state)
    assert state.phase == Phase.DONE


def test_advance_within_block(pull_day: WorkoutCatalog):
    """Test that advance moves to the next exercise of the same block."""
    assert _position(transitions.advance(pull_day, _in_workout(0, 0))) == (Phase.WORKOUT, 0, 1)


def test_advance_past_last_exercise_of_last_block_finishes(pull_day: WorkoutCatalog):
    """Test that the last advance reaches DONE and keeps the workout index."""
    state = transitions.advance(pull_day, _in_workout(1, 1))
    assert state.phase == Phase.DONE
    assert state.workout_index == 0


def test_retreat_at_start_is_idempotent(pull_day: WorkoutCatalog):
    """Test that retreat at the first exercise of the first block changes nothing."""
    start = _in_workout(0, 0)
    state = start
    for _ in range(5):
        state = transitions.retreat(pull_day, state)
        assert state == start


def test_retreat_within_block(pull_day: WorkoutCatalog):
    """Test that retreat moves back one exercise inside a block."""
    assert _position(transitions.retreat(pull_day, _in_workout(0, 2))) == (Phase.WORKOUT, 0, 1)


def test_skip_block_resets_exercise(pull_day: WorkoutCatalog):
    """Test that skipping a block lands on its successor's first exercise."""
    assert _position(transitions.skip_block(pull_day, _in_workout(0, 2))) == (Phase.WORKOUT, 1, 0)


def test_skip_block_from_last_block_finishes(pull_day: WorkoutCatalog):
    """Test that skipping the last block is the same as finishing."""
    assert transitions.skip_block(pull_day, _in_workout(1, 0)).phase == Phase.DONE


@pytest.mark.parametrize("sizes", [[1], [3, 2], [1, 1, 1], [4, 1, 3, 2], [2, 5]])
def test_advance_total_count_reaches_done(build_catalog, sizes: list[int]):
    """Test that advancing exactly once per exercise reaches DONE, and not earlier."""
    catalog = build_catalog(sizes)
    state = _in_workout()
    total = sum(sizes)
    for step in range(total):
        assert state.phase == Phase.WORKOUT, f"finished early at step {step}"
        state = transitions.advance(catalog, state)
    assert state.phase == Phase.DONE


@pytest.mark.parametrize("sizes", [[1], [3, 2], [1, 1, 1], [4, 1, 3, 2]])
def test_skip_block_count_reaches_done(build_catalog, sizes: list[int]):
    """Test that blockCount - 1 skips reach the last block and one more finishes."""
    catalog = build_catalog(sizes)
    state = _in_workout(0, 0)
    for _ in range(len(sizes) - 1):
        state = transitions.skip_block(catalog, state)
    assert _position(state) == (Phase.WORKOUT, len(sizes) - 1, 0)
    assert transitions.skip_block(catalog, state).phase == Phase.DONE


def _all_workout_positions(catalog: WorkoutCatalog) -> list[NavigationState]:
    workout = catalog[0]
    return [
        _in_workout(block_index, exercise_index)
        for block_index, block in enumerate(workout.blocks)
        for exercise_index in range(len(block.exercises))
    ]


@pytest.mark.parametrize("sizes", [[3, 2], [1, 4, 1], [2, 2, 2]])
def test_advance_then_retreat_is_identity_away_from_end(build_catalog, sizes: list[int]):
    """Test local invertibility: retreat(advance(s)) == s unless advance finished."""
    catalog = build_catalog(sizes)
    for state in _all_workout_positions(catalog):
        advanced = transitions.advance(catalog, state)
        if advanced.phase == Phase.DONE:
            continue
        assert transitions.retreat(catalog, advanced) == state


@pytest.mark.parametrize("sizes", [[3, 2], [1, 4, 1], [2, 2, 2]])
def test_retreat_then_advance_is_identity_away_from_start(build_catalog, sizes: list[int]):
    """Test local invertibility the other way round."""
    catalog = build_catalog(sizes)
    for state in _all_workout_positions(catalog)[1:]:
        assert transitions.advance(catalog, transitions.retreat(catalog, state)) == state


@pytest.mark.parametrize("sizes", [[3, 2], [1, 4, 1], [1]])
def test_every_reachable_workout_state_is_in_bounds(build_catalog, sizes: list[int]):
    """Test that no sequence of moves produces an out-of-range index."""
    catalog = build_catalog(sizes)
    moves = [transitions.advance, transitions.retreat, transitions.skip_block]
    seen = {_in_workout()}
    frontier = [_in_workout()]
    while frontier:
        state = frontier.pop()
        for move in moves:
            nxt = move(catalog, state)
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)

    for state in seen:
        if state.phase == Phase.WORKOUT:
            assert current_exercise(catalog, state) is not None
    assert sum(1 for state in seen if state.phase == Phase.WORKOUT) == sum(sizes)
    assert any(state.phase == Phase.DONE for state in seen)


@pytest.mark.parametrize(
    "move",
    [transitions.advance, transitions.retreat, transitions.skip_block],
)
def test_workout_moves_are_noops_outside_workout(pull_day: WorkoutCatalog, move):
    """Test that in-workout moves ignore the menu and done phases."""
    for phase in (Phase.MENU, Phase.DONE):
        state = NavigationState(phase=phase)
        assert move(pull_day, state) is state


def test_select_workout_clamps(catalog: WorkoutCatalog):
    """Test that the menu cursor stays within the catalog."""
    state = initial_state(catalog)
    assert transitions.select_workout(catalog, state, 2).workout_index == 2
    assert transitions.select_workout(catalog, state, 99).workout_index == 2
    assert transitions.select_workout(catalog, state, -4).workout_index == 0


def test_move_selection(catalog: WorkoutCatalog):
    """Test relative cursor moves, including at both ends."""
    state = initial_state(catalog)
    state = transitions.move_selection(catalog, state, -1)
    assert state.workout_index == 0
    state = transitions.move_selection(catalog, state, 1)
    state = transitions.move_selection(catalog, state, 1)
    state = transitions.move_selection(catalog, state, 1)
    assert state.workout_index == 2
    assert state.phase == Phase.MENU


def test_select_workout_only_in_menu(catalog: WorkoutCatalog):
    """Test that the cursor cannot move during a workout."""
    state = _in_workout(0, 1)
    assert transitions.select_workout(catalog, state, 2) is state


def test_confirm_selection_starts_at_first_exercise(catalog: WorkoutCatalog):
    """Test that entering a workout always starts at block 0, exercise 0."""
    state = NavigationState(phase=Phase.MENU, workout_index=1, block_index=1, exercise_index=1)
    state = transitions.confirm_selection(catalog, state)
    assert _position(state) == (Phase.WORKOUT, 0, 0)
    assert state.workout_index == 1


def test_confirm_selection_outside_menu_is_noop(catalog: WorkoutCatalog):
    """Test that confirm is ignored outside the menu."""
    state = _in_workout(1, 1)
    assert transitions.confirm_selection(catalog, state) is state


def test_confirm_selection_with_empty_catalog_is_noop():
    """Test that an empty catalog cannot be entered."""
    empty = WorkoutCatalog()
    state = NavigationState()
    assert transitions.confirm_selection(empty, state) is state
    assert transitions.select_workout(empty, state, 3) is state


def test_return_to_menu_then_other_workout_starts_fresh(catalog: WorkoutCatalog):
    """Test that a different workout starts at 0/0 regardless of where the last one ended."""
    state = transitions.confirm_selection(catalog, initial_state(catalog))
    for _ in range(5):
        state = transitions.advance(catalog, state)
    assert state.phase == Phase.DONE

    state = transitions.return_to_menu(catalog, state)
    assert state.phase == Phase.MENU
    assert state.workout_index == 0

    state = transitions.move_selection(catalog, state, 1)
    state = transitions.confirm_selection(catalog, state)
    assert _position(state) == (Phase.WORKOUT, 0, 0)
    assert state.workout_index == 1


def test_return_to_menu_discards_position(catalog: WorkoutCatalog):
    """Test that leaving mid-workout clears the block and exercise indices."""
    state = transitions.return_to_menu(catalog, _in_workout(1, 1))
    assert _position(state) == (Phase.MENU, 0, 0)


def test_return_to_menu_without_menu_is_noop(pull_day: WorkoutCatalog):
    """Test that the single-workout variant has no way back to a menu."""
    state = initial_state(pull_day, has_menu=False)
    assert transitions.return_to_menu(pull_day, state) is state
    done = state.replace(phase=Phase.DONE)
    assert transitions.return_to_menu(pull_day, done) is done


def test_degenerate_data_does_not_crash():
    """Test that empty workouts and blocks never index out of bounds."""
    catalog = WorkoutCatalog(
        workouts=(
            Workout(name="No blocks"),
            Workout(name="Empty block", blocks=(Block(name="Hollow"),)),
        )
    )
    for workout_index in range(2):
        state = _in_workout(workout_index=workout_index)
        for move in (transitions.advance, transitions.retreat, transitions.skip_block):
            assert move(catalog, state) is state


def test_out_of_range_workout_index_is_noop(pull_day: WorkoutCatalog):
    """Test that a stale workout index leaves the state unchanged."""
    state = _in_workout(workout_index=7)
    assert transitions.advance(pull_day, state) is state


def test_moves_never_enter_an_empty_block():
    """Test that advance and skip_block stay put rather than land in an empty block."""
    catalog = WorkoutCatalog(
        workouts=(
            Workout(
                name="Trailing hollow",
                blocks=(Block(name="A", exercises=(Exercise(name="Rows"),)), Block(name="Hollow")),
            ),
            Workout(
                name="Middle hollow",
                blocks=(
                    Block(name="Hollow"),
                    Block(name="B", exercises=(Exercise(name="Dips"), Exercise(name="Curls"))),
                ),
            ),
        )
    )
    start = _in_workout(workout_index=0)
    for move in (transitions.advance, transitions.skip_block):
        assert move(catalog, start) is start

    last = _in_workout(block_index=1, exercise_index=0, workout_index=1)
    assert transitions.retreat(catalog, last) is last
