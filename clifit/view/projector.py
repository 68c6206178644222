"""View projection.

render() maps (catalog, state) to a View: an ordered tuple of plain text
lines, each tagged with a StyleTag. Projection is pure; turning a View into
coloured terminal output is the job of clifit.view.styles.
"""

from dataclasses import dataclass

from clifit.navigation.state import NavigationState, Phase, current_block, current_exercise, current_workout
from clifit.view.styles import StyleTag
from clifit.workouts.models import WorkoutCatalog

APP_TITLE = "CLIFIT"

MENU_HELP = "[j/k] navigate • [enter] select • [q] quit"
WORKOUT_HELP = "[enter/n] next • [p] previous • [s] skip block • [m] menu • [q] quit"
WORKOUT_HELP_NO_MENU = "[enter/n] next • [p] previous • [s] skip block • [q] quit"
DONE_HELP = "[m] menu • [q] quit"
QUIT_HELP = "[q] quit"


@dataclass(frozen=True)
class ViewLine:
    text: str
    style: StyleTag = StyleTag.EXERCISE


BLANK = ViewLine("", StyleTag.EXERCISE)


@dataclass(frozen=True)
class View:
    """A rendered screen."""

    lines: tuple[ViewLine, ...]

    def plain(self) -> str:
        """Screen text without styling."""
        return "\n".join(line.text for line in self.lines)

    def styled(self, tag: StyleTag) -> list[str]:
        """Texts of all lines carrying tag."""
        return [line.text for line in self.lines if line.style == tag]


def render_menu(catalog: WorkoutCatalog, state: NavigationState) -> View:
    lines = [
        ViewLine(APP_TITLE, StyleTag.TITLE),
        BLANK,
        ViewLine("Select a workout", StyleTag.DIM),
        BLANK,
    ]
    for index, workout in enumerate(catalog.workouts):
        if index == state.workout_index:
            lines.append(ViewLine(f"> {workout.name}", StyleTag.SELECTED))
        else:
            lines.append(ViewLine(f"  {workout.name}", StyleTag.EXERCISE))
    lines += [BLANK, ViewLine(MENU_HELP, StyleTag.HELP)]
    return View(tuple(lines))


def render_workout(catalog: WorkoutCatalog, state: NavigationState) -> View:
    workout = current_workout(catalog, state)
    block = current_block(catalog, state)
    exercise = current_exercise(catalog, state)
    if workout is None or block is None or exercise is None:
        return render_empty()

    lines = [
        ViewLine(workout.name.upper(), StyleTag.TITLE),
        BLANK,
        ViewLine(block.label, StyleTag.BLOCK),
        ViewLine(
            f"Block {state.block_index + 1}/{len(workout.blocks)} • "
            f"Exercise {state.exercise_index + 1}/{len(block.exercises)}",
            StyleTag.DIM,
        ),
        BLANK,
        ViewLine(exercise.name, StyleTag.HIGHLIGHT),
    ]
    if exercise.sets:
        lines.append(ViewLine(f"Sets: {exercise.sets}", StyleTag.EXERCISE))
    if exercise.tempo:
        lines.append(ViewLine(f"Tempo: {exercise.tempo}", StyleTag.EXERCISE))
    if exercise.notes:
        lines.append(ViewLine(exercise.notes, StyleTag.DIM))

    help_text = WORKOUT_HELP if state.has_menu else WORKOUT_HELP_NO_MENU
    lines += [BLANK, ViewLine(help_text, StyleTag.HELP)]
    return View(tuple(lines))


def render_done(catalog: WorkoutCatalog, state: NavigationState) -> View:
    workout = current_workout(catalog, state)
    if workout is None:
        return render_empty()

    return View(
        (
            ViewLine(f"{workout.name.upper()} Complete!", StyleTag.TITLE),
            BLANK,
            ViewLine("Great workout!", StyleTag.EXERCISE),
            BLANK,
            ViewLine(DONE_HELP if state.has_menu else QUIT_HELP, StyleTag.HELP),
        )
    )


def render_empty() -> View:
    return View((ViewLine("Nothing to show", StyleTag.DIM), BLANK, ViewLine(QUIT_HELP, StyleTag.HELP)))


_RENDERERS = {
    Phase.MENU: render_menu,
    Phase.WORKOUT: render_workout,
    Phase.DONE: render_done,
}


def render(catalog: WorkoutCatalog, state: NavigationState) -> View:
    """Render the screen for state."""
    return _RENDERERS[state.phase](catalog, state)
