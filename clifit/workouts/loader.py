"""Workout definition loader.

Parses a YAML document of the shape::

    Pull Day:
      Strength Block A (10-15 min):
        - DB Rows | 3 x 10-12 | 2 sec pull | Go heavy
        - Dead hangs | 2 x 20-30 sec

into a WorkoutCatalog. Workouts and blocks keep document order.

Fails fast on:
- Missing or unreadable file
- Invalid YAML
- Wrong document shape
- Empty catalog, workout or block
- Exercise lines without a name
"""

import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from clifit.workouts.errors import WorkoutLoadError
from clifit.workouts.models import Block, Exercise, Workout, WorkoutCatalog

BLOCK_LABEL_PATTERN = re.compile(r"^(.+?)\s*\(([^)]+)\)$")

# name | sets | tempo | notes
EXERCISE_FIELDS = ("name", "sets", "tempo", "notes")

# YAML node types accepted as exercise lines
EXERCISE_LINE_TYPES = (str, int, float, bool)


def parse_block_label(label: str) -> tuple[str, str]:
    """Split a block label into name and duration.

    "Strength Block A (10-15 min)" -> ("Strength Block A", "10-15 min").
    Labels without a parenthesized suffix have an empty duration.
    """
    text = str(label).strip()
    match = BLOCK_LABEL_PATTERN.match(text)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    return text, ""


def parse_exercise(line: object) -> Exercise:
    """Parse a pipe-delimited exercise line.

    Fields beyond the fourth are ignored; missing trailing fields are empty.

    Raises:
        WorkoutLoadError: If the exercise name is empty
    """
    text = "" if line is None else str(line)
    parts = [part.strip() for part in text.split("|")]
    fields = dict(zip(EXERCISE_FIELDS, parts, strict=False))
    if not fields.get("name"):
        raise WorkoutLoadError("INVALID_EXERCISE", f"Exercise line has no name: {line!r}")
    return Exercise(**fields)


def _parse_block(workout_name: str, label: object, lines: object) -> Block:
    name, duration = parse_block_label(str(label))
    if lines is None:
        lines = []
    if not isinstance(lines, list):
        raise WorkoutLoadError(
            "INVALID_STRUCTURE",
            f"Block '{name}' in workout '{workout_name}' must be a list of exercise lines",
        )
    if not lines:
        raise WorkoutLoadError("EMPTY_BLOCK", f"Block '{name}' in workout '{workout_name}' has no exercises")

    for line in lines:
        if line is not None and not isinstance(line, EXERCISE_LINE_TYPES):
            raise WorkoutLoadError(
                "INVALID_STRUCTURE",
                f"Block '{name}' in workout '{workout_name}' has a non-text exercise line: {line!r}",
            )
    exercises = tuple(parse_exercise(line) for line in lines)
    try:
        return Block(name=name, duration=duration, exercises=exercises)
    except ValidationError as e:
        raise WorkoutLoadError("INVALID_STRUCTURE", f"Invalid block in workout '{workout_name}': {e}") from e


def _parse_workout(name: object, blocks: object) -> Workout:
    workout_name = str(name).strip()
    if blocks is None:
        blocks = {}
    if not isinstance(blocks, dict):
        raise WorkoutLoadError(
            "INVALID_STRUCTURE",
            f"Workout '{workout_name}' must be a mapping of block labels to exercise lists",
        )
    if not blocks:
        raise WorkoutLoadError("EMPTY_WORKOUT", f"Workout '{workout_name}' has no blocks")

    parsed_blocks = tuple(_parse_block(workout_name, label, lines) for label, lines in blocks.items())
    try:
        workout = Workout(name=workout_name, blocks=parsed_blocks)
    except ValidationError as e:
        raise WorkoutLoadError("INVALID_STRUCTURE", f"Invalid workout name {name!r}: {e}") from e

    logger.debug(f"Parsed workout '{workout.name}': {len(workout.blocks)} blocks, {workout.exercise_count} exercises")
    return workout


def parse_catalog(data: object) -> WorkoutCatalog:
    """Build a WorkoutCatalog from an already-parsed YAML document.

    Args:
        data: Result of yaml.safe_load

    Returns:
        WorkoutCatalog in document order

    Raises:
        WorkoutLoadError: If the document shape is wrong or any collection is empty
    """
    if data is None:
        raise WorkoutLoadError("EMPTY_CATALOG", "No workouts defined")
    if not isinstance(data, dict):
        raise WorkoutLoadError("INVALID_STRUCTURE", "Top level must be a mapping of workout names to blocks")
    if not data:
        raise WorkoutLoadError("EMPTY_CATALOG", "No workouts defined")

    workouts = tuple(_parse_workout(name, blocks) for name, blocks in data.items())
    return WorkoutCatalog(workouts=workouts)


def load_catalog_from_text(text: str) -> WorkoutCatalog:
    """Parse YAML text into a WorkoutCatalog.

    Raises:
        WorkoutLoadError: If the YAML is invalid or the document is malformed
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WorkoutLoadError("INVALID_YAML", f"Invalid YAML: {e}") from e
    return parse_catalog(data)


def load_catalog(path: str | Path) -> WorkoutCatalog:
    """Load a WorkoutCatalog from a YAML file.

    Args:
        path: Path to the workouts file

    Returns:
        Loaded catalog

    Raises:
        WorkoutLoadError: If the file is missing, unreadable or malformed
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise WorkoutLoadError("FILE_NOT_FOUND", f"Workouts file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WorkoutLoadError("FILE_UNREADABLE", f"Cannot read {file_path}: {e}") from e

    catalog = load_catalog_from_text(text)
    logger.info(f"Loaded {len(catalog)} workouts from {file_path}")
    return catalog
