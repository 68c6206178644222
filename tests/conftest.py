"""Shared fixtures for CLIFIT tests."""

import sys

import pytest
from loguru import logger

from clifit.workouts.models import Block, Exercise, Workout, WorkoutCatalog


def make_block(name: str, count: int, duration: str = "") -> Block:
    """Build a block with count numbered exercises."""
    return Block(
        name=name,
        duration=duration,
        exercises=tuple(Exercise(name=f"{name} exercise {i + 1}") for i in range(count)),
    )


def make_workout(name: str, sizes: list[int]) -> Workout:
    """Build a workout whose blocks hold the given numbers of exercises."""
    return Workout(name=name, blocks=tuple(make_block(f"Block {i + 1}", size) for i, size in enumerate(sizes)))


@pytest.fixture
def pull_day() -> WorkoutCatalog:
    """Single workout "Pull Day": block A with 3 exercises, block B with 2."""
    block_a = Block(
        name="A",
        duration="10-15 min",
        exercises=(
            Exercise(name="DB Rows", sets="3 x 10-12", tempo="2 sec pull", notes="Go heavy"),
            Exercise(name="Chin-ups", sets="3 x 6-8"),
            Exercise(name="Face pulls"),
        ),
    )
    block_b = Block(
        name="B",
        exercises=(
            Exercise(name="Dead hangs", sets="2 x 20-30 sec"),
            Exercise(name="Farmer carries"),
        ),
    )
    return WorkoutCatalog(workouts=(Workout(name="Pull Day", blocks=(block_a, block_b)),))


@pytest.fixture
def catalog(pull_day: WorkoutCatalog) -> WorkoutCatalog:
    """Three workouts of different shapes, Pull Day first."""
    return WorkoutCatalog(
        workouts=(
            pull_day[0],
            make_workout("Push Day", [2, 2]),
            make_workout("Legs", [1]),
        )
    )


SAMPLE_YAML = """\
Pull Day:
  Strength Block A (10-15 min):
    - DB Rows | 3 x 10-12 | 2 sec pull | Go heavy
    - Chin-ups | 3 x 6-8
  Finisher:
    - Dead hangs | 2 x 20-30 sec
Push Day:
  Warm-up (5 min):
    - Push-ups | 2 x 10
"""


@pytest.fixture
def workouts_file(tmp_path):
    """A valid workouts file on disk."""
    path = tmp_path / "workouts.yaml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def build_catalog():
    """Factory: build_catalog([3, 2], [1]) -> catalog with one workout per size list."""

    def _build(*shapes: list[int]) -> WorkoutCatalog:
        return WorkoutCatalog(workouts=tuple(make_workout(f"Workout {i + 1}", sizes) for i, sizes in enumerate(shapes)))

    return _build


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (CLI runs bind stderr to a temporary stream)."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
