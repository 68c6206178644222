"""Workout entity models.

Workouts are loaded once at startup and never mutated afterwards, so every
model is frozen. Text fields are stripped on construction and optional
fields default to an empty string, which lets the view test presence with a
plain truthiness check.
"""

from pydantic import BaseModel, ConfigDict, field_validator


def _strip(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


class Exercise(BaseModel):
    """A single movement within a block.

    Attributes:
        name: Exercise name (required, non-empty)
        sets: Prescribed sets, e.g. "3 x 10-12"
        tempo: Tempo cue, e.g. "2 sec pull"
        notes: Free-form coaching notes
    """

    model_config = ConfigDict(frozen=True)

    name: str
    sets: str = ""
    tempo: str = ""
    notes: str = ""

    @field_validator("name", "sets", "tempo", "notes", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> str:
        return _strip(value)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("exercise name must not be empty")
        return value


class Block(BaseModel):
    """A named phase of a workout with an ordered list of exercises.

    Attributes:
        name: Block name (required)
        duration: Optional duration hint, e.g. "10-15 min"
        exercises: Exercises in the order they are performed
    """

    model_config = ConfigDict(frozen=True)

    name: str
    duration: str = ""
    exercises: tuple[Exercise, ...] = ()

    @field_validator("name", "duration", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> str:
        return _strip(value)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("block name must not be empty")
        return value

    @property
    def label(self) -> str:
        """Block name with the duration appended when present."""
        if self.duration:
            return f"{self.name} ({self.duration})"
        return self.name


class Workout(BaseModel):
    """A named, ordered sequence of blocks."""

    model_config = ConfigDict(frozen=True)

    name: str
    blocks: tuple[Block, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> str:
        return _strip(value)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("workout name must not be empty")
        return value

    @property
    def exercise_count(self) -> int:
        return sum(len(block.exercises) for block in self.blocks)


class WorkoutCatalog(BaseModel):
    """Ordered, read-only collection of workouts.

    Order is the order of the definition document; the menu lists workouts
    in exactly this order.
    """

    model_config = ConfigDict(frozen=True)

    workouts: tuple[Workout, ...] = ()

    def __len__(self) -> int:
        return len(self.workouts)

    def __getitem__(self, index: int) -> Workout:
        return self.workouts[index]

    def names(self) -> list[str]:
        return [workout.name for workout in self.workouts]

    def get(self, name: str) -> Workout | None:
        """Find a workout by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().casefold()
        for workout in self.workouts:
            if workout.name.casefold() == wanted:
                return workout
        return None

    def only(self, name: str) -> "WorkoutCatalog":
        """Collapse the catalog to the single named workout.

        Raises:
            KeyError: If no workout has that name
        """
        workout = self.get(name)
        if workout is None:
            raise KeyError(name)
        return WorkoutCatalog(workouts=(workout,))
