"""Error types for workout definition loading."""


class WorkoutLoadError(RuntimeError):
    """Raised when a workout definition source cannot be loaded.

    Attributes:
        code: Error code (e.g. "INVALID_YAML", "EMPTY_BLOCK")
        message: Human readable message
    """

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")
