"""Canonical Training Error Types.

Standard error codes:
- TIME_INVALID: Workout parameters are missing or the time adjustment is not positive.
  Fatal: aborts the whole program assembly.
- VOLUME_HIGH: Set count outside the global bounds. Recovered locally.
- EXERCISE_DISTRIBUTION: Compound ratio below the goal's target. Recovered locally.

Validation issues (volume, recovery, balance) are never raised; they are
returned as data and drive redistribution.
"""


class WorkoutGenerationError(RuntimeError):
    """Raised when a workout day cannot be generated.

    Attributes:
        code: Error code (e.g., "TIME_INVALID")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class CatalogLoadError(RuntimeError):
    """Raised when the exercise catalog cannot be loaded.

    Attributes:
        code: Error code
        message: Error message
    """

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


class ProgramDocumentError(ValueError):
    """Raised when a program cannot be turned into a persistence document."""

    pass
