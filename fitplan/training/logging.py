"""Training generation observability.

Structured loguru events for generated days and generation failures.
Call log_generation_failure before re-raising WorkoutGenerationError.
"""

from loguru import logger

from fitplan.training.builder import calculate_workout_volume
from fitplan.training.errors import WorkoutGenerationError
from fitplan.training.models import ValidationIssue, WorkoutDay


def average_rest_time(workout: WorkoutDay) -> int:
    if not workout.exercises:
        return 0
    return round(sum(ex.rest_time for ex in workout.exercises) / len(workout.exercises))


def log_workout_generation(workout: WorkoutDay) -> None:
    """Log a summary of one generated day."""
    logger.info(
        "Workout generated",
        workout=workout.name,
        focus_area=workout.focus_area,
        volume=calculate_workout_volume(workout),
        estimated_minutes=round(workout.estimated_time, 1),
        exercise_count=len(workout.exercises),
        compound_count=sum(1 for ex in workout.exercises if ex.compound),
        average_rest_seconds=average_rest_time(workout),
    )


def log_validation_issues(issues: list[ValidationIssue]) -> None:
    for issue in issues:
        logger.warning(
            "TRAINING_WEEK_ISSUE",
            issue_type=issue.type.value,
            muscle=issue.muscle,
            days=issue.days,
            detail=issue.message,
        )


def log_generation_failure(err: WorkoutGenerationError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log a generation failure with context.

    Args:
        err: The WorkoutGenerationError that occurred
        context: Additional context dictionary for logging
    """
    logger.error(
        "TRAINING_GENERATION_FAILED",
        code=err.code,
        details=err.details,
        **context,
    )
