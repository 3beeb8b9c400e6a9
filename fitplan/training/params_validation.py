"""Pre-generation validation of WorkoutParams.

Error policy:
- TIME_INVALID (missing config objects, non-positive time adjustment) is
  fatal: the day cannot be generated and program assembly aborts.
- VOLUME_HIGH (base sets outside the global bounds) and
  EXERCISE_DISTRIBUTION (compound share below the goal's target) are
  recoverable: a base workout is built and adjusted best-effort.
"""

import math

from fitplan.training.enums import WorkoutErrorCode
from fitplan.training.invariants import (
    DELOAD_VOLUME_REDUCTION,
    MAX_SETS,
    MIN_RECOVERY_MULTIPLIER,
    MIN_REST_SECONDS,
    MIN_SETS,
)
from fitplan.training.models import WorkoutDay, WorkoutError, WorkoutParams


def validate_workout_params(params: WorkoutParams) -> list[WorkoutError]:
    """Validate generation parameters for one day.

    Args:
        params: WorkoutParams to check

    Returns:
        List of WorkoutError (empty when the parameters are usable as-is)
    """
    errors: list[WorkoutError] = []

    if params.level is None or params.config is None or params.goal_config is None:
        errors.append(WorkoutError(code=WorkoutErrorCode.TIME_INVALID, message="Required workout parameters are missing"))
        return errors

    if params.time_adjustment <= 0:
        errors.append(
            WorkoutError(
                code=WorkoutErrorCode.TIME_INVALID,
                message="Time adjustment must be positive",
                details={"time_adjustment": params.time_adjustment},
            )
        )

    sets = params.config.sets_per_exercise
    if sets < MIN_SETS:
        errors.append(WorkoutError(code=WorkoutErrorCode.VOLUME_HIGH, message="Set count too low", details={"sets": sets}))
    if sets > MAX_SETS:
        errors.append(WorkoutError(code=WorkoutErrorCode.VOLUME_HIGH, message="Set count too high", details={"sets": sets}))

    if params.exercises:
        compound_ratio = sum(1 for ex in params.exercises if ex.compound) / len(params.exercises)
        if compound_ratio < params.goal_config.compound_focus:
            errors.append(
                WorkoutError(
                    code=WorkoutErrorCode.EXERCISE_DISTRIBUTION,
                    message="Too few compound exercises for the goal",
                    details={
                        "compound_ratio": round(compound_ratio, 2),
                        "compound_focus": params.goal_config.compound_focus,
                    },
                )
            )

    return errors


def has_fatal_error(errors: list[WorkoutError]) -> bool:
    return any(e.code == WorkoutErrorCode.TIME_INVALID for e in errors)


def _reduce_volume(workout: WorkoutDay) -> WorkoutDay:
    exercises = [
        ex.model_copy(update={"sets": max(MIN_SETS, math.floor(ex.sets * DELOAD_VOLUME_REDUCTION))})
        for ex in workout.exercises
    ]
    return workout.model_copy(update={"exercises": exercises})


def _shorten_rest(workout: WorkoutDay) -> WorkoutDay:
    exercises = [
        ex.model_copy(update={"rest_time": max(MIN_REST_SECONDS, math.floor(ex.rest_time * MIN_RECOVERY_MULTIPLIER))})
        for ex in workout.exercises
    ]
    return workout.model_copy(update={"exercises": exercises})


def _rebalance(workout: WorkoutDay) -> WorkoutDay:
    # Compound work first with an extra set; isolation gives one back.
    compounds = [ex.model_copy(update={"sets": ex.sets + 1}) for ex in workout.exercises if ex.compound]
    isolations = [ex.model_copy(update={"sets": max(MIN_SETS, ex.sets - 1)}) for ex in workout.exercises if not ex.compound]
    return workout.model_copy(update={"exercises": [*compounds, *isolations]})


_ADJUSTMENTS = {
    WorkoutErrorCode.VOLUME_HIGH: _reduce_volume,
    WorkoutErrorCode.TIME_INVALID: _shorten_rest,
    WorkoutErrorCode.EXERCISE_DISTRIBUTION: _rebalance,
}


def adjust_workout_based_on_errors(workout: WorkoutDay, errors: list[WorkoutError]) -> WorkoutDay:
    """Apply one best-effort adjustment per reported error, in order.

    Args:
        workout: Base workout built from the flagged parameters
        errors: Errors reported by validate_workout_params

    Returns:
        Adjusted WorkoutDay
    """
    adjusted = workout
    for error in errors:
        adjusted = _ADJUSTMENTS[error.code](adjusted)
    return adjusted
