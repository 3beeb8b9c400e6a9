"""Volume redistribution for weeks that fail validation.

Single pass (default): every day named by an issue drops one set (floor 2)
on each exercise whose muscle group is named by that issue. The result is
returned without re-validation, so a repair that leaves or creates a
conflict is not caught.

Iterative: validate -> redistribute until the week is valid, nothing
changes any more, or the iteration cap is reached.
"""

from loguru import logger

from fitplan.config.settings import settings
from fitplan.training.enums import RedistributionStrategy
from fitplan.training.invariants import MIN_SETS
from fitplan.training.models import ValidationIssue, ValidationResult, WorkoutDay
from fitplan.training.validate import check_muscle_overlap


def redistribute_workouts(
    workouts: list[WorkoutDay],
    issues: list[ValidationIssue],
    training_days: list[int],
) -> list[WorkoutDay]:
    """Reduce sets on the muscle groups flagged for each day.

    Args:
        workouts: Week, parallel-indexed to training_days
        issues: Validation issues (days are weekday numbers)
        training_days: Sorted weekday numbers

    Returns:
        New list of days; days without issues are returned as-is
    """
    redistributed: list[WorkoutDay] = []
    for workout, weekday in zip(workouts, training_days, strict=True):
        flagged = {issue.muscle for issue in issues if weekday in issue.days}
        if not flagged:
            redistributed.append(workout)
            continue

        exercises = [
            ex.model_copy(update={"sets": max(MIN_SETS, ex.sets - 1)}) if ex.target_muscle.value in flagged else ex
            for ex in workout.exercises
        ]
        redistributed.append(workout.model_copy(update={"exercises": exercises}))
    return redistributed


def _total_sets(workouts: list[WorkoutDay]) -> int:
    return sum(ex.sets for workout in workouts for ex in workout.exercises)


def redistribute_until_valid(
    workouts: list[WorkoutDay],
    validation: ValidationResult,
    training_days: list[int],
    max_iterations: int,
) -> tuple[list[WorkoutDay], ValidationResult]:
    """Repeat redistribution until the week validates.

    Args:
        workouts: Week that failed validation
        validation: Its validation result
        training_days: Sorted weekday numbers
        max_iterations: Maximum redistribution rounds

    Returns:
        (repaired week, validation result of the repaired week)
    """
    current = workouts
    for iteration in range(1, max_iterations + 1):
        if validation.is_valid:
            break

        repaired = redistribute_workouts(current, validation.issues, training_days)
        if _total_sets(repaired) == _total_sets(current):
            logger.debug("Redistribution reached a fixed point", iteration=iteration)
            break

        current = repaired
        validation = check_muscle_overlap(current, training_days)
        logger.debug(
            "Redistribution round complete",
            iteration=iteration,
            remaining_issues=len(validation.issues),
        )

    return current, validation


def repair_week(
    workouts: list[WorkoutDay],
    validation: ValidationResult,
    training_days: list[int],
    strategy: RedistributionStrategy | None = None,
    max_iterations: int | None = None,
) -> list[WorkoutDay]:
    """Repair a week that failed validation with the configured strategy.

    Args:
        workouts: Generated week
        validation: Its validation result
        training_days: Sorted weekday numbers
        strategy: Redistribution strategy (defaults to settings)
        max_iterations: Iteration cap for the iterative strategy (defaults to settings)

    Returns:
        Repaired week (the input week when it was already valid)
    """
    if validation.is_valid:
        return workouts

    strategy = strategy or settings.redistribution_strategy

    if strategy == RedistributionStrategy.SINGLE_PASS:
        return redistribute_workouts(workouts, validation.issues, training_days)

    repaired, final = redistribute_until_valid(
        workouts,
        validation,
        training_days,
        max_iterations or settings.redistribution_max_iterations,
    )
    if not final.is_valid:
        logger.warning(
            "Week still has issues after iterative redistribution",
            remaining_issues=len(final.issues),
        )
    return repaired
