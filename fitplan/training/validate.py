"""Week Validator.

Two independent checks over a generated week:
- Volume: a day whose total volume (sets x average reps) exceeds the
  per-workout ceiling yields a volume issue.
- Recovery: for every muscle group, consecutive training days (in weekly
  cyclic order, wrapping from the last day back to the first) closer than
  the muscle's recovery window yield a recovery issue.

Issues are data; nothing here raises.
"""

from collections import defaultdict

from fitplan.training.builder import calculate_workout_volume
from fitplan.training.enums import IssueType, MuscleGroup
from fitplan.training.invariants import DAYS_PER_WEEK, MAX_VOLUME_PER_WORKOUT, MUSCLE_RECOVERY_HOURS
from fitplan.training.models import ValidationIssue, ValidationResult, WorkoutDay


def calculate_days_between(first: int, second: int) -> int:
    """Days from one weekday to the next, wrapping across the week end."""
    if second < first:
        return DAYS_PER_WEEK - first + second
    return second - first


def check_volume(workouts: list[WorkoutDay], training_days: list[int]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for workout, weekday in zip(workouts, training_days, strict=True):
        volume = calculate_workout_volume(workout)
        if volume > MAX_VOLUME_PER_WORKOUT:
            issues.append(
                ValidationIssue(
                    type=IssueType.VOLUME,
                    message=f"Volume too high in {workout.name} ({volume:.0f} > {MAX_VOLUME_PER_WORKOUT})",
                    muscle=workout.focus_area,
                    days=[weekday],
                )
            )
    return issues


def muscle_usage(workouts: list[WorkoutDay], training_days: list[int]) -> dict[MuscleGroup, list[int]]:
    """Map each muscle group to the sorted weekdays it is trained on."""
    usage: dict[MuscleGroup, set[int]] = defaultdict(set)
    for workout, weekday in zip(workouts, training_days, strict=True):
        for ex in workout.exercises:
            usage[ex.target_muscle].add(weekday)
    return {muscle: sorted(days) for muscle, days in usage.items()}


def check_recovery(workouts: list[WorkoutDay], training_days: list[int]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for muscle, days in muscle_usage(workouts, training_days).items():
        if len(days) < 2:
            continue

        required_days = MUSCLE_RECOVERY_HOURS[muscle] / 24
        pairs = list(zip(days, days[1:]))
        pairs.append((days[-1], days[0]))

        for first, second in pairs:
            gap = calculate_days_between(first, second)
            if gap < required_days:
                issues.append(
                    ValidationIssue(
                        type=IssueType.RECOVERY,
                        message=f"{muscle.value} has too little recovery between days {first} and {second}",
                        muscle=muscle.value,
                        days=[first, second],
                    )
                )
    return issues


def check_muscle_overlap(workouts: list[WorkoutDay], training_days: list[int]) -> ValidationResult:
    """Validate a generated week.

    Args:
        workouts: Generated days, parallel-indexed to training_days
        training_days: Sorted weekday numbers

    Returns:
        ValidationResult with volume issues first, then recovery issues
    """
    issues = check_volume(workouts, training_days) + check_recovery(workouts, training_days)
    return ValidationResult(is_valid=not issues, issues=issues)
