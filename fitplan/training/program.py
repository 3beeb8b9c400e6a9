"""Program Assembler - sole entry point of the generator.

Pipeline:
1. Resolve level, goal, prior activity and style from the profile
2. Generate one day per selected weekday (style rotation, per-day validation)
3. Apply goal emphasis, then fit each day to the target fatigue
4. Validate the week (volume ceiling, recovery windows)
5. Redistribute on failure (single pass unless configured otherwise)
6. Re-apply the builder clamp, compute rest days, stamp id and timestamp

Generation is synchronous and pure apart from the selection cache; the
returned program is handed to the caller for persistence.
"""

from datetime import UTC, datetime

from loguru import logger

from fitplan.training.builder import finalize_workout_day, generate_id
from fitplan.training.cache import ExerciseSelectionCache
from fitplan.training.config_tables import (
    GOAL_CONFIG,
    adjusted_experience_config,
    time_adjustment_for,
    weekly_frequency_for,
)
from fitplan.training.enums import (
    ActivityFrequency,
    ExperienceLevel,
    RedistributionStrategy,
    TrainingGoal,
)
from fitplan.training.errors import WorkoutGenerationError
from fitplan.training.fatigue import adjust_workout_for_fatigue, calculate_target_fatigue
from fitplan.training.goal_adjustment import adjust_for_goal
from fitplan.training.invariants import DAYS_PER_WEEK
from fitplan.training.logging import log_generation_failure, log_validation_issues, log_workout_generation
from fitplan.training.models import TrainingProgram, UserProfile, ValidationResult, WorkoutDay, WorkoutParams
from fitplan.training.repair.redistribute import repair_week
from fitplan.training.styles import determine_training_style, generate_week
from fitplan.training.validate import check_muscle_overlap


def calculate_rest_days(training_days: list[int]) -> list[int]:
    """Weekdays (0-6) not selected for training."""
    selected = set(training_days)
    return [day for day in range(DAYS_PER_WEEK) if day not in selected]


def build_workout_params(profile: UserProfile) -> WorkoutParams:
    """Shared WorkoutParams for every day of the profile's week."""
    level = profile.experience or ExperienceLevel.NONE
    goal = profile.goal or TrainingGoal.GENERAL_FITNESS
    activity = profile.activity_frequency or ActivityFrequency.MODERATE

    return WorkoutParams(
        day=0,
        config=adjusted_experience_config(level, activity),
        goal_config=GOAL_CONFIG[goal],
        time_adjustment=time_adjustment_for(profile.training_time),
        variation=0,
        level=level,
    )


def generate_workout_days(
    profile: UserProfile,
    *,
    cache: ExerciseSelectionCache | None = None,
) -> tuple[list[WorkoutDay], ValidationResult]:
    """Generate, adjust and validate the profile's week (no repair).

    Args:
        profile: User profile
        cache: Selection cache (defaults to the process-wide cache)

    Returns:
        (adjusted week, its validation result)

    Raises:
        WorkoutGenerationError: If a day's parameters are invalid (TIME_INVALID)
    """
    level = profile.experience or ExperienceLevel.NONE
    goal = profile.goal or TrainingGoal.GENERAL_FITNESS
    style = determine_training_style(profile)

    try:
        week = generate_week(style, build_workout_params(profile), profile.training_days, cache=cache)
    except WorkoutGenerationError as err:
        log_generation_failure(
            err,
            {
                "level": level.value,
                "style": style.value,
                "training_days": len(profile.training_days),
            },
        )
        raise

    target_fatigue = calculate_target_fatigue(level)
    adjusted = [adjust_workout_for_fatigue(adjust_for_goal(day, goal, level), target_fatigue, level) for day in week]

    return adjusted, check_muscle_overlap(adjusted, profile.training_days)


def create_training_program(
    profile: UserProfile,
    *,
    cache: ExerciseSelectionCache | None = None,
    strategy: RedistributionStrategy | None = None,
    now: datetime | None = None,
) -> TrainingProgram:
    """Create a weekly training program for a profile.

    Args:
        profile: User profile (never mutated)
        cache: Selection cache (defaults to the process-wide cache)
        strategy: Redistribution strategy (defaults to settings)
        now: Creation timestamp (defaults to the current UTC time)

    Returns:
        TrainingProgram with one WorkoutDay per selected training day

    Raises:
        WorkoutGenerationError: If generation of any day is fatal; no partial
            program is returned
    """
    level = profile.experience or ExperienceLevel.NONE
    style = determine_training_style(profile)

    week, validation = generate_workout_days(profile, cache=cache)

    if not validation.is_valid:
        log_validation_issues(validation.issues)
        week = repair_week(week, validation, profile.training_days, strategy)

    week = [finalize_workout_day(day) for day in week]
    for day in week:
        log_workout_generation(day)

    program = TrainingProgram(
        id=generate_id(),
        name=f"Program {level.value} - {style.value}",
        level=level,
        style=style,
        workout_days=week,
        frequency=weekly_frequency_for(profile.activity_frequency),
        rest_days=calculate_rest_days(profile.training_days),
        created_at=now or datetime.now(UTC),
    )

    logger.info(
        "Training program created",
        program_id=program.id,
        level=level.value,
        style=style.value,
        workout_days=len(week),
        rest_days=program.rest_days,
        issues_found=len(validation.issues),
    )
    return program
