"""Fatigue/Volume Adjuster.

Fatigue index of a day = sum of sets x average reps x weight, where the
weight is 1.5 for compound and 1.0 for isolation exercises.

Over the level's session ceiling, every exercise keeps a fixed fraction of
its sets (the level's volume reduction), regardless of the overshoot size.
Otherwise sets are scaled by target / current fatigue. Both paths floor to
whole sets with a minimum of two.
"""

import math

from loguru import logger

from fitplan.training.builder import average_reps
from fitplan.training.config_tables import PROGRESSION_STRATEGY
from fitplan.training.enums import ExperienceLevel
from fitplan.training.invariants import (
    COMPOUND_FATIGUE_WEIGHT,
    ISOLATION_FATIGUE_WEIGHT,
    MIN_SETS,
    TARGET_FATIGUE_RATIO,
)
from fitplan.training.models import WorkoutDay


def calculate_fatigue_index(workout: WorkoutDay) -> float:
    total = 0.0
    for ex in workout.exercises:
        weight = COMPOUND_FATIGUE_WEIGHT if ex.compound else ISOLATION_FATIGUE_WEIGHT
        total += ex.sets * average_reps(ex.reps) * weight
    return total


def calculate_target_fatigue(experience: ExperienceLevel) -> float:
    """Target fatigue: 80% of the level's session ceiling."""
    return PROGRESSION_STRATEGY[experience].max_volume_per_session * TARGET_FATIGUE_RATIO


def _scale_sets(workout: WorkoutDay, factor: float) -> WorkoutDay:
    exercises = [ex.model_copy(update={"sets": max(MIN_SETS, math.floor(ex.sets * factor))}) for ex in workout.exercises]
    return workout.model_copy(update={"exercises": exercises})


def adjust_workout_for_fatigue(
    workout: WorkoutDay,
    target_fatigue: float,
    experience: ExperienceLevel,
) -> WorkoutDay:
    """Fit a day's sets to the target fatigue.

    Args:
        workout: Day to adjust
        target_fatigue: Desired fatigue index
        experience: Experience level (session ceiling and volume reduction)

    Returns:
        Adjusted copy of the day; an empty day is returned unchanged
    """
    current = calculate_fatigue_index(workout)
    if current <= 0:
        return workout

    strategy = PROGRESSION_STRATEGY[experience]
    if current > strategy.max_volume_per_session:
        logger.debug(
            "Session over fatigue ceiling, reducing volume",
            workout=workout.name,
            fatigue=round(current, 1),
            ceiling=strategy.max_volume_per_session,
            reduction=strategy.volume_reduction,
        )
        return _scale_sets(workout, strategy.volume_reduction)

    return _scale_sets(workout, target_fatigue / current)
