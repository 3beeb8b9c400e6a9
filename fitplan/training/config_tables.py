"""Configuration Tables - one typed record per axis.

Four independent lookup tables parameterise generation:
- experience level -> base sets / exercises / rest / reps
- goal -> multipliers, rep range, compound focus
- prior activity frequency -> volume and rest multipliers
- experience level -> progression strategy (session volume ceiling, deload)

The generator composes them by plain multiplication; there is no
interpolation between rows.
"""

import math
from dataclasses import dataclass, replace

from fitplan.training.enums import (
    ActivityFrequency,
    ExperienceLevel,
    TrainingGoal,
    TrainingTime,
    VolumeDistribution,
)


@dataclass(frozen=True)
class ExperienceConfig:
    """Base workout parameters for one experience level.

    Attributes:
        sets_per_exercise: Base set count per exercise
        exercises_per_muscle: Base exercise count per muscle group
        rest_time: Base rest between sets in seconds
        reps: Default rep range (e.g., "8-12")
        complexity_limit: Highest exercise complexity allowed (1-5)
        weekly_progression: Allowed weekly load increase in percent
    """

    sets_per_exercise: int
    exercises_per_muscle: int
    rest_time: int
    reps: str
    complexity_limit: int
    weekly_progression: float


@dataclass(frozen=True)
class GoalConfig:
    """Goal-specific multipliers.

    Attributes:
        sets_multiplier: Multiplier on the base set count
        rest_time_multiplier: Multiplier on the base rest time
        reps: Rep range prescribed for the goal
        compound_focus: Target share of compound exercises (0.0-1.0)
        volume_distribution: Shape of volume across the session
    """

    sets_multiplier: float
    rest_time_multiplier: float
    reps: str
    compound_focus: float
    volume_distribution: VolumeDistribution


@dataclass(frozen=True)
class FrequencyAdjustment:
    """Adjustment for how active the user already is.

    Attributes:
        volume_multiplier: Multiplier on base sets
        intensity_multiplier: Multiplier on intensity (advisory)
        rest_multiplier: Multiplier on base rest
        adaptation_weeks: Weeks of adaptation before full volume
    """

    volume_multiplier: float
    intensity_multiplier: float
    rest_multiplier: float
    adaptation_weeks: int


@dataclass(frozen=True)
class ProgressionStrategy:
    """Progression and fatigue limits for one experience level.

    Attributes:
        weekly_increase: Weekly load increase as a fraction
        deload_frequency: Weeks between deloads
        volume_reduction: Fraction of sets kept when a session is over the ceiling
        max_volume_per_session: Fatigue ceiling for one session
    """

    weekly_increase: float
    deload_frequency: int
    volume_reduction: float
    max_volume_per_session: int


EXPERIENCE_CONFIG: dict[ExperienceLevel, ExperienceConfig] = {
    ExperienceLevel.NONE: ExperienceConfig(
        sets_per_exercise=3,
        exercises_per_muscle=1,
        rest_time=90,
        reps="12-15",
        complexity_limit=2,
        weekly_progression=5,
    ),
    ExperienceLevel.BEGINNER: ExperienceConfig(
        sets_per_exercise=3,
        exercises_per_muscle=2,
        rest_time=75,
        reps="10-12",
        complexity_limit=3,
        weekly_progression=10,
    ),
    ExperienceLevel.INTERMEDIATE: ExperienceConfig(
        sets_per_exercise=4,
        exercises_per_muscle=3,
        rest_time=60,
        reps="8-12",
        complexity_limit=4,
        weekly_progression=7.5,
    ),
    ExperienceLevel.ADVANCED: ExperienceConfig(
        sets_per_exercise=4,
        exercises_per_muscle=4,
        rest_time=45,
        reps="6-12",
        complexity_limit=5,
        weekly_progression=5,
    ),
}

GOAL_CONFIG: dict[TrainingGoal, GoalConfig] = {
    TrainingGoal.STRENGTH: GoalConfig(
        sets_multiplier=1.2,
        rest_time_multiplier=1.5,
        reps="4-6",
        compound_focus=0.8,
        volume_distribution=VolumeDistribution.ASCENDING,
    ),
    TrainingGoal.HYPERTROPHY: GoalConfig(
        sets_multiplier=1.1,
        rest_time_multiplier=1.0,
        reps="8-12",
        compound_focus=0.6,
        volume_distribution=VolumeDistribution.BALANCED,
    ),
    TrainingGoal.ENDURANCE: GoalConfig(
        sets_multiplier=0.8,
        rest_time_multiplier=0.7,
        reps="15-20",
        compound_focus=0.5,
        volume_distribution=VolumeDistribution.DESCENDING,
    ),
    TrainingGoal.WEIGHT_LOSS: GoalConfig(
        sets_multiplier=1.0,
        rest_time_multiplier=0.8,
        reps="12-15",
        compound_focus=0.7,
        volume_distribution=VolumeDistribution.BALANCED,
    ),
    TrainingGoal.GENERAL_FITNESS: GoalConfig(
        sets_multiplier=1.0,
        rest_time_multiplier=1.0,
        reps="10-15",
        compound_focus=0.6,
        volume_distribution=VolumeDistribution.BALANCED,
    ),
}

FREQUENCY_ADJUSTMENTS: dict[ActivityFrequency, FrequencyAdjustment] = {
    ActivityFrequency.SEDENTARY: FrequencyAdjustment(0.7, 0.6, 1.3, 4),
    ActivityFrequency.LIGHT: FrequencyAdjustment(0.8, 0.8, 1.2, 3),
    ActivityFrequency.MODERATE: FrequencyAdjustment(1.0, 1.0, 1.0, 2),
    ActivityFrequency.HEAVY: FrequencyAdjustment(1.1, 1.1, 0.9, 1),
    ActivityFrequency.ATHLETE: FrequencyAdjustment(1.2, 1.2, 0.8, 0),
}

PROGRESSION_STRATEGY: dict[ExperienceLevel, ProgressionStrategy] = {
    ExperienceLevel.NONE: ProgressionStrategy(0.05, 6, 0.4, 120),
    ExperienceLevel.BEGINNER: ProgressionStrategy(0.1, 8, 0.5, 150),
    ExperienceLevel.INTERMEDIATE: ProgressionStrategy(0.07, 10, 0.6, 180),
    ExperienceLevel.ADVANCED: ProgressionStrategy(0.05, 12, 0.7, 200),
}

TIME_ADJUSTMENT: dict[TrainingTime, float] = {
    TrainingTime.MIN_30: 0.6,
    TrainingTime.MIN_45: 0.8,
    TrainingTime.MIN_60: 1.0,
    TrainingTime.MIN_90: 1.2,
    TrainingTime.MIN_120: 1.4,
}

# Advisory sessions-per-week label; the real day count comes from the user's selection
WEEKLY_FREQUENCY: dict[ActivityFrequency, int] = {
    ActivityFrequency.SEDENTARY: 2,
    ActivityFrequency.LIGHT: 3,
    ActivityFrequency.MODERATE: 4,
    ActivityFrequency.HEAVY: 5,
    ActivityFrequency.ATHLETE: 6,
}
DEFAULT_WEEKLY_FREQUENCY = 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return math.floor(value + 0.5)


def time_adjustment_for(training_time: TrainingTime | None) -> float:
    """Map a session time budget to its volume/rest scalar (1.0 when unset)."""
    if training_time is None:
        return 1.0
    return TIME_ADJUSTMENT.get(training_time, 1.0)


def weekly_frequency_for(activity: ActivityFrequency | None) -> int:
    """Advisory weekly session count for a prior-activity level."""
    if activity is None:
        return DEFAULT_WEEKLY_FREQUENCY
    return WEEKLY_FREQUENCY.get(activity, DEFAULT_WEEKLY_FREQUENCY)


def adjusted_experience_config(level: ExperienceLevel, activity: ActivityFrequency) -> ExperienceConfig:
    """Scale the experience row by the prior-activity row.

    Args:
        level: Experience level
        activity: Prior activity frequency

    Returns:
        ExperienceConfig with sets and rest scaled (half-up rounding)
    """
    base = EXPERIENCE_CONFIG[level]
    adjustment = FREQUENCY_ADJUSTMENTS[activity]
    return replace(
        base,
        sets_per_exercise=round_half_up(base.sets_per_exercise * adjustment.volume_multiplier),
        rest_time=round_half_up(base.rest_time * adjustment.rest_multiplier),
    )

