"""Global Training Invariants - Single Source of Truth.

Every builder, adjuster and validator imports its bounds from here.

The Workout-Day Builder is the only place that enforces the set and rest
clamps; the assembler re-applies the same clamp after post-processing.
"""

from fitplan.training.enums import MuscleGroup

# ---- Per-exercise clamps ----
MIN_SETS = 2
MAX_SETS = 6
MIN_REST_SECONDS = 30
MAX_REST_SECONDS = 180

# ---- Duration model ----
SET_DURATION_SECONDS = 45

# ---- Exercise counts ----
MIN_EXERCISES_PER_MUSCLE = 1

# ---- Volume ----
MAX_VOLUME_PER_WORKOUT = 300  # sets x average reps, summed over a day
TARGET_FATIGUE_RATIO = 0.8  # target fatigue = max volume per session x ratio

# Fatigue weight per exercise type
COMPOUND_FATIGUE_WEIGHT = 1.5
ISOLATION_FATIGUE_WEIGHT = 1.0

# ---- Degraded-path adjustments ----
DELOAD_VOLUME_REDUCTION = 0.4
MIN_RECOVERY_MULTIPLIER = 0.8

# ---- Recovery (hours before the same muscle may be trained again) ----
MUSCLE_RECOVERY_HOURS: dict[MuscleGroup, int] = {
    MuscleGroup.LEGS: 72,
    MuscleGroup.BACK: 48,
    MuscleGroup.CHEST: 48,
    MuscleGroup.SHOULDERS: 48,
    MuscleGroup.CORE: 24,
    MuscleGroup.BICEPS: 24,
    MuscleGroup.TRICEPS: 24,
}

# ---- Relative muscle size (exercise ordering, larger first) ----
MUSCLE_SIZE: dict[MuscleGroup, int] = {
    MuscleGroup.LEGS: 10,
    MuscleGroup.BACK: 9,
    MuscleGroup.CHEST: 8,
    MuscleGroup.SHOULDERS: 6,
    MuscleGroup.CORE: 5,
    MuscleGroup.BICEPS: 4,
    MuscleGroup.TRICEPS: 4,
}

DAYS_PER_WEEK = 7
