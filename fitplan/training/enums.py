from enum import StrEnum


class ExperienceLevel(StrEnum):
    NONE = "none"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TrainingGoal(StrEnum):
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    WEIGHT_LOSS = "weight_loss"
    GENERAL_FITNESS = "general_fitness"


class ActivityFrequency(StrEnum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    ATHLETE = "athlete"


class TrainingStyle(StrEnum):
    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL_LEGS = "push_pull_legs"
    OTHER = "other"
    NONE = "none"


class TrainingTime(StrEnum):
    MIN_30 = "30_min"
    MIN_45 = "45_min"
    MIN_60 = "60_min"
    MIN_90 = "90_min"
    MIN_120 = "120_min"


class MuscleGroup(StrEnum):
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    LEGS = "legs"
    CORE = "core"


class Equipment(StrEnum):
    BODYWEIGHT = "bodyweight"
    DUMBBELL = "dumbbell"
    BARBELL = "barbell"
    MACHINE = "machine"
    CABLE = "cable"


class VolumeDistribution(StrEnum):
    ASCENDING = "ascending"
    BALANCED = "balanced"
    DESCENDING = "descending"


class IssueType(StrEnum):
    VOLUME = "volume"
    RECOVERY = "recovery"
    BALANCE = "balance"


class WorkoutErrorCode(StrEnum):
    TIME_INVALID = "TIME_INVALID"
    VOLUME_HIGH = "VOLUME_HIGH"
    EXERCISE_DISTRIBUTION = "EXERCISE_DISTRIBUTION"


class RedistributionStrategy(StrEnum):
    SINGLE_PASS = "single_pass"
    ITERATIVE = "iterative"
