"""Training data models.

This module defines the structures that flow through generation:
- UserProfile: immutable generator input
- ExerciseRecord / ExerciseChoice: catalog rows and their cached selection form
- GeneratedExercise / WorkoutDay / TrainingProgram: generator output
- ValidationIssue / ValidationResult: transient validator output
- WorkoutParams / WorkoutError: per-day generation parameters and their problems

Output models serialise with camelCase aliases (targetMuscle, restTime,
estimatedTime, focusArea, workoutDays, restDays, createdAt) so the
persistence collaborator can store them verbatim.
"""

from dataclasses import dataclass, field
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from fitplan.training.config_tables import ExperienceConfig, GoalConfig
from fitplan.training.enums import (
    ActivityFrequency,
    Equipment,
    ExperienceLevel,
    IssueType,
    MuscleGroup,
    TrainingGoal,
    TrainingStyle,
    TrainingTime,
    WorkoutErrorCode,
)


# -----------------------------
# Input
# -----------------------------
class UserProfile(BaseModel):
    """Subset of the onboarding profile consumed by the generator.

    Accepts both the snake_case field names and the onboarding keys
    (trainingExperience, trainingGoals, trainingFrequency, trainingDays,
    trainingStyle, trainingTime). Training days are normalised to a
    sorted list of distinct weekdays (0=Sun ... 6=Sat).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    experience: ExperienceLevel | None = Field(
        default=None,
        validation_alias=AliasChoices("experience", "trainingExperience"),
    )
    goal: TrainingGoal | None = Field(
        default=None,
        validation_alias=AliasChoices("goal", "trainingGoals"),
    )
    activity_frequency: ActivityFrequency | None = Field(
        default=None,
        validation_alias=AliasChoices("activity_frequency", "activityFrequency", "trainingFrequency"),
    )
    training_days: list[int] = Field(
        default_factory=list,
        validation_alias=AliasChoices("training_days", "trainingDays"),
    )
    training_style: TrainingStyle | None = Field(
        default=None,
        validation_alias=AliasChoices("training_style", "trainingStyle"),
    )
    training_time: TrainingTime | None = Field(
        default=None,
        validation_alias=AliasChoices("training_time", "trainingTime"),
    )

    @field_validator("training_days")
    @classmethod
    def validate_training_days(cls, value: list[int]) -> list[int]:
        """Weekdays must be 0-6 and unique; order is not significant."""
        out_of_range = [d for d in value if not 0 <= d <= 6]
        if out_of_range:
            raise ValueError(f"training days must be weekdays 0-6, got {out_of_range}")
        if len(set(value)) != len(value):
            raise ValueError(f"training days must not repeat, got {value}")
        return sorted(value)


# -----------------------------
# Catalog
# -----------------------------
@dataclass(frozen=True)
class ExerciseRecord:
    """Immutable catalog row.

    Attributes:
        id: Catalog identifier (e.g., "bench_press")
        name: Display name
        target_muscle: Primary muscle group
        levels: Experience levels the exercise is suitable for
        equipment: Equipment tags
        compound: Multi-joint movement
        unilateral: Trained one side at a time
        priority: Selection priority within the muscle group (higher = preferred)
        muscle_groups: All muscle groups recruited
        tips: Coaching cues
    """

    id: str
    name: str
    target_muscle: MuscleGroup
    levels: tuple[ExperienceLevel, ...]
    equipment: tuple[Equipment, ...]
    compound: bool
    unilateral: bool
    priority: int
    muscle_groups: tuple[MuscleGroup, ...] = ()
    tips: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExerciseChoice:
    """Lightweight selection entry - the unit stored in the selection cache."""

    id: str
    name: str
    target_muscle: MuscleGroup
    compound: bool
    priority: int


# -----------------------------
# Output
# -----------------------------
class _OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeneratedExercise(_OutputModel):
    """One exercise prescription inside a workout day.

    Attributes:
        id: Per-generation identifier ("<catalog id>_<variation>_<index>")
        catalog_id: Catalog identifier the exercise was drawn from
        name: Display name
        target_muscle: Primary muscle group
        sets: Set count (clamped to the global bounds by the builder)
        reps: Rep range string (e.g., "8-12")
        rest_time: Rest between sets in seconds
        compound: Multi-joint movement
        technique: Optional intensity technique (drop-set, super-set...)
    """

    id: str
    catalog_id: str
    name: str
    target_muscle: MuscleGroup
    sets: int
    reps: str
    rest_time: int
    compound: bool
    technique: str | None = None


class WorkoutDay(_OutputModel):
    id: str
    name: str
    exercises: list[GeneratedExercise]
    estimated_time: float  # minutes
    focus_area: str  # "Full Body", "Upper Body", "Push", ...


class TrainingProgram(_OutputModel):
    """Assembled weekly program.

    workout_days is parallel-indexed to the profile's (sorted) training days.
    frequency is the advisory weekly label from the prior-activity table.
    """

    id: str
    name: str
    level: ExperienceLevel
    style: TrainingStyle
    workout_days: list[WorkoutDay]
    frequency: int
    rest_days: list[int]
    created_at: datetime


# -----------------------------
# Validation
# -----------------------------
class ValidationIssue(BaseModel):
    """A non-fatal problem found in a generated week.

    muscle holds a muscle group for recovery issues and the day's focus
    label for volume issues. days holds weekday numbers.
    """

    type: IssueType
    message: str
    muscle: str
    days: list[int]


class ValidationResult(BaseModel):
    is_valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)


# -----------------------------
# Per-day generation parameters
# -----------------------------
@dataclass(frozen=True)
class WorkoutParams:
    """Parameters for generating one workout day.

    Attributes:
        day: Weekday the workout is scheduled on
        config: Experience config (already frequency-adjusted)
        goal_config: Goal config
        time_adjustment: Time-budget scalar
        variation: Variation index within the week
        level: Experience level
        exercises: Optional candidate pool checked for compound distribution
    """

    day: int
    config: ExperienceConfig | None
    goal_config: GoalConfig | None
    time_adjustment: float
    variation: int
    level: ExperienceLevel | None
    exercises: list[ExerciseRecord] | None = None


@dataclass(frozen=True)
class WorkoutError:
    code: WorkoutErrorCode
    message: str
    details: dict[str, float | int | str] = field(default_factory=dict)
