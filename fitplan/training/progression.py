"""Session-to-session progression.

- calculate_progression: next rep range / weight, readiness and deload
  signal from an exercise's recent history
- adjust_next_workout: rescale sets and rest from post-workout feedback
- is_deload_week: deload scheduling from the progression strategy
"""

from datetime import datetime

from pydantic import BaseModel, Field

from fitplan.training.catalog.catalog import get_catalog
from fitplan.training.config_tables import PROGRESSION_STRATEGY, round_half_up
from fitplan.training.enums import ExperienceLevel
from fitplan.training.goal_adjustment import shift_rep_range
from fitplan.training.models import GeneratedExercise, WorkoutDay

RECENT_SESSIONS = 3
WEIGHT_INCREMENT = 0.025  # +2.5% per progression step

# Feedback adjustment bounds
MIN_ADJUSTMENT_FACTOR = 0.8
MAX_ADJUSTMENT_FACTOR = 1.2
FEEDBACK_MIN_SETS = 2
FEEDBACK_MAX_SETS = 5
FEEDBACK_MIN_REST = 30
FEEDBACK_MAX_REST = 120


class ExerciseHistoryEntry(BaseModel):
    date: datetime
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    rpe: float | None = Field(None, ge=1, le=10)


class ExerciseProgression(BaseModel):
    should_deload: bool
    ready_to_progress: bool
    next_weight: float | None = None
    next_reps: str | None = None
    suggested_variation: str | None = None


class WorkoutFeedback(BaseModel):
    difficulty: int = Field(..., ge=1, le=5)
    completed_sets: int = Field(..., ge=0)
    failed_sets: int = Field(..., ge=0)
    energy_level: int = Field(..., ge=1, le=5)
    muscular_pain: int = Field(..., ge=1, le=5)


def _plateau_reached(recent: list[ExerciseHistoryEntry]) -> bool:
    # No gain in load or reps across the recent window
    if len(recent) < RECENT_SESSIONS:
        return False
    first, last = recent[0], recent[-1]
    return last.weight <= first.weight and last.reps <= first.reps


def calculate_progression(exercise: GeneratedExercise, history: list[ExerciseHistoryEntry]) -> ExerciseProgression:
    """Progression recommendation for an exercise.

    Args:
        exercise: Exercise as prescribed in the current program
        history: Logged sessions for the exercise, oldest first

    Returns:
        ExerciseProgression (no recommendation when there is no history)
    """
    if not history:
        return ExerciseProgression(should_deload=False, ready_to_progress=False)

    recent = history[-RECENT_SESSIONS:]
    plateau = _plateau_reached(recent)

    suggested = None
    if plateau:
        candidates = get_catalog().progression_exercises(exercise.target_muscle, exercise.catalog_id)
        suggested = candidates[0].id if candidates else None

    return ExerciseProgression(
        should_deload=plateau,
        ready_to_progress=len(recent) >= RECENT_SESSIONS and not plateau,
        next_reps=shift_rep_range(exercise.reps, 1),
        next_weight=round(recent[-1].weight * (1 + WEIGHT_INCREMENT), 2),
        suggested_variation=suggested,
    )


def calculate_adjustment_factor(feedback: WorkoutFeedback) -> float:
    """Combine feedback signals into a volume factor clamped to [0.8, 1.2]."""
    difficulty_factor = (feedback.difficulty - 3) * 0.1
    failure_factor = (feedback.failed_sets / feedback.completed_sets) * -0.2 if feedback.completed_sets else 0.0
    energy_factor = (feedback.energy_level - 3) * 0.05
    pain_factor = (feedback.muscular_pain - 3) * -0.05

    total = 1 + difficulty_factor + failure_factor + energy_factor + pain_factor
    return min(max(total, MIN_ADJUSTMENT_FACTOR), MAX_ADJUSTMENT_FACTOR)


def adjust_sets(current_sets: int, factor: float) -> int:
    return min(max(round_half_up(current_sets * factor), FEEDBACK_MIN_SETS), FEEDBACK_MAX_SETS)


def adjust_rest(current_rest: int, energy_level: int) -> int:
    # Less energy, more rest
    adjustment = 1 + (energy_level - 3) * -0.1
    return min(max(round_half_up(current_rest * adjustment), FEEDBACK_MIN_REST), FEEDBACK_MAX_REST)


def adjust_next_workout(workout: WorkoutDay, feedback: WorkoutFeedback) -> WorkoutDay:
    """Rescale the next session of a day from the last session's feedback."""
    factor = calculate_adjustment_factor(feedback)
    exercises = [
        ex.model_copy(
            update={
                "sets": adjust_sets(ex.sets, factor),
                "rest_time": adjust_rest(ex.rest_time, feedback.energy_level),
            }
        )
        for ex in workout.exercises
    ]
    return workout.model_copy(update={"exercises": exercises})


def is_deload_week(week_number: int, level: ExperienceLevel) -> bool:
    """Whether a 1-based program week is a deload week for the level."""
    frequency = PROGRESSION_STRATEGY[level].deload_frequency
    return week_number > 0 and week_number % frequency == 0
