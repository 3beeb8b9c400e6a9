"""Workout-Day Builder.

Builds one day's exercise list from a muscle-group ordering:
1. Derive exercises-per-muscle, sets and rest from the WorkoutParams bundle
2. Select exercises per muscle group (through the selection cache)
3. Clamp sets/rest to the global bounds (the single enforcement point)
4. Order compound first, then larger muscle groups first
5. Estimate duration from the set/rest timing model

Derived parameters are applied uniformly to every exercise of the day.
"""

import math
import uuid
from dataclasses import dataclass

from fitplan.training.cache import ExerciseSelectionCache
from fitplan.training.enums import MuscleGroup
from fitplan.training.invariants import (
    MAX_REST_SECONDS,
    MAX_SETS,
    MIN_EXERCISES_PER_MUSCLE,
    MIN_REST_SECONDS,
    MIN_SETS,
    MUSCLE_SIZE,
    SET_DURATION_SECONDS,
)
from fitplan.training.models import GeneratedExercise, WorkoutDay, WorkoutParams
from fitplan.training.selection import select_exercises_for_muscle, variation_id


@dataclass(frozen=True)
class SessionParameters:
    """Per-day values shared by every exercise.

    Attributes:
        exercises_per_muscle: Exercises requested per muscle group
        sets_per_exercise: Sets prescribed per exercise
        rest_time: Rest between sets in seconds
        reps: Rep range prescribed per exercise
    """

    exercises_per_muscle: int
    sets_per_exercise: int
    rest_time: int
    reps: str


def generate_id() -> str:
    return uuid.uuid4().hex


def average_reps(reps: str) -> float:
    """Average of a rep range ("8-12" -> 10.0); a single value is its own average."""
    bounds = [float(part) for part in reps.split("-") if part.strip()]
    if not bounds:
        return 0.0
    return sum(bounds[:2]) / len(bounds[:2])


def derive_session_parameters(
    params: WorkoutParams,
    exercise_multiplier: float = 1.0,
    min_exercises_per_muscle: int = MIN_EXERCISES_PER_MUSCLE,
) -> SessionParameters:
    """Compute the day's uniform parameters.

    exercises = max(min, floor(base * time * multiplier))
    sets      = max(MIN_SETS, floor(base * goal.sets_multiplier))
    rest      = max(MIN_REST, floor(base * goal.rest_multiplier * time))

    Args:
        params: Validated WorkoutParams (config objects present)
        exercise_multiplier: Style-specific multiplier on exercises per muscle
        min_exercises_per_muscle: Style-specific floor on exercises per muscle

    Returns:
        SessionParameters for the day
    """
    config = params.config
    goal_config = params.goal_config

    exercises_per_muscle = max(
        min_exercises_per_muscle,
        math.floor(config.exercises_per_muscle * params.time_adjustment * exercise_multiplier),
    )
    sets_per_exercise = max(MIN_SETS, math.floor(config.sets_per_exercise * goal_config.sets_multiplier))
    rest_time = max(
        MIN_REST_SECONDS,
        math.floor(config.rest_time * goal_config.rest_time_multiplier * params.time_adjustment),
    )
    return SessionParameters(
        exercises_per_muscle=exercises_per_muscle,
        sets_per_exercise=sets_per_exercise,
        rest_time=rest_time,
        reps=goal_config.reps,
    )


def clamp_exercise(exercise: GeneratedExercise) -> GeneratedExercise:
    """Clamp sets and rest to the global bounds."""
    return exercise.model_copy(
        update={
            "sets": int(max(MIN_SETS, min(exercise.sets, MAX_SETS))),
            "rest_time": int(max(MIN_REST_SECONDS, min(exercise.rest_time, MAX_REST_SECONDS))),
        }
    )


def optimize_exercise_order(exercises: list[GeneratedExercise]) -> list[GeneratedExercise]:
    """Compound exercises first; within each group, larger muscles first (stable)."""
    return sorted(
        exercises,
        key=lambda ex: (not ex.compound, -MUSCLE_SIZE[ex.target_muscle]),
    )


def calculate_workout_time(exercises: list[GeneratedExercise]) -> float:
    """Estimated minutes: per exercise (sets x 45s + (sets - 1) x rest) / 60."""
    total = 0.0
    for ex in exercises:
        if not ex.sets or not ex.rest_time:
            continue
        total += (ex.sets * SET_DURATION_SECONDS + (ex.sets - 1) * ex.rest_time) / 60
    return total


def calculate_workout_volume(workout: WorkoutDay) -> float:
    """Total volume: sets x average reps, summed over exercises."""
    return sum(ex.sets * average_reps(ex.reps) for ex in workout.exercises)


def finalize_workout_day(workout: WorkoutDay) -> WorkoutDay:
    """Re-apply the builder's clamp and ordering, and recompute duration.

    Used after post-processing passes (goal, fatigue, redistribution) so the
    set/rest bounds hold on the returned week.
    """
    exercises = optimize_exercise_order([clamp_exercise(ex) for ex in workout.exercises])
    return workout.model_copy(
        update={
            "exercises": exercises,
            "estimated_time": calculate_workout_time(exercises),
        }
    )


def generate_workout_day(exercises: list[GeneratedExercise], name: str, focus_area: str) -> WorkoutDay:
    """Clamp, order and time a list of exercises into a WorkoutDay.

    Args:
        exercises: Exercises for the day (any order, unclamped)
        name: Display name of the day
        focus_area: Focus label ("Full Body", "Push", ...)

    Returns:
        WorkoutDay with clamped, ordered exercises and estimated duration
    """
    if not exercises:
        return WorkoutDay(id=generate_id(), name=name, exercises=[], estimated_time=0, focus_area=focus_area)

    return finalize_workout_day(
        WorkoutDay(
            id=generate_id(),
            name=name,
            exercises=exercises,
            estimated_time=0,
            focus_area=focus_area,
        )
    )


def build_muscle_day(
    params: WorkoutParams,
    muscle_groups: list[MuscleGroup],
    name: str,
    focus_area: str,
    *,
    exercise_multiplier: float = 1.0,
    min_exercises_per_muscle: int = MIN_EXERCISES_PER_MUSCLE,
    cache: ExerciseSelectionCache | None = None,
) -> WorkoutDay:
    """Build a day covering the given muscle groups in priority order.

    Args:
        params: Validated WorkoutParams
        muscle_groups: Muscle groups in priority order
        name: Display name of the day
        focus_area: Focus label
        exercise_multiplier: Style-specific multiplier on exercises per muscle
        min_exercises_per_muscle: Style-specific floor on exercises per muscle
        cache: Selection cache (defaults to the process-wide cache)

    Returns:
        Built WorkoutDay
    """
    session = derive_session_parameters(params, exercise_multiplier, min_exercises_per_muscle)

    exercises: list[GeneratedExercise] = []
    for muscle in muscle_groups:
        choices = select_exercises_for_muscle(muscle, params.level, session.exercises_per_muscle, cache=cache)
        exercises.extend(
            GeneratedExercise(
                id=variation_id(choice, params.variation, index),
                catalog_id=choice.id,
                name=choice.name,
                target_muscle=choice.target_muscle,
                sets=session.sets_per_exercise,
                reps=session.reps,
                rest_time=session.rest_time,
                compound=choice.compound,
            )
            for index, choice in enumerate(choices)
        )

    return generate_workout_day(exercises, name, focus_area)
