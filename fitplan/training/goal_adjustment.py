"""Goal-specific exercise emphasis applied to generated days.

- strength: compound exercises get one more set (capped by the session
  ceiling / 10) and 20% more rest
- hypertrophy: flat cap of 4 sets and 60 s rest
- endurance: one set fewer, rep range shifted up by 4, 30% less rest
- weight_loss: flat 3 sets of "12-15", 20% less rest
- general_fitness: unchanged
"""

import math

from fitplan.training.config_tables import PROGRESSION_STRATEGY
from fitplan.training.enums import ExperienceLevel, TrainingGoal
from fitplan.training.invariants import MIN_REST_SECONDS, MIN_SETS
from fitplan.training.models import GeneratedExercise, WorkoutDay


def shift_rep_range(reps: str, offset: int) -> str:
    """Shift both bounds of a rep range ("8-12", 4 -> "12-16")."""
    bounds = [int(part) + offset for part in reps.split("-")]
    return "-".join(str(b) for b in bounds)


def _emphasize_compound(ex: GeneratedExercise, experience: ExperienceLevel) -> GeneratedExercise:
    if not ex.compound:
        return ex
    ceiling = PROGRESSION_STRATEGY[experience].max_volume_per_session // 10
    return ex.model_copy(
        update={
            "sets": min(ex.sets + 1, ceiling),
            "rest_time": math.floor(ex.rest_time * 1.2),
        }
    )


def _balance(ex: GeneratedExercise, experience: ExperienceLevel) -> GeneratedExercise:
    return ex.model_copy(update={"sets": min(4, ex.sets), "rest_time": 60})


def _increase_density(ex: GeneratedExercise, experience: ExperienceLevel) -> GeneratedExercise:
    return ex.model_copy(
        update={
            "sets": max(MIN_SETS, ex.sets - 1),
            "reps": shift_rep_range(ex.reps, 4),
            "rest_time": max(MIN_REST_SECONDS, math.floor(ex.rest_time * 0.7)),
        }
    )


def _calorie_burn(ex: GeneratedExercise, experience: ExperienceLevel) -> GeneratedExercise:
    return ex.model_copy(
        update={
            "sets": 3,
            "reps": "12-15",
            "rest_time": max(MIN_REST_SECONDS, math.floor(ex.rest_time * 0.8)),
        }
    )


_GOAL_ADJUSTERS = {
    TrainingGoal.STRENGTH: _emphasize_compound,
    TrainingGoal.HYPERTROPHY: _balance,
    TrainingGoal.ENDURANCE: _increase_density,
    TrainingGoal.WEIGHT_LOSS: _calorie_burn,
}


def adjust_for_goal(workout: WorkoutDay, goal: TrainingGoal, experience: ExperienceLevel) -> WorkoutDay:
    """Apply the goal's emphasis to every exercise of a day.

    Args:
        workout: Generated day
        goal: Training goal
        experience: Experience level (sets the strength set ceiling)

    Returns:
        Adjusted copy of the day (the same day for general fitness)
    """
    adjuster = _GOAL_ADJUSTERS.get(goal)
    if adjuster is None:
        return workout
    return workout.model_copy(update={"exercises": [adjuster(ex, experience) for ex in workout.exercises]})
