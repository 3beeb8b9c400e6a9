"""Style Dispatcher.

Chooses the weekly split from profile signals (first match wins):
1. No experience, or sedentary -> full body
2. Three or fewer selected days -> full body
3. Exactly four days -> upper/lower
4. Five or more days and not a beginner -> push/pull/legs
5. Otherwise the user's own preference, defaulting to full body

Days are assigned by position in the (sorted) day list, not by weekday:
full body cycles three variants (index mod 3), upper/lower alternates by
index parity, push/pull/legs cycles by index mod 3. Two users with the
same day count get the same sequence whichever weekdays they picked.
"""

from dataclasses import dataclass, replace

from loguru import logger

from fitplan.training.builder import build_muscle_day
from fitplan.training.cache import ExerciseSelectionCache
from fitplan.training.enums import ActivityFrequency, ExperienceLevel, MuscleGroup, TrainingStyle
from fitplan.training.errors import WorkoutGenerationError
from fitplan.training.invariants import MIN_EXERCISES_PER_MUSCLE
from fitplan.training.models import UserProfile, WorkoutDay, WorkoutParams
from fitplan.training.params_validation import (
    adjust_workout_based_on_errors,
    has_fatal_error,
    validate_workout_params,
)

M = MuscleGroup


@dataclass(frozen=True)
class DayTemplate:
    """Muscle-group layout for one kind of training day.

    Attributes:
        name: Display name prefix ("Full Body", "Push", ...)
        focus_area: Focus label stored on the day
        orderings: Muscle-group priority orderings, picked by variation
        exercise_multiplier: Multiplier on exercises per muscle group
        min_exercises_per_muscle: Floor on exercises per muscle group
    """

    name: str
    focus_area: str
    orderings: tuple[tuple[MuscleGroup, ...], ...]
    exercise_multiplier: float = 1.0
    min_exercises_per_muscle: int = MIN_EXERCISES_PER_MUSCLE

    def muscles_for(self, variation: int) -> list[MuscleGroup]:
        return list(self.orderings[variation % len(self.orderings)])


FULL_BODY = DayTemplate(
    name="Full Body",
    focus_area="Full Body",
    orderings=(
        (M.CHEST, M.BACK, M.LEGS, M.SHOULDERS, M.BICEPS, M.TRICEPS, M.CORE),
        (M.BACK, M.LEGS, M.SHOULDERS, M.CHEST, M.TRICEPS, M.BICEPS, M.CORE),
        (M.LEGS, M.CHEST, M.BACK, M.SHOULDERS, M.BICEPS, M.TRICEPS, M.CORE),
    ),
)
UPPER = DayTemplate(
    name="Upper Body",
    focus_area="Upper Body",
    orderings=(
        (M.CHEST, M.BACK, M.SHOULDERS, M.TRICEPS, M.BICEPS),
        (M.BACK, M.CHEST, M.SHOULDERS, M.BICEPS, M.TRICEPS),
        (M.SHOULDERS, M.CHEST, M.BACK, M.TRICEPS, M.BICEPS),
    ),
    exercise_multiplier=1.2,
)
LOWER = DayTemplate(
    name="Lower Body",
    focus_area="Lower Body",
    orderings=((M.LEGS, M.CORE), (M.CORE, M.LEGS)),
    exercise_multiplier=1.5,
    min_exercises_per_muscle=2,
)
PUSH = DayTemplate(
    name="Push",
    focus_area="Push",
    orderings=((M.CHEST, M.SHOULDERS, M.TRICEPS),),
    exercise_multiplier=1.3,
    min_exercises_per_muscle=2,
)
PULL = DayTemplate(
    name="Pull",
    focus_area="Pull",
    orderings=((M.BACK, M.BICEPS),),
    exercise_multiplier=1.3,
    min_exercises_per_muscle=2,
)
LEGS = DayTemplate(
    name="Legs",
    focus_area="Legs",
    orderings=((M.LEGS, M.CORE),),
    exercise_multiplier=1.5,
    min_exercises_per_muscle=2,
)

# Day rotation per style
STYLE_ROTATION: dict[TrainingStyle, tuple[DayTemplate, ...]] = {
    TrainingStyle.FULL_BODY: (FULL_BODY,),
    TrainingStyle.UPPER_LOWER: (UPPER, LOWER),
    TrainingStyle.PUSH_PULL_LEGS: (PUSH, PULL, LEGS),
}

FULL_BODY_VARIANTS = 3


def determine_training_style(profile: UserProfile) -> TrainingStyle:
    """Choose the weekly split for a profile.

    Args:
        profile: User profile

    Returns:
        Resolved TrainingStyle, always full_body, upper_lower or
        push_pull_legs (a "none" or "other" preference counts as no preference)
    """
    experience = profile.experience
    day_count = len(profile.training_days)

    if experience in (None, ExperienceLevel.NONE) or profile.activity_frequency == ActivityFrequency.SEDENTARY:
        return TrainingStyle.FULL_BODY
    if day_count <= 3:
        return TrainingStyle.FULL_BODY
    if day_count == 4:
        return TrainingStyle.UPPER_LOWER
    if day_count >= 5 and experience != ExperienceLevel.BEGINNER:
        return TrainingStyle.PUSH_PULL_LEGS
    if profile.training_style in STYLE_ROTATION:
        return profile.training_style
    return TrainingStyle.FULL_BODY


def rotation_for(style: TrainingStyle) -> tuple[DayTemplate, ...]:
    """Day templates cycled by a style; styles without a split train full body."""
    return STYLE_ROTATION.get(style, STYLE_ROTATION[TrainingStyle.FULL_BODY])


def assign_day(style: TrainingStyle, index: int) -> tuple[DayTemplate, int]:
    """Template and variation index for the day at a position in the week.

    Full body days take variation ``index % 3``. Split days take the
    occurrence count of their template (the second push day is variation 1),
    so repeated templates within a week get distinct exercise ids.

    Args:
        style: Resolved training style
        index: Position of the day in the sorted training-day list

    Returns:
        (DayTemplate, variation index)
    """
    rotation = rotation_for(style)
    template = rotation[index % len(rotation)]
    if len(rotation) == 1:
        return template, index % FULL_BODY_VARIANTS
    return template, index // len(rotation)


def generate_day(
    template: DayTemplate,
    params: WorkoutParams,
    *,
    cache: ExerciseSelectionCache | None = None,
) -> WorkoutDay:
    """Generate one day, validating its parameters first.

    Args:
        template: Day template to build
        params: WorkoutParams for the day
        cache: Selection cache (defaults to the process-wide cache)

    Returns:
        Built WorkoutDay (best-effort adjusted when parameters were flagged)

    Raises:
        WorkoutGenerationError: If the parameters carry a TIME_INVALID error
    """
    errors = validate_workout_params(params)
    if has_fatal_error(errors):
        raise WorkoutGenerationError("TIME_INVALID", [e.message for e in errors])

    workout = build_muscle_day(
        params,
        template.muscles_for(params.variation),
        f"{template.name} {params.variation + 1}",
        template.focus_area,
        exercise_multiplier=template.exercise_multiplier,
        min_exercises_per_muscle=template.min_exercises_per_muscle,
        cache=cache,
    )

    if errors:
        logger.warning(
            "Workout parameters flagged, adjusting base workout",
            day=params.day,
            codes=[e.code.value for e in errors],
        )
        workout = adjust_workout_based_on_errors(workout, errors)

    return workout


def generate_week(
    style: TrainingStyle,
    base_params: WorkoutParams,
    training_days: list[int],
    *,
    cache: ExerciseSelectionCache | None = None,
) -> list[WorkoutDay]:
    """Generate one WorkoutDay per selected training day.

    Args:
        style: Resolved training style
        base_params: Parameters shared by every day (day and variation are filled per day)
        training_days: Sorted weekday numbers
        cache: Selection cache (defaults to the process-wide cache)

    Returns:
        WorkoutDays parallel-indexed to training_days
    """
    days: list[WorkoutDay] = []
    for index, weekday in enumerate(training_days):
        template, variation = assign_day(style, index)
        params = replace(base_params, day=weekday, variation=variation)
        days.append(generate_day(template, params, cache=cache))
    return days
