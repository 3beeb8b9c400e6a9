"""Tests for session-to-session progression.

Tests cover:
- Readiness, plateau detection and variation suggestions
- Feedback adjustment factor and its clamp
- Set and rest rescaling bounds
- Deload week scheduling
"""

from datetime import UTC, datetime, timedelta

import pytest

from fitplan.training.enums import ExperienceLevel, MuscleGroup
from fitplan.training.models import GeneratedExercise, WorkoutDay
from fitplan.training.progression import (
    ExerciseHistoryEntry,
    WorkoutFeedback,
    adjust_next_workout,
    adjust_rest,
    adjust_sets,
    calculate_adjustment_factor,
    calculate_progression,
    is_deload_week,
)

BENCH = GeneratedExercise(
    id="bench_press_0_0",
    catalog_id="bench_press",
    name="Barbell Bench Press",
    target_muscle=MuscleGroup.CHEST,
    sets=4,
    reps="8-12",
    rest_time=60,
    compound=True,
)


def _history(*sessions):
    start = datetime(2024, 1, 1, tzinfo=UTC)
    return [
        ExerciseHistoryEntry(date=start + timedelta(days=2 * i), weight=weight, reps=reps)
        for i, (weight, reps) in enumerate(sessions)
    ]


def _feedback(**overrides):
    values = {"difficulty": 3, "completed_sets": 10, "failed_sets": 0, "energy_level": 3, "muscular_pain": 3}
    values.update(overrides)
    return WorkoutFeedback(**values)


def test_no_history():
    progression = calculate_progression(BENCH, [])

    assert not progression.ready_to_progress
    assert not progression.should_deload
    assert progression.next_weight is None


def test_ready_to_progress():
    progression = calculate_progression(BENCH, _history((60, 8), (62.5, 8), (62.5, 10)))

    assert progression.ready_to_progress
    assert not progression.should_deload
    assert progression.next_reps == "9-13"
    assert progression.next_weight == 64.06
    assert progression.suggested_variation is None


def test_not_enough_sessions():
    progression = calculate_progression(BENCH, _history((60, 8), (62.5, 8)))
    assert not progression.ready_to_progress


def test_plateau_suggests_harder_variation():
    progression = calculate_progression(BENCH, _history((70, 8), (72.5, 6), (70, 8)))

    assert progression.should_deload
    assert not progression.ready_to_progress
    assert progression.suggested_variation == "decline_press"


def test_neutral_feedback_factor():
    assert calculate_adjustment_factor(_feedback()) == pytest.approx(1.0)


def test_feedback_factor_clamped():
    high = _feedback(difficulty=5, energy_level=5, muscular_pain=1)
    low = _feedback(difficulty=1, failed_sets=10, energy_level=1, muscular_pain=5)

    assert calculate_adjustment_factor(high) == 1.2
    assert calculate_adjustment_factor(low) == 0.8


def test_feedback_with_no_completed_sets():
    assert calculate_adjustment_factor(_feedback(completed_sets=0, failed_sets=4)) == pytest.approx(1.0)


def test_adjust_sets_bounds():
    assert adjust_sets(4, 1.2) == 5
    assert adjust_sets(5, 1.2) == 5
    assert adjust_sets(2, 0.8) == 2


def test_adjust_rest_bounds():
    assert adjust_rest(60, 1) == 72
    assert adjust_rest(200, 3) == 120
    assert adjust_rest(30, 5) == 30


def test_adjust_next_workout():
    day = WorkoutDay(id="d", name="Push 1", exercises=[BENCH], estimated_time=0, focus_area="Push")

    adjusted = adjust_next_workout(day, _feedback(difficulty=5, energy_level=1))

    # factor 1 + 0.2 - 0.1 = 1.1 -> round(4.4) = 4 sets; low energy -> 72 s rest
    assert (adjusted.exercises[0].sets, adjusted.exercises[0].rest_time) == (4, 72)
    assert day.exercises[0].rest_time == 60


@pytest.mark.parametrize(
    ("week", "level", "expected"),
    [
        (6, ExperienceLevel.NONE, True),
        (4, ExperienceLevel.NONE, False),
        (8, ExperienceLevel.BEGINNER, True),
        (10, ExperienceLevel.INTERMEDIATE, True),
        (12, ExperienceLevel.ADVANCED, True),
        (0, ExperienceLevel.ADVANCED, False),
    ],
)
def test_is_deload_week(week, level, expected):
    assert is_deload_week(week, level) is expected
