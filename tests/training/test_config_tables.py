import pytest

from fitplan.training.config_tables import (
    EXPERIENCE_CONFIG,
    GOAL_CONFIG,
    PROGRESSION_STRATEGY,
    adjusted_experience_config,
    round_half_up,
    time_adjustment_for,
    weekly_frequency_for,
)
from fitplan.training.enums import ActivityFrequency, ExperienceLevel, TrainingGoal, TrainingTime


def test_every_axis_value_has_a_row():
    assert set(EXPERIENCE_CONFIG) == set(ExperienceLevel)
    assert set(GOAL_CONFIG) == set(TrainingGoal)
    assert set(PROGRESSION_STRATEGY) == set(ExperienceLevel)


def test_progression_strategy_for_untrained_users():
    strategy = PROGRESSION_STRATEGY[ExperienceLevel.NONE]
    assert strategy.max_volume_per_session == 120
    assert strategy.volume_reduction == 0.4
    assert strategy.deload_frequency == 6


@pytest.mark.parametrize(
    ("value", "expected"),
    [(40.5, 41), (4.4, 4), (2.5, 3), (97.5, 98), (3.0, 3)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_adjusted_experience_config_heavy():
    config = adjusted_experience_config(ExperienceLevel.ADVANCED, ActivityFrequency.HEAVY)

    assert config.sets_per_exercise == 4
    assert config.rest_time == 41
    assert config.exercises_per_muscle == 4
    assert config.reps == "6-12"


def test_adjusted_experience_config_sedentary():
    config = adjusted_experience_config(ExperienceLevel.BEGINNER, ActivityFrequency.SEDENTARY)

    assert config.sets_per_exercise == 2
    assert config.rest_time == 98


def test_adjusted_experience_config_does_not_mutate_table():
    adjusted_experience_config(ExperienceLevel.INTERMEDIATE, ActivityFrequency.ATHLETE)
    assert EXPERIENCE_CONFIG[ExperienceLevel.INTERMEDIATE].sets_per_exercise == 4


def test_time_adjustment():
    assert time_adjustment_for(TrainingTime.MIN_30) == 0.6
    assert time_adjustment_for(TrainingTime.MIN_120) == 1.4
    assert time_adjustment_for(None) == 1.0


def test_weekly_frequency():
    assert weekly_frequency_for(ActivityFrequency.ATHLETE) == 6
    assert weekly_frequency_for(None) == 3
