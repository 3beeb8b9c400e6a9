import pytest
from pydantic import ValidationError

from fitplan.training.enums import ExperienceLevel, TrainingGoal
from fitplan.training.models import UserProfile


def test_training_days_sorted():
    assert UserProfile(training_days=[5, 1, 3]).training_days == [1, 3, 5]


def test_training_days_out_of_range():
    with pytest.raises(ValidationError):
        UserProfile(training_days=[1, 7])


def test_training_days_must_be_unique():
    with pytest.raises(ValidationError):
        UserProfile(training_days=[1, 1, 3])


def test_unknown_enum_value_rejected():
    with pytest.raises(ValidationError):
        UserProfile(experience="expert")


def test_onboarding_aliases():
    profile = UserProfile.model_validate({"trainingExperience": "beginner", "trainingGoals": "strength"})

    assert profile.experience == ExperienceLevel.BEGINNER
    assert profile.goal == TrainingGoal.STRENGTH
    assert profile.training_days == []


def test_profile_is_immutable():
    profile = UserProfile(training_days=[1])
    with pytest.raises(ValidationError):
        profile.training_days = [2]
