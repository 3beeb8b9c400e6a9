"""Root conftest for all tests.

Shared fixtures: an isolated selection cache with a controllable clock,
and the sample profiles used across the training tests.
"""

import pytest

from fitplan.training.cache import ExerciseSelectionCache, clear_cache
from fitplan.training.models import UserProfile


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def selection_cache(clock: FakeClock) -> ExerciseSelectionCache:
    """Fresh cache per test: 60 minute TTL, 100 entries."""
    return ExerciseSelectionCache(ttl_seconds=3600, max_entries=100, clock=clock)


@pytest.fixture(autouse=True)
def reset_global_cache():
    """Keep the process-wide selection cache from leaking between tests."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def advanced_profile() -> UserProfile:
    return UserProfile(
        experience="advanced",
        goal="hypertrophy",
        training_days=[1, 2, 3, 4, 5],
        activity_frequency="heavy",
        training_time="60_min",
    )


@pytest.fixture
def untrained_profile() -> UserProfile:
    return UserProfile(experience="none", training_days=[1, 3, 5])
