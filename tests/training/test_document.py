from datetime import UTC, datetime

import pytest

from fitplan.training.document import build_program_document
from fitplan.training.errors import ProgramDocumentError
from fitplan.training.models import UserProfile
from fitplan.training.program import create_training_program

NOW = datetime(2024, 3, 4, 9, 30, tzinfo=UTC)


def test_build_program_document(untrained_profile, selection_cache):
    program = create_training_program(untrained_profile, cache=selection_cache, now=NOW)

    document = build_program_document(program, "user-123", now=NOW)

    assert document["userId"] == "user-123"
    assert document["active"] is True
    assert document["createdAt"] == document["updatedAt"] == NOW.isoformat()
    assert document["progression"] == {
        "currentWeek": 1,
        "lastUpdated": NOW.isoformat(),
        "volumeIncrease": 0,
        "deloadWeek": 4,
    }
    assert document["restDays"] == [0, 2, 4, 6]
    assert len(document["workoutDays"]) == 3


def test_program_without_days_rejected(selection_cache):
    program = create_training_program(UserProfile(experience="beginner"), cache=selection_cache)

    with pytest.raises(ProgramDocumentError):
        build_program_document(program, "user-123")
