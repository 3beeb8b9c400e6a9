"""Persistence document for a training program.

Builds the mapping the external document store receives. Field names are
the camelCase output aliases; no I/O happens here.
"""

from datetime import UTC, datetime

from fitplan.training.errors import ProgramDocumentError
from fitplan.training.models import TrainingProgram

INITIAL_DELOAD_WEEK = 4


def build_program_document(
    program: TrainingProgram,
    user_id: str,
    now: datetime | None = None,
) -> dict:
    """Build the stored document for a user's active program.

    Args:
        program: Assembled training program
        user_id: Owner of the program
        now: Timestamp for createdAt/updatedAt (defaults to current UTC time)

    Returns:
        JSON-serialisable document

    Raises:
        ProgramDocumentError: If the program has no workout days
    """
    if not program.workout_days:
        raise ProgramDocumentError(f"Training program {program.id} has no workout days")

    timestamp = (now or datetime.now(UTC)).isoformat()
    document = program.model_dump(mode="json", by_alias=True)
    document.update(
        {
            "userId": user_id,
            "active": True,
            "createdAt": timestamp,
            "updatedAt": timestamp,
            "progression": {
                "currentWeek": 1,
                "lastUpdated": timestamp,
                "volumeIncrease": 0,
                "deloadWeek": INITIAL_DELOAD_WEEK,
            },
        }
    )
    return document
