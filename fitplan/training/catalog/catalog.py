"""Exercise Catalog.

Loads the static exercise table (exercises.yaml) once and answers lookups
by muscle group and level. Accessors return records sorted by descending
priority; ties keep catalog order.

Fails fast on load:
- Missing catalog file
- Invalid YAML
- Unknown muscle group, level or equipment
- Rows with no level or tagged "none"
- Missing required fields
"""

from pathlib import Path

import yaml
from loguru import logger

from fitplan.config.settings import settings
from fitplan.training.enums import Equipment, ExperienceLevel, MuscleGroup
from fitplan.training.errors import CatalogLoadError
from fitplan.training.models import ExerciseRecord

_REQUIRED_FIELDS = ("id", "name", "levels", "equipment", "compound", "unilateral", "priority")

_LEVEL_ORDER = (ExperienceLevel.BEGINNER, ExperienceLevel.INTERMEDIATE, ExperienceLevel.ADVANCED)


def catalog_level(level: ExperienceLevel) -> ExperienceLevel:
    """Catalog rows are tagged beginner..advanced; untrained users get beginner rows."""
    return ExperienceLevel.BEGINNER if level == ExperienceLevel.NONE else level


def _parse_record(muscle: MuscleGroup, raw: dict) -> ExerciseRecord:
    missing = [name for name in _REQUIRED_FIELDS if name not in raw]
    if missing:
        raise CatalogLoadError("MISSING_FIELDS", f"{muscle.value}/{raw.get('id', '?')}: missing {missing}")

    try:
        levels = tuple(ExperienceLevel(level) for level in raw["levels"])
    except ValueError as e:
        raise CatalogLoadError("INVALID_RECORD", f"{muscle.value}/{raw['id']}: {e}") from e
    # Rows are tagged beginner..advanced; "none" is served from beginner rows
    if not levels or ExperienceLevel.NONE in levels:
        raise CatalogLoadError(
            "INVALID_RECORD",
            f"{muscle.value}/{raw['id']}: levels must be a non-empty subset of beginner, intermediate, advanced",
        )

    try:
        return ExerciseRecord(
            id=str(raw["id"]),
            name=str(raw["name"]),
            target_muscle=muscle,
            levels=levels,
            equipment=tuple(Equipment(eq) for eq in raw["equipment"]),
            compound=bool(raw["compound"]),
            unilateral=bool(raw["unilateral"]),
            priority=int(raw["priority"]),
            muscle_groups=tuple(MuscleGroup(m) for m in raw.get("muscle_groups", [muscle.value])),
            tips=tuple(raw.get("tips", [])),
        )
    except ValueError as e:
        raise CatalogLoadError("INVALID_RECORD", f"{muscle.value}/{raw['id']}: {e}") from e


class ExerciseCatalog:
    """Immutable in-memory exercise table keyed by muscle group."""

    def __init__(self, exercises: dict[MuscleGroup, list[ExerciseRecord]]) -> None:
        self._exercises = {muscle: tuple(exercises.get(muscle, [])) for muscle in MuscleGroup}

    @classmethod
    def from_yaml(cls, path: Path) -> "ExerciseCatalog":
        """Load a catalog from a YAML file.

        Args:
            path: Path to the catalog YAML (muscle group -> list of exercises)

        Returns:
            Loaded ExerciseCatalog

        Raises:
            CatalogLoadError: If the file is missing or malformed
        """
        if not path.exists():
            raise CatalogLoadError("CATALOG_NOT_FOUND", f"Exercise catalog not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise CatalogLoadError("INVALID_CATALOG_YAML", f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogLoadError("INVALID_CATALOG", "Catalog must be a mapping of muscle group to exercises")

        exercises: dict[MuscleGroup, list[ExerciseRecord]] = {}
        for key, rows in data.items():
            try:
                muscle = MuscleGroup(key)
            except ValueError as e:
                raise CatalogLoadError("UNKNOWN_MUSCLE_GROUP", f"Unknown muscle group '{key}'") from e
            exercises[muscle] = [_parse_record(muscle, row) for row in rows or []]

        catalog = cls(exercises)
        logger.debug(
            "exercise_catalog: Loaded",
            path=str(path),
            exercise_count=catalog.size,
        )
        return catalog

    @property
    def size(self) -> int:
        return sum(len(rows) for rows in self._exercises.values())

    def all_for_muscle(self, muscle: MuscleGroup) -> list[ExerciseRecord]:
        return list(self._exercises[muscle])

    def get(self, exercise_id: str) -> ExerciseRecord | None:
        for rows in self._exercises.values():
            for record in rows:
                if record.id == exercise_id:
                    return record
        return None

    def exercises_for_level(self, muscle: MuscleGroup, level: ExperienceLevel) -> list[ExerciseRecord]:
        """Exercises for a muscle group suitable for a level, best first."""
        wanted = catalog_level(level)
        rows = [ex for ex in self._exercises[muscle] if wanted in ex.levels]
        return sorted(rows, key=lambda ex: ex.priority, reverse=True)

    def compound_for(self, muscle: MuscleGroup, level: ExperienceLevel) -> list[ExerciseRecord]:
        return [ex for ex in self.exercises_for_level(muscle, level) if ex.compound]

    def isolation_for(self, muscle: MuscleGroup, level: ExperienceLevel) -> list[ExerciseRecord]:
        return [ex for ex in self.exercises_for_level(muscle, level) if not ex.compound]

    def exercises_by_equipment(self, muscle: MuscleGroup, equipment: list[Equipment]) -> list[ExerciseRecord]:
        """Exercises for a muscle group usable with any of the given equipment."""
        available = set(equipment)
        rows = [ex for ex in self._exercises[muscle] if available.intersection(ex.equipment)]
        return sorted(rows, key=lambda ex: ex.priority, reverse=True)

    def progression_exercises(self, muscle: MuscleGroup, exercise_id: str) -> list[ExerciseRecord]:
        """Harder alternatives for an exercise.

        An exercise is a progression when its easiest level is above the
        current exercise's easiest level.

        Args:
            muscle: Muscle group of the current exercise
            exercise_id: Catalog id of the current exercise

        Returns:
            Progression candidates, best first (empty if the id is unknown)
        """
        current = next((ex for ex in self._exercises[muscle] if ex.id == exercise_id), None)
        if current is None:
            return []

        current_floor = _easiest_level_rank(current)
        rows = [ex for ex in self._exercises[muscle] if _easiest_level_rank(ex) > current_floor]
        return sorted(rows, key=lambda ex: ex.priority, reverse=True)


def _easiest_level_rank(record: ExerciseRecord) -> int:
    return min(_LEVEL_ORDER.index(level) for level in record.levels if level in _LEVEL_ORDER)


_catalog: ExerciseCatalog | None = None


def get_catalog() -> ExerciseCatalog:
    """Return the process-wide catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        _catalog = ExerciseCatalog.from_yaml(Path(settings.exercise_catalog_path))
    return _catalog
