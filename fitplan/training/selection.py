"""Exercise selection for one muscle group.

Policy: the single highest-priority compound movement for the level (when
one exists), then the top ``count - 1`` isolation movements. A short catalog
under-fills silently. Picks from the process-wide catalog go through the
selection cache, whose keys carry no catalog identity; picks from any other
catalog are computed directly. The cache only changes cost, never the picks.
"""

from fitplan.training.cache import ExerciseSelectionCache, exercise_cache
from fitplan.training.catalog.catalog import ExerciseCatalog, catalog_level, get_catalog
from fitplan.training.enums import ExperienceLevel, MuscleGroup
from fitplan.training.models import ExerciseChoice


def _pick(catalog: ExerciseCatalog, muscle: MuscleGroup, level: ExperienceLevel, count: int) -> list[ExerciseChoice]:
    compound = catalog.compound_for(muscle, level)[:1]
    isolation = catalog.isolation_for(muscle, level)[: max(count - 1, 0)]
    return [
        ExerciseChoice(
            id=record.id,
            name=record.name,
            target_muscle=record.target_muscle,
            compound=record.compound,
            priority=record.priority,
        )
        for record in [*compound, *isolation]
    ]


def select_exercises_for_muscle(
    muscle: MuscleGroup,
    level: ExperienceLevel,
    count: int,
    *,
    cache: ExerciseSelectionCache | None = None,
    catalog: ExerciseCatalog | None = None,
) -> list[ExerciseChoice]:
    """Select exercises for a muscle group.

    Args:
        muscle: Muscle group to fill
        level: Experience level ("none" is served from beginner rows)
        count: Requested number of exercises
        cache: Selection cache for the process-wide catalog (defaults to the
            process-wide cache); not consulted for any other catalog
        catalog: Exercise catalog (defaults to the process-wide catalog)

    Returns:
        Selected exercises, compound first; may be shorter than count
    """
    level = catalog_level(level)
    default_catalog = get_catalog()
    if catalog is not None and catalog is not default_catalog:
        return _pick(catalog, muscle, level, count)

    cache = cache if cache is not None else exercise_cache
    key = cache.generate_key(muscle, level, count)

    cached = cache.get(key)
    if cached is not None:
        return cached

    choices = _pick(default_catalog, muscle, level, count)
    cache.set(key, choices)
    return choices


def variation_id(choice: ExerciseChoice, variation: int, index: int) -> str:
    """Per-generation identity so day variations within a week never collide."""
    return f"{choice.id}_{variation}_{index}"
