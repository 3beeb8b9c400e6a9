"""Exercise selection cache (TTL + bounded FIFO, in-memory only).

Memoises exercise picks per (muscle, level, count). Entries expire lazily on
read once older than the TTL; when full, the oldest inserted entry is
evicted. Reads return deep copies so callers cannot corrupt cached state.

Time comes from an injected clock so expiry is testable without sleeping.
"""

import copy
import threading
import time
from collections import OrderedDict
from collections.abc import Callable

from loguru import logger

from fitplan.config.settings import settings
from fitplan.training.enums import ExperienceLevel, MuscleGroup
from fitplan.training.models import ExerciseChoice

Clock = Callable[[], float]


class ExerciseSelectionCache:
    """Bounded TTL cache of exercise selections.

    Attributes:
        ttl_seconds: Seconds an entry stays valid
        max_entries: Capacity before the oldest entry is evicted
    """

    def __init__(
        self,
        ttl_seconds: float = 60 * 60,
        max_entries: int = 100,
        clock: Clock = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, list[ExerciseChoice]]] = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def generate_key(muscle: MuscleGroup, level: ExperienceLevel, count: int) -> str:
        return f"{muscle.value}_{level.value}_{count}"

    def get(self, key: str) -> list[ExerciseChoice] | None:
        """Get a cached selection.

        Args:
            key: Cache key from generate_key

        Returns:
            Deep copy of the cached selection, or None on miss or expiry
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            stored_at, choices = entry
            if not self._is_fresh(stored_at, now):
                del self._entries[key]
                logger.debug("selection_cache: Entry expired", cache_key=key)
                return None

            logger.debug("selection_cache: Cache hit", cache_key=key)
            return copy.deepcopy(choices)

    def set(self, key: str, choices: list[ExerciseChoice]) -> None:
        """Store a selection, evicting the oldest entry when at capacity.

        Args:
            key: Cache key from generate_key
            choices: Selection to cache (copied on the way in)
        """
        now = self._clock()
        with self._lock:
            if key in self._entries:
                del self._entries[key]
            elif len(self._entries) >= self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("selection_cache: Evicted oldest entry", cache_key=evicted)
            self._entries[key] = (now, copy.deepcopy(choices))
        logger.debug("selection_cache: Cache set", cache_key=key, count=len(choices))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.debug("selection_cache: Cache cleared")

    def _is_fresh(self, stored_at: float, now: float) -> bool:
        return now - stored_at < self.ttl_seconds

    def __len__(self) -> int:
        """Number of unexpired entries."""
        now = self._clock()
        with self._lock:
            return sum(1 for stored_at, _ in self._entries.values() if self._is_fresh(stored_at, now))

    def __contains__(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._is_fresh(entry[0], now)


exercise_cache = ExerciseSelectionCache(
    ttl_seconds=settings.exercise_cache_ttl_minutes * 60,
    max_entries=settings.exercise_cache_max_entries,
)


def clear_cache() -> None:
    """Clear the process-wide selection cache."""
    exercise_cache.clear()
