"""In-process search history.

Remembers the top result of recent searches, newest first, one entry per
Pokémon. Entries older than the configured horizon are pruned whenever the
history is read. Nothing is persisted; a restart starts with an empty
history.
"""

import time
from collections.abc import Callable

from pokedex_search.config import settings
from pokedex_search.entities import HistoryEntryEntity, MatchResultEntity


class SearchHistoryService:
    """Bounded, time-expiring record of top search results."""

    def __init__(
        self,
        ttl_seconds: float | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize an empty history.

        Args:
            ttl_seconds: Age after which entries are dropped. Defaults to settings (60 days).
            max_entries: Maximum number of entries kept. Defaults to settings.
            clock: Source of the current Unix time.
        """
        self._ttl = ttl_seconds or settings.history_ttl_seconds
        self._max_entries = max_entries or settings.history_max_entries
        self._clock = clock
        self._entries: list[HistoryEntryEntity] = []

    def record(self, result: MatchResultEntity) -> HistoryEntryEntity:
        """Add a result at the front, replacing any older entry for the same Pokémon."""
        entry = HistoryEntryEntity(result=result, recorded_at=self._clock())
        kept = [e for e in self._live_entries() if e.result.pokemon.id != result.pokemon.id]
        self._entries = [entry, *kept][: self._max_entries]
        return entry

    def entries(self) -> list[HistoryEntryEntity]:
        """Return live entries, newest first, pruning expired ones."""
        self._entries = self._live_entries()
        return list(self._entries)

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        count = len(self._entries)
        self._entries = []
        return count

    def _live_entries(self) -> list[HistoryEntryEntity]:
        now = self._clock()
        return [e for e in self._entries if now - e.recorded_at < self._ttl]

    @property
    def ttl_seconds(self) -> float:
        return self._ttl
