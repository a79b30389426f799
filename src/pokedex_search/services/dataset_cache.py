"""In-process catalog cache.

Holds every Pokémon record keyed by lowercase name. The cache is populated
once, lazily, from a CatalogSource and is read-only afterwards:

    EMPTY --ensure_ready()--> POPULATING --+--> READY   (possibly partial)
                                           +--> FAILED  (population failed or cache closed)

READY and FAILED are terminal for the lifetime of the instance.
"""

import asyncio
import contextlib
import enum
import logging
import random
from collections.abc import Awaitable, Callable, Iterator

from tenacity import AsyncRetrying, stop_after_attempt, wait_incrementing

from pokedex_search.config import settings
from pokedex_search.entities import CatalogIndexEntry, PokemonEntity
from pokedex_search.errors import CatalogUnavailableError
from pokedex_search.protocols import CatalogSource

logger = logging.getLogger(__name__)


class CacheState(str, enum.Enum):
    EMPTY = "empty"
    POPULATING = "populating"
    READY = "ready"
    FAILED = "failed"


class DatasetCache:
    """Lazily populated, never invalidated catalog of Pokémon records.

    Population fetches the catalog index in one call, then fetches detail
    records in fixed-size batches. Records inside a batch are fetched
    concurrently; batches run one after another. Each detail fetch waits a
    short random delay before every attempt and backs off linearly between
    attempts. A record that still fails after the last attempt is dropped.

    Example:
        ```python
        cache = DatasetCache(source=PokeApiClient.create())
        await cache.ensure_ready()
        pikachu = cache.get("Pikachu")
        ```
    """

    def __init__(
        self,
        source: CatalogSource,
        batch_size: int | None = None,
        max_attempts: int | None = None,
        jitter_ms: tuple[float, float] | None = None,
        backoff_seconds: float | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize an empty cache.

        Args:
            source: Remote catalog to populate from (required).
            batch_size: Detail fetches per batch. Defaults to settings.
            max_attempts: Attempts per detail fetch. Defaults to settings.
            jitter_ms: (min, max) random delay before each attempt, in milliseconds.
                Defaults to settings.
            backoff_seconds: Linear backoff step between attempts. Defaults to settings.
            sleep: Coroutine used for jitter and backoff delays.
        """
        self._source = source
        self._batch_size = batch_size or settings.fetch_batch_size
        self._max_attempts = max_attempts or settings.fetch_max_attempts
        self._jitter_ms = (
            jitter_ms
            if jitter_ms is not None
            else (settings.fetch_jitter_min_ms, settings.fetch_jitter_max_ms)
        )
        self._backoff = (
            backoff_seconds if backoff_seconds is not None else settings.fetch_backoff_seconds
        )
        self._sleep = sleep

        self._entries: dict[str, PokemonEntity] = {}
        self._by_id: dict[int, PokemonEntity] = {}
        self._state = CacheState.EMPTY
        self._task: asyncio.Task[None] | None = None
        self._failure: BaseException | None = None

    async def ensure_ready(self) -> None:
        """Populate the cache exactly once; later calls return immediately.

        Concurrent callers share the single population task and resume when
        it settles.

        Raises:
            CatalogUnavailableError: If the catalog could not be populated,
                now or during an earlier population attempt
        """
        if self._state is CacheState.READY:
            return
        if self._state is CacheState.FAILED:
            raise CatalogUnavailableError(
                f"Pokémon catalog is unavailable: {self._failure}"
            ) from self._failure

        if self._task is None:
            self._state = CacheState.POPULATING
            self._task = asyncio.create_task(self._populate())

        # A cancelled request must not cancel the shared population task
        await asyncio.shield(self._task)

    async def aclose(self) -> None:
        """Stop an in-flight population and wait for it to unwind.

        Call before closing the catalog source. A cache closed mid-population
        ends in FAILED; a READY cache keeps its records.
        """
        if self._task is not None and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task

        if self._state is CacheState.POPULATING:
            self._state = CacheState.FAILED
            self._failure = RuntimeError("cache closed during population")
            logger.info("Pokémon cache closed before population finished")

    async def _populate(self) -> None:
        try:
            index = await self._source.fetch_index()
        except Exception as e:
            self._state = CacheState.FAILED
            self._failure = e
            logger.exception("Failed to fetch Pokémon catalog index")
            raise CatalogUnavailableError(f"Pokémon catalog is unavailable: {e}") from e

        logger.info("Fetched catalog index with %d entries", len(index))

        try:
            for start in range(0, len(index), self._batch_size):
                batch = index[start : start + self._batch_size]
                records = await asyncio.gather(*(self._fetch_record(entry) for entry in batch))

                for record in records:
                    if record is not None:
                        self._insert(record)

                logger.info(
                    "Processed batch of %d Pokémon, cache size: %d", len(batch), len(self._entries)
                )
        except Exception as e:
            self._state = CacheState.FAILED
            self._failure = e
            logger.exception("Failed to populate Pokémon cache")
            raise CatalogUnavailableError(f"Pokémon catalog is unavailable: {e}") from e

        self._state = CacheState.READY
        logger.info("Pokémon cache initialized with %d entries", len(self._entries))

    async def _fetch_record(self, entry: CatalogIndexEntry) -> PokemonEntity | None:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_incrementing(start=self._backoff, increment=self._backoff),
            sleep=self._sleep,
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    await self._sleep(random.uniform(*self._jitter_ms) / 1000)
                    payload = await self._source.fetch_detail(entry.url)
                    record = PokemonEntity.from_api(payload)
        except Exception as e:
            logger.warning(
                "Failed to fetch pokemon %s after %d attempts: %s",
                entry.name,
                self._max_attempts,
                e,
            )
            return None

        return record

    def _insert(self, record: PokemonEntity) -> None:
        key = record.name.lower()
        if key in self._entries:
            return
        self._entries[key] = record
        self._by_id.setdefault(record.id, record)

    def get(self, name: str) -> PokemonEntity | None:
        """Look up a record by name (case-insensitive)."""
        return self._entries.get(name.strip().lower())

    def get_by_id(self, pokemon_id: int) -> PokemonEntity | None:
        return self._by_id.get(pokemon_id)

    def values(self) -> Iterator[PokemonEntity]:
        """Iterate records in insertion (catalog) order."""
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is CacheState.READY
