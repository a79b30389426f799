"""HTTP handlers for search operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

import logging

from pokedex_search.dto import (
    CacheStatusResponse,
    HealthCheckResponse,
    HistoryEntryItem,
    HistoryResponse,
    PokemonDetailResponse,
    PokemonItem,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
    StatItem,
)
from pokedex_search.entities import MatchResultEntity, PokemonEntity
from pokedex_search.errors import PokedexSearchError, SearchFailedError
from pokedex_search.protocols import TextGenerator
from pokedex_search.services import (
    CacheState,
    DatasetCache,
    PokedexService,
    SearchHistoryService,
    SearchService,
)

logger = logging.getLogger(__name__)


def to_pokemon_item(pokemon: PokemonEntity) -> PokemonItem:
    return PokemonItem(
        id=pokemon.id,
        name=pokemon.name,
        types=list(pokemon.types),
        abilities=list(pokemon.abilities),
        sprite_url=pokemon.sprite_url,
        artwork_url=pokemon.artwork_url,
        height=pokemon.height,
        weight=pokemon.weight,
        stats=[StatItem(name=s.name, base_stat=s.base_stat) for s in pokemon.stats],
    )


def to_result_item(match: MatchResultEntity) -> SearchResultItem:
    return SearchResultItem(
        pokemon=to_pokemon_item(match.pokemon),
        match_reason=match.reason,
        confidence=match.confidence,
    )


class SearchHandler:
    """HTTP handlers for search, lookup and status endpoints.

    This handler delegates business logic to the services and handles
    HTTP-specific concerns like:
    - Converting entities to DTOs
    - Translating unexpected exceptions into PokedexSearchError
      (rendered as ``{"error": ...}`` by the app)
    """

    def __init__(
        self,
        search_service: SearchService,
        cache: DatasetCache,
        pokedex_service: PokedexService,
        history: SearchHistoryService,
        generator: TextGenerator,
    ) -> None:
        """Initialize the search handler.

        Args:
            search_service: Search orchestration (required).
            cache: The shared dataset cache, for status reporting (required).
            pokedex_service: Single Pokémon lookup (required).
            history: Search history (required).
            generator: Language model, for health reporting (required).
        """
        self._search = search_service
        self._cache = cache
        self._pokedex = pokedex_service
        self._history = history
        self._generator = generator

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Handle POST /search requests.

        Raises:
            CatalogUnavailableError: If the catalog cannot be loaded (503)
            SearchFailedError: On any unexpected exception (500)
        """
        try:
            matches = await self._search.search(request.query)
        except PokedexSearchError:
            raise
        except Exception as e:
            logger.exception("Search error")
            raise SearchFailedError(f"Search failed: {e}") from e

        return SearchResponse(results=[to_result_item(m) for m in matches])

    async def get_pokemon(self, pokemon_id: int) -> PokemonDetailResponse:
        """Handle GET /pokemon/{id} requests."""
        detail = await self._pokedex.get_pokemon(pokemon_id)
        return PokemonDetailResponse(
            pokemon=to_pokemon_item(detail.pokemon),
            names=detail.names,
        )

    async def get_history(self) -> HistoryResponse:
        """Handle GET /history requests."""
        entries = self._history.entries()
        return HistoryResponse(
            entries=[
                HistoryEntryItem(result=to_result_item(e.result), recorded_at=e.recorded_at)
                for e in entries
            ],
            ttl_days=self._history.ttl_seconds / 86400,
        )

    async def clear_history(self) -> dict:
        """Handle DELETE /history requests."""
        count = self._history.clear()
        return {
            "success": True,
            "deleted_count": count,
            "message": "History cleared successfully",
        }

    async def cache_status(self) -> CacheStatusResponse:
        """Handle GET /cache/status requests."""
        return CacheStatusResponse(state=self._cache.state.value, size=self._cache.size)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        model_available = self._generator.is_available()
        healthy = model_available and self._cache.state is not CacheState.FAILED
        return HealthCheckResponse(
            status="healthy" if healthy else "degraded",
            catalog_state=self._cache.state.value,
            model_available=model_available,
        )
