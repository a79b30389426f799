"""Pokedex Search - describe a Pokémon, get ranked matches.

This package provides a layered architecture for descriptive search:

Layers:
    - protocols: Interface contracts (CatalogSource, TextGenerator)
    - repositories: PokeAPI and Gemini implementations
    - services: Catalog cache, feature extraction, scoring, ranking
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from pokedex_search.repositories import GeminiTextGenerator, PokeApiClient
    from pokedex_search.services import (
        DatasetCache, FeatureExtractor, RankingService, SearchService,
    )

    search = SearchService(
        extractor=FeatureExtractor(generator=GeminiTextGenerator.create()),
        ranking=RankingService(cache=DatasetCache(source=PokeApiClient.create())),
    )
    results = await search.search("a yellow electric mouse")
    ```

For HTTP API:
    ```python
    from pokedex_search.api.app import app
    ```
"""

from pokedex_search.config import settings
from pokedex_search.dto import SearchRequest, SearchResponse
from pokedex_search.entities import FeatureBag, MatchResultEntity, PokemonEntity
from pokedex_search.errors import CatalogUnavailableError, PokedexSearchError
from pokedex_search.handlers import SearchHandler
from pokedex_search.protocols import CatalogSource, TextGenerator
from pokedex_search.repositories import GeminiTextGenerator, PokeApiClient
from pokedex_search.services import (
    CacheState,
    DatasetCache,
    FeatureExtractor,
    RankingService,
    SearchService,
)

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CatalogSource",
    "TextGenerator",
    # Services (business logic)
    "CacheState",
    "DatasetCache",
    "FeatureExtractor",
    "RankingService",
    "SearchService",
    # Handlers (HTTP)
    "SearchHandler",
    # Repositories (data access)
    "GeminiTextGenerator",
    "PokeApiClient",
    # Entities (domain models)
    "FeatureBag",
    "MatchResultEntity",
    "PokemonEntity",
    # Errors
    "CatalogUnavailableError",
    "PokedexSearchError",
    # DTOs (API contracts)
    "SearchRequest",
    "SearchResponse",
]
