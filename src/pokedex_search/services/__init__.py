"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .dataset_cache import CacheState, DatasetCache
from .feature_extractor import FeatureExtractor
from .history_service import SearchHistoryService
from .pokedex_service import PokedexService, PokemonDetail
from .ranking_service import EXACT_MATCH_BONUS, RankingService
from .scorer import build_reason, score
from .search_service import SearchService

__all__ = [
    "CacheState",
    "DatasetCache",
    "EXACT_MATCH_BONUS",
    "FeatureExtractor",
    "PokedexService",
    "PokemonDetail",
    "RankingService",
    "SearchHistoryService",
    "SearchService",
    "build_reason",
    "score",
]
