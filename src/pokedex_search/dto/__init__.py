"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import SearchRequest
from .responses import (
    CacheStatusResponse,
    ErrorResponse,
    HealthCheckResponse,
    HistoryEntryItem,
    HistoryResponse,
    PokemonDetailResponse,
    PokemonItem,
    SearchResponse,
    SearchResultItem,
    StatItem,
)

__all__ = [
    "SearchRequest",
    "CacheStatusResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "HistoryEntryItem",
    "HistoryResponse",
    "PokemonDetailResponse",
    "PokemonItem",
    "SearchResponse",
    "SearchResultItem",
    "StatItem",
]
