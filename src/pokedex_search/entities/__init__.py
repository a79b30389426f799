"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .feature_bag import FeatureBag
from .match_result import HistoryEntryEntity, MatchResultEntity
from .pokemon import CatalogIndexEntry, PokemonEntity, StatEntity

__all__ = [
    "CatalogIndexEntry",
    "FeatureBag",
    "HistoryEntryEntity",
    "MatchResultEntity",
    "PokemonEntity",
    "StatEntity",
]
