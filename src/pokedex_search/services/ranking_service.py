"""Ranking service.

Ranks the cached catalog against a FeatureBag. When the model named
specific Pokémon, those are looked up directly and given a bonus on top
of their feature score; every other Pokémon is ranked by feature score
alone. Results are merged by Pokémon id and sorted by confidence.
"""

import logging

from pokedex_search.entities import FeatureBag, MatchResultEntity, PokemonEntity

from .dataset_cache import DatasetCache
from .scorer import build_reason, score

logger = logging.getLogger(__name__)

EXACT_MATCH_BONUS = 0.5


class RankingService:
    """Orchestrates cache lookups and scoring for one FeatureBag.

    Example:
        ```python
        ranking = RankingService(cache=cache)
        results = await ranking.rank(FeatureBag.create(types=["electric"]))
        ```
    """

    def __init__(self, cache: DatasetCache) -> None:
        """Initialize the ranking service.

        Args:
            cache: The shared dataset cache (required).
        """
        self._cache = cache

    async def rank(self, features: FeatureBag) -> list[MatchResultEntity]:
        """Rank cached Pokémon against the features.

        Ordering contract: descending confidence; ties keep insertion order,
        so exact-name matches come before similarity matches of equal score.
        No top-K limit is applied.

        Args:
            features: Extracted query features

        Returns:
            Ranked matches, possibly empty

        Raises:
            CatalogUnavailableError: If the cache cannot be populated
        """
        await self._cache.ensure_ready()

        try:
            if features.candidate_names:
                return self._rank_with_names(features)

            if features.has_traits:
                return self._sorted(self._similar(features, exclude=frozenset()))

            return []
        except Exception:
            logger.exception("Error ranking Pokémon from cache")
            return []

    def _rank_with_names(self, features: FeatureBag) -> list[MatchResultEntity]:
        names = [name.strip().lower() for name in features.candidate_names]

        exact_matches: list[MatchResultEntity] = []
        for name in names:
            pokemon = self._cache.get(name)
            if pokemon is None:
                logger.debug("Candidate name %r not in cache", name)
                continue
            exact_matches.append(
                self._to_result(pokemon, score(pokemon, features) + EXACT_MATCH_BONUS)
            )

        merged: dict[int, MatchResultEntity] = {}
        for match in exact_matches:
            merged.setdefault(match.pokemon.id, match)
        for match in self._similar(features, exclude=frozenset(names)):
            merged.setdefault(match.pokemon.id, match)

        return self._sorted(merged.values())

    def _similar(self, features: FeatureBag, exclude: frozenset[str]) -> list[MatchResultEntity]:
        """Score every cached Pokémon not named in ``exclude``; keep positive scores."""
        results = []
        for pokemon in self._cache.values():
            if pokemon.name.lower() in exclude:
                continue
            confidence = score(pokemon, features)
            if confidence > 0:
                results.append(self._to_result(pokemon, confidence))
        return results

    @staticmethod
    def _to_result(pokemon: PokemonEntity, confidence: float) -> MatchResultEntity:
        return MatchResultEntity(
            pokemon=pokemon,
            reason=build_reason(pokemon),
            confidence=confidence,
        )

    @staticmethod
    def _sorted(results) -> list[MatchResultEntity]:
        # sorted() is stable with reverse=True
        return sorted(results, key=lambda m: m.confidence, reverse=True)
