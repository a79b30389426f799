"""Search service for core business logic.

This service orchestrates a search by coordinating the feature extractor
(language model) and the ranking service (cached catalog).
"""

import logging

from pokedex_search.entities import FeatureBag, MatchResultEntity

from .feature_extractor import FeatureExtractor
from .history_service import SearchHistoryService
from .ranking_service import RankingService

logger = logging.getLogger(__name__)


class SearchService:
    """Core search orchestration service.

    Flow:
    1. Extract features from the description (never fails; may be empty)
    2. Rank the cached catalog against the features
    3. Remember the top result in the search history

    Example:
        ```python
        search = SearchService(
            extractor=FeatureExtractor(generator=GeminiTextGenerator.create()),
            ranking=RankingService(cache=DatasetCache(source=PokeApiClient.create())),
            history=SearchHistoryService(),
        )
        results = await search.search("a yellow mouse that stores electricity")
        ```
    """

    def __init__(
        self,
        extractor: FeatureExtractor,
        ranking: RankingService,
        history: SearchHistoryService | None = None,
    ) -> None:
        """Initialize the search service.

        Args:
            extractor: Feature extraction service (required).
            ranking: Ranking service (required).
            history: Optional history that receives each search's top result.
        """
        self._extractor = extractor
        self._ranking = ranking
        self._history = history

    async def analyze(self, description: str) -> FeatureBag:
        """Extract features without ranking."""
        return await self._extractor.extract(description)

    async def search(self, description: str) -> list[MatchResultEntity]:
        """Run a full search.

        Args:
            description: Free-text query

        Returns:
            Ranked matches (empty when no usable features were extracted)

        Raises:
            CatalogUnavailableError: If the catalog cannot be loaded
        """
        features = await self._extractor.extract(description)
        logger.info(
            "Extracted features: names=%s types=%s abilities=%s",
            list(features.candidate_names),
            list(features.types),
            list(features.abilities),
        )

        results = await self._ranking.rank(features)

        if results and self._history is not None:
            self._history.record(results[0])

        return results

    @property
    def history(self) -> SearchHistoryService | None:
        return self._history
