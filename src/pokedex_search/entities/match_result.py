"""Match result domain entities."""

from dataclasses import dataclass

from .pokemon import PokemonEntity


@dataclass(frozen=True)
class MatchResultEntity:
    """A ranked search hit.

    Attributes:
        pokemon: The matched record, shared with the dataset cache
        reason: Human-readable explanation of the match
        confidence: Ranking score. Feature matches stay within [0, 1];
            exact-name matches carry a bonus and may exceed 1.
    """

    pokemon: PokemonEntity
    reason: str
    confidence: float


@dataclass(frozen=True)
class HistoryEntryEntity:
    """A top search result remembered by the search history."""

    result: MatchResultEntity
    recorded_at: float
