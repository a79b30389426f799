"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class StatItem(BaseModel):
    """A single base stat."""

    name: str = Field(..., description="Stat name (e.g. 'hp', 'special-attack')")
    base_stat: int = Field(..., description="Base value", ge=0)


class PokemonItem(BaseModel):
    """Pokémon record as returned to clients."""

    id: int = Field(..., description="PokeAPI identifier")
    name: str = Field(..., description="Canonical lowercase name")
    types: list[str] = Field(default_factory=list, description="Elemental types in slot order")
    abilities: list[str] = Field(default_factory=list, description="Ability names")
    sprite_url: str | None = Field(None, description="Default front sprite")
    artwork_url: str | None = Field(None, description="Official artwork")
    height: int | None = Field(None, description="Height in decimetres")
    weight: int | None = Field(None, description="Weight in hectograms")
    stats: list[StatItem] = Field(default_factory=list, description="Base stats")


class SearchResultItem(BaseModel):
    """Single ranked match (in results array)."""

    pokemon: PokemonItem
    match_reason: str = Field(..., description="Human-readable explanation of the match")
    confidence: float = Field(
        ...,
        description="Ranking score; exact-name matches may exceed 1.0",
        ge=0.0,
    )


class SearchResponse(BaseModel):
    """Response DTO for a search."""

    results: list[SearchResultItem] = Field(
        default_factory=list,
        description="Matches sorted by confidence, highest first",
    )


class ErrorResponse(BaseModel):
    """Body returned with every non-2xx status."""

    error: str = Field(..., description="Human-readable error message")


class PokemonDetailResponse(BaseModel):
    """Response DTO for a single Pokémon lookup."""

    pokemon: PokemonItem
    names: dict[str, str] = Field(
        default_factory=dict,
        description="Localized names keyed by language (en, zh-Hant, zh-Hans, ja)",
    )


class HistoryEntryItem(BaseModel):
    """A remembered top search result."""

    result: SearchResultItem
    recorded_at: float = Field(..., description="When the result was recorded (Unix timestamp)")


class HistoryResponse(BaseModel):
    """Response DTO for the search history."""

    entries: list[HistoryEntryItem] = Field(default_factory=list, description="Newest first")
    ttl_days: float = Field(..., description="Entries older than this are dropped", gt=0)


class CacheStatusResponse(BaseModel):
    """Response DTO for catalog cache status."""

    state: str = Field(..., description="One of: empty, populating, ready, failed")
    size: int = Field(..., description="Number of cached Pokémon", ge=0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    catalog_state: str = Field(..., description="Catalog cache state")
    model_available: bool = Field(..., description="Whether the language model is configured")
