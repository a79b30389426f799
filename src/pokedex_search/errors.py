"""Exceptions raised by the search service.

Every error carries the HTTP status the API layer should answer with.
"""

from fastapi import status


class PokedexSearchError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CatalogUnavailableError(PokedexSearchError):
    """The catalog index could not be fetched, so the cache cannot be populated."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class SearchFailedError(PokedexSearchError):
    """An unexpected exception interrupted a search."""


class PokemonNotFoundError(PokedexSearchError):
    """No Pokémon exists with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(PokedexSearchError):
    """PokeAPI answered a detail lookup with an error."""

    status_code = status.HTTP_502_BAD_GATEWAY
