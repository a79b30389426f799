"""Repository layer for data access.

This layer wraps the external collaborators (PokeAPI, Gemini) behind the
protocol-based interfaces in ``pokedex_search.protocols``.
"""

from pokedex_search.protocols import CatalogSource, TextGenerator

from .gemini_generator import GeminiTextGenerator
from .pokeapi_client import PokeApiClient

__all__ = [
    "CatalogSource",
    "TextGenerator",
    "GeminiTextGenerator",
    "PokeApiClient",
]
