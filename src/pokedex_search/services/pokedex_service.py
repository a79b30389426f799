"""Pokémon detail lookup with localized names."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from pokedex_search.entities import PokemonEntity
from pokedex_search.errors import PokemonNotFoundError, UpstreamError
from pokedex_search.repositories import PokeApiClient

logger = logging.getLogger(__name__)

LANGUAGES = ("en", "zh-Hant", "zh-Hans", "ja")


@dataclass(frozen=True)
class PokemonDetail:
    """A Pokémon record plus its names in the supported languages."""

    pokemon: PokemonEntity
    names: dict[str, str] = field(default_factory=dict)


def localized_names(pokemon_name: str, species: dict[str, Any]) -> dict[str, str]:
    """Pick the supported languages out of a species ``names`` list.

    English falls back to the Pokémon's API name when the species has none.
    """
    names = {"en": pokemon_name}
    for item in species.get("names", []):
        language = (item.get("language") or {}).get("name")
        if language in LANGUAGES and item.get("name"):
            names[language] = item["name"]
    return names


class PokedexService:
    """Fetches a single Pokémon and its species names from PokeAPI."""

    def __init__(self, client: PokeApiClient) -> None:
        self._client = client

    async def get_pokemon(self, pokemon_id: int) -> PokemonDetail:
        """Fetch detail and species payloads concurrently.

        Raises:
            PokemonNotFoundError: If PokeAPI has no Pokémon with this id
            UpstreamError: If PokeAPI fails for any other reason
        """
        try:
            detail, species = await asyncio.gather(
                self._client.fetch_detail_by_id(pokemon_id),
                self._client.fetch_species(pokemon_id),
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise PokemonNotFoundError(f"Pokémon {pokemon_id} not found") from e
            raise UpstreamError(f"Failed to fetch Pokémon {pokemon_id}: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("PokeAPI request for %d failed: %s", pokemon_id, e)
            raise UpstreamError(f"Failed to fetch Pokémon {pokemon_id}: {e}") from e

        pokemon = PokemonEntity.from_api(detail)
        return PokemonDetail(pokemon=pokemon, names=localized_names(pokemon.name, species))
