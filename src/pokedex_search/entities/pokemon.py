"""Pokémon domain entities."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StatEntity:
    """A single base stat (e.g. hp, attack)."""

    name: str
    base_stat: int


@dataclass(frozen=True)
class CatalogIndexEntry:
    """One row of the catalog index: a name and the URL of its detail record."""

    name: str
    url: str


@dataclass(frozen=True)
class PokemonEntity:
    """Domain entity for a cached Pokémon record.

    Only ``id``, ``name``, ``types`` and ``abilities`` take part in scoring.
    The remaining attributes are carried for display.

    Attributes:
        id: PokeAPI identifier, unique across the catalog
        name: Canonical lowercase name, used as the cache key
        types: Elemental type names in slot order (lowercase)
        abilities: Ability names in slot order (lowercase, hyphenated)
        sprite_url: Default front sprite
        artwork_url: Official artwork image
        height: Height in decimetres
        weight: Weight in hectograms
        stats: Base stats in API order
    """

    id: int
    name: str
    types: tuple[str, ...] = ()
    abilities: tuple[str, ...] = ()
    sprite_url: str | None = None
    artwork_url: str | None = None
    height: int | None = None
    weight: int | None = None
    stats: tuple[StatEntity, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "PokemonEntity":
        """Build an entity from a PokeAPI ``/pokemon/{id}`` payload.

        Raises:
            KeyError: If ``id`` or ``name`` is missing
        """
        sprites = payload.get("sprites") or {}
        artwork = ((sprites.get("other") or {}).get("official-artwork") or {}).get("front_default")

        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]).lower(),
            types=tuple(
                slot["type"]["name"].lower() for slot in payload.get("types", [])
            ),
            abilities=tuple(
                slot["ability"]["name"].lower() for slot in payload.get("abilities", [])
            ),
            sprite_url=sprites.get("front_default"),
            artwork_url=artwork,
            height=payload.get("height"),
            weight=payload.get("weight"),
            stats=tuple(
                StatEntity(name=item["stat"]["name"], base_stat=int(item["base_stat"]))
                for item in payload.get("stats", [])
            ),
        )
