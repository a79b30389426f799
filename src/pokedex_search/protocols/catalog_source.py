"""Catalog source protocol.

Defines the interface for the remote read-only catalog that the dataset
cache is populated from.

Implementations can include:
- PokeAPI over HTTP (default)
- A local mirror or fixture set (tests)
"""

from typing import Any, Protocol, runtime_checkable

from pokedex_search.entities import CatalogIndexEntry


@runtime_checkable
class CatalogSource(Protocol):
    """Protocol for the remote catalog.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.
    """

    async def fetch_index(self) -> list[CatalogIndexEntry]:
        """Fetch the name and detail URL of every entity in one call.

        Returns:
            The catalog index, in source order
        """
        ...

    async def fetch_detail(self, url: str) -> dict[str, Any]:
        """Fetch one entity's detail payload.

        Args:
            url: The detail URL from the catalog index

        Returns:
            The raw detail payload
        """
        ...

    async def fetch_species(self, pokemon_id: int) -> dict[str, Any]:
        """Fetch the species payload (localized names) for an entity.

        Args:
            pokemon_id: The entity identifier

        Returns:
            The raw species payload
        """
        ...
