"""PokeAPI catalog source.

Reads the public PokeAPI (https://pokeapi.co) over HTTP. Endpoints used:
- GET /pokemon?limit=N            catalog index (name + detail URL)
- GET /pokemon/{id}               detail record
- GET /pokemon-species/{id}       localized names

The API is read-only and rate-limited; batching and retry pacing live in
the dataset cache, this client performs single requests only.
"""

from typing import Any

import httpx

from pokedex_search.config import settings
from pokedex_search.entities import CatalogIndexEntry


class PokeApiClient:
    """PokeAPI implementation of the CatalogSource protocol.

    This class satisfies the CatalogSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = PokeApiClient.create()
        index = await client.fetch_index()
        detail = await client.fetch_detail(index[0].url)
        await client.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        limit: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the PokeAPI client.

        Args:
            base_url: API root. Defaults to settings.pokeapi_base_url.
            limit: Number of index entries to request. Defaults to settings.catalog_limit.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            transport: Optional httpx transport (used by tests to mock the API).
        """
        self._base_url = (base_url or settings.pokeapi_base_url).rstrip("/")
        self._limit = limit or settings.catalog_limit
        self._timeout = timeout or settings.http_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(cls, base_url: str | None = None) -> "PokeApiClient":
        """Factory method to create PokeApiClient with defaults.

        Args:
            base_url: API root. If None, uses settings.

        Returns:
            Configured PokeApiClient
        """
        return cls(base_url=base_url)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        response = await self.client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def fetch_index(self) -> list[CatalogIndexEntry]:
        """Fetch the catalog index.

        Returns:
            One CatalogIndexEntry per Pokémon, in API order

        Raises:
            httpx.HTTPError: If the request fails
            ValueError: If the response has no ``results`` list
        """
        data = await self._get_json(f"{self._base_url}/pokemon", params={"limit": self._limit})

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise ValueError(f"Unexpected index response format: {str(data)[:200]}")

        return [CatalogIndexEntry(name=item["name"], url=item["url"]) for item in results]

    async def fetch_detail(self, url: str) -> dict[str, Any]:
        """Fetch one Pokémon detail payload by its index URL."""
        return await self._get_json(url)

    async def fetch_detail_by_id(self, pokemon_id: int) -> dict[str, Any]:
        """Fetch one Pokémon detail payload by id."""
        return await self.fetch_detail(f"{self._base_url}/pokemon/{pokemon_id}")

    async def fetch_species(self, pokemon_id: int) -> dict[str, Any]:
        """Fetch the species payload carrying localized names."""
        return await self._get_json(f"{self._base_url}/pokemon-species/{pokemon_id}")

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
