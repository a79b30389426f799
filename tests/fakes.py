"""In-memory stand-ins for the remote catalog and the language model."""

import asyncio
from typing import Any

from pokedex_search.entities import CatalogIndexEntry

BASE_URL = "https://pokeapi.test/api/v2"


def pokemon_payload(
    pokemon_id: int,
    name: str,
    types: tuple[str, ...] = (),
    abilities: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Build a detail payload shaped like PokeAPI's /pokemon/{id}."""
    return {
        "id": pokemon_id,
        "name": name,
        "height": 4,
        "weight": 60,
        "sprites": {
            "front_default": f"https://img.test/{pokemon_id}.png",
            "other": {"official-artwork": {"front_default": f"https://img.test/art/{pokemon_id}.png"}},
        },
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
        "abilities": [{"slot": i + 1, "ability": {"name": a}} for i, a in enumerate(abilities)],
        "stats": [{"base_stat": 35, "stat": {"name": "hp"}}],
    }


def detail_url(pokemon_id: int) -> str:
    return f"{BASE_URL}/pokemon/{pokemon_id}/"


class FakeCatalogSource:
    """CatalogSource backed by a list of payloads.

    Args:
        payloads: Detail payloads, in catalog order
        failures: detail URL -> number of leading attempts that raise
            (use a large number for a permanently failing record)
        index_error: Raised by fetch_index when set
    """

    def __init__(
        self,
        payloads: list[dict[str, Any]],
        failures: dict[str, int] | None = None,
        index_error: Exception | None = None,
    ) -> None:
        self._details = {detail_url(p["id"]): p for p in payloads}
        self._index = [
            CatalogIndexEntry(name=p["name"], url=detail_url(p["id"])) for p in payloads
        ]
        self._failures = dict(failures or {})
        self._index_error = index_error
        self.index_calls = 0
        self.detail_calls: dict[str, int] = {}
        self.release_index: asyncio.Event | None = None

    async def fetch_index(self) -> list[CatalogIndexEntry]:
        self.index_calls += 1
        if self.release_index is not None:
            await self.release_index.wait()
        if self._index_error is not None:
            raise self._index_error
        return list(self._index)

    async def fetch_detail(self, url: str) -> dict[str, Any]:
        self.detail_calls[url] = self.detail_calls.get(url, 0) + 1
        if self._failures.get(url, 0) > 0:
            self._failures[url] -= 1
            raise ConnectionError(f"connection reset fetching {url}")
        return self._details[url]

    async def fetch_species(self, pokemon_id: int) -> dict[str, Any]:
        return {"names": []}


class FakeTextGenerator:
    """TextGenerator returning a canned reply (or raising a canned error)."""

    def __init__(self, reply: str = "{}", error: Exception | None = None, available: bool = True):
        self.reply = reply
        self.error = error
        self.available = available
        self.prompts: list[str] = []

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    def is_available(self) -> bool:
        return self.available
