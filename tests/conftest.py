"""Shared fixtures."""

import pytest
from fakes import FakeCatalogSource, pokemon_payload

from pokedex_search.services import DatasetCache


@pytest.fixture
def catalog_payloads():
    """A small catalog: two electric Pokémon, a fire starter and a water starter."""
    return [
        pokemon_payload(25, "pikachu", ("electric",), ("static", "lightning-rod")),
        pokemon_payload(26, "raichu", ("electric",), ("static", "lightning-rod")),
        pokemon_payload(4, "charmander", ("fire",), ("blaze", "solar-power")),
        pokemon_payload(7, "squirtle", ("water",), ("torrent", "rain-dish")),
    ]


@pytest.fixture
def make_cache():
    """Build a DatasetCache with no jitter and no backoff, so retries run instantly."""

    def _make(source: FakeCatalogSource, batch_size: int = 50, max_attempts: int = 3) -> DatasetCache:
        return DatasetCache(
            source=source,
            batch_size=batch_size,
            max_attempts=max_attempts,
            jitter_ms=(0.0, 0.0),
            backoff_seconds=0.0,
        )

    return _make


@pytest.fixture
def source(catalog_payloads):
    return FakeCatalogSource(catalog_payloads)


@pytest.fixture
def cache(source, make_cache):
    return make_cache(source)
