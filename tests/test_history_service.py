"""Tests for the in-process search history."""

import pytest

from pokedex_search.entities import MatchResultEntity, PokemonEntity
from pokedex_search.services import SearchHistoryService

DAY = 86400


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def result(pokemon_id: int, name: str, confidence: float = 0.5) -> MatchResultEntity:
    return MatchResultEntity(
        pokemon=PokemonEntity(id=pokemon_id, name=name),
        reason="Type: unknown; abilities include none",
        confidence=confidence,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def history(clock):
    return SearchHistoryService(ttl_seconds=60 * DAY, max_entries=3, clock=clock)


def names(history):
    return [e.result.pokemon.name for e in history.entries()]


def test_starts_empty(history):
    assert history.entries() == []


def test_newest_first(history, clock):
    history.record(result(25, "pikachu"))
    clock.now += 10
    history.record(result(4, "charmander"))

    assert names(history) == ["charmander", "pikachu"]


def test_same_pokemon_moves_to_front(history, clock):
    history.record(result(25, "pikachu", 0.3))
    history.record(result(4, "charmander"))
    clock.now += 10
    history.record(result(25, "pikachu", 0.8))

    entries = history.entries()
    assert names(history) == ["pikachu", "charmander"]
    assert entries[0].result.confidence == 0.8
    assert entries[0].recorded_at == clock.now


def test_keeps_at_most_max_entries(history):
    for pokemon_id, name in [(1, "a"), (2, "b"), (3, "c"), (4, "d")]:
        history.record(result(pokemon_id, name))

    assert names(history) == ["d", "c", "b"]


def test_expired_entries_are_pruned_on_read(history, clock):
    history.record(result(25, "pikachu"))
    clock.now += 59 * DAY
    history.record(result(4, "charmander"))

    clock.now += 2 * DAY

    assert names(history) == ["charmander"]


def test_entry_expires_exactly_at_ttl(history, clock):
    history.record(result(25, "pikachu"))
    clock.now += 60 * DAY

    assert history.entries() == []


def test_clear_reports_removed_count(history):
    history.record(result(25, "pikachu"))
    history.record(result(4, "charmander"))

    assert history.clear() == 2
    assert history.entries() == []
    assert history.clear() == 0


def test_defaults_come_from_settings():
    history = SearchHistoryService()
    assert history.ttl_seconds == 60 * DAY
