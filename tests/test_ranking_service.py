"""Tests for ranking: exact pass, similarity pass, merge and ordering."""

import pytest
from fakes import FakeCatalogSource, pokemon_payload

from pokedex_search.entities import FeatureBag
from pokedex_search.errors import CatalogUnavailableError
from pokedex_search.services import EXACT_MATCH_BONUS, RankingService


@pytest.fixture
def ranking(cache):
    return RankingService(cache=cache)


def names(results):
    return [r.pokemon.name for r in results]


async def test_empty_features_return_nothing(ranking):
    assert await ranking.rank(FeatureBag.empty()) == []


async def test_characteristics_alone_return_nothing(ranking):
    assert await ranking.rank(FeatureBag.create(characteristics=["yellow"])) == []


async def test_exact_match_gets_bonus(ranking):
    features = FeatureBag.create(candidate_names=["pikachu"], types=["electric"])

    results = await ranking.rank(features)

    assert results[0].pokemon.name == "pikachu"
    assert results[0].confidence == pytest.approx(0.3 + EXACT_MATCH_BONUS)


async def test_exact_match_bonus_is_not_clamped(make_cache):
    perfect = pokemon_payload(
        25, "pikachu", ("electric", "fairy"), ("static", "lightning-rod", "volt-absorb")
    )
    cache = make_cache(FakeCatalogSource([perfect]))
    features = FeatureBag.create(
        candidate_names=["pikachu"],
        types=["electric", "fairy"],
        abilities=["static", "lightning", "volt"],
    )

    results = await RankingService(cache=cache).rank(features)

    assert results[0].confidence == pytest.approx(1.5)
    assert results[0].confidence > 1.0


async def test_exact_match_without_feature_overlap_still_returned(ranking):
    results = await ranking.rank(FeatureBag.create(candidate_names=["Squirtle"]))

    assert names(results) == ["squirtle"]
    assert results[0].confidence == pytest.approx(EXACT_MATCH_BONUS)


async def test_exact_match_is_not_duplicated(ranking):
    features = FeatureBag.create(candidate_names=["pikachu"], types=["electric"])

    results = await ranking.rank(features)

    assert names(results).count("pikachu") == 1
    assert names(results) == ["pikachu", "raichu"]
    assert results[1].confidence == pytest.approx(0.3)


async def test_candidate_names_are_case_insensitive(ranking):
    features = FeatureBag.create(candidate_names=["PIKACHU"], types=["electric"])

    results = await ranking.rank(features)

    assert names(results) == ["pikachu", "raichu"]
    assert results[0].confidence == pytest.approx(0.8)


async def test_repeated_candidate_name_yields_one_result(ranking):
    features = FeatureBag.create(candidate_names=["pikachu", "Pikachu"])

    results = await ranking.rank(features)

    assert names(results) == ["pikachu"]


async def test_unknown_candidate_is_skipped(ranking):
    features = FeatureBag.create(candidate_names=["agumon"], types=["fire"])

    results = await ranking.rank(features)

    assert names(results) == ["charmander"]


async def test_multiple_candidates_are_all_looked_up(ranking):
    features = FeatureBag.create(candidate_names=["charmander", "squirtle"])

    results = await ranking.rank(features)

    assert names(results) == ["charmander", "squirtle"]


async def test_exact_match_wins_ties_against_similarity(ranking):
    # squirtle: 0 + bonus = 0.5; pikachu and raichu: 0.3 + 0.2 = 0.5
    features = FeatureBag.create(
        candidate_names=["squirtle"], types=["electric"], abilities=["static"]
    )

    results = await ranking.rank(features)

    assert names(results) == ["squirtle", "pikachu", "raichu"]
    assert [r.confidence for r in results] == pytest.approx([0.5, 0.5, 0.5])


async def test_traits_rank_by_descending_confidence(make_cache):
    cache = make_cache(
        FakeCatalogSource(
            [
                pokemon_payload(1, "low", ("fire",)),
                pokemon_payload(2, "high", ("fire", "flying", "dragon")),
                pokemon_payload(3, "mid", ("fire", "flying")),
                pokemon_payload(4, "none", ("water",)),
            ]
        )
    )
    features = FeatureBag.create(types=["fire", "flying", "dragon"])

    results = await RankingService(cache=cache).rank(features)

    assert names(results) == ["high", "mid", "low"]
    assert [r.confidence for r in results] == pytest.approx([0.9, 0.6, 0.3])


async def test_trait_ties_keep_catalog_order(ranking):
    results = await ranking.rank(FeatureBag.create(types=["electric"]))

    assert names(results) == ["pikachu", "raichu"]


async def test_ability_only_search(ranking):
    results = await ranking.rank(FeatureBag.create(abilities=["torrent"]))

    assert names(results) == ["squirtle"]
    assert results[0].confidence == pytest.approx(0.2)


async def test_results_carry_reason(ranking):
    results = await ranking.rank(FeatureBag.create(types=["water"]))

    assert "water" in results[0].reason
    assert "torrent" in results[0].reason


async def test_results_share_cached_records(ranking, cache):
    results = await ranking.rank(FeatureBag.create(types=["fire"]))

    assert results[0].pokemon is cache.get("charmander")


async def test_catalog_failure_propagates(make_cache, catalog_payloads):
    source = FakeCatalogSource(catalog_payloads, index_error=ConnectionError("down"))
    ranking = RankingService(cache=make_cache(source))

    with pytest.raises(CatalogUnavailableError):
        await ranking.rank(FeatureBag.create(types=["fire"]))


async def test_scoring_error_yields_empty_result(ranking, monkeypatch):
    def explode(pokemon, features):
        raise RuntimeError("bad record")

    monkeypatch.setattr("pokedex_search.services.ranking_service.score", explode)

    assert await ranking.rank(FeatureBag.create(types=["fire"])) == []
