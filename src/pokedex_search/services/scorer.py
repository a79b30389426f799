"""Feature match scoring.

Pure functions: no I/O, no state, identical inputs give identical outputs.
"""

from pokedex_search.entities import FeatureBag, PokemonEntity

TYPE_MATCH_WEIGHT = 0.3
ABILITY_MATCH_WEIGHT = 0.2
MAX_SCORE = 1.0


def score(pokemon: PokemonEntity, features: FeatureBag) -> float:
    """Score how well a Pokémon matches the extracted features.

    Each feature type equal (case-insensitively) to one of the Pokémon's
    types adds TYPE_MATCH_WEIGHT. Each feature ability contained in one of
    the Pokémon's ability names adds ABILITY_MATCH_WEIGHT (substring match,
    so "rod" matches "lightning-rod"). The sum is capped at MAX_SCORE.

    Args:
        pokemon: The candidate record
        features: Features extracted from the query

    Returns:
        A score in [0, 1]; 0 when nothing matches
    """
    total = 0.0

    pokemon_types = {t.lower() for t in pokemon.types}
    for feature_type in features.types:
        if feature_type.lower() in pokemon_types:
            total += TYPE_MATCH_WEIGHT

    pokemon_abilities = [a.lower() for a in pokemon.abilities]
    for feature_ability in features.abilities:
        needle = feature_ability.lower()
        if any(needle in ability for ability in pokemon_abilities):
            total += ABILITY_MATCH_WEIGHT

    return min(MAX_SCORE, total)


def build_reason(pokemon: PokemonEntity) -> str:
    """Describe a Pokémon's types and abilities for display next to a match.

    The text depends on the Pokémon only, not on which features matched.
    """
    types = ", ".join(pokemon.types) or "unknown"
    abilities = ", ".join(pokemon.abilities) or "none"
    return f"Type: {types}; abilities include {abilities}"
