#!/usr/bin/env python3
"""
Demo script for Pokedex search.

Runs one descriptive search against the live PokeAPI and Gemini and prints
the extracted features and the ranking. The first run populates the
catalog cache, which takes a while (about 1,300 detail requests).

    python scripts/demo.py "a small yellow mouse that stores electricity in its cheeks"
"""

import argparse
import asyncio

from pokedex_search.config import configure_logging
from pokedex_search.errors import CatalogUnavailableError
from pokedex_search.repositories import GeminiTextGenerator, PokeApiClient
from pokedex_search.services import (
    DatasetCache,
    FeatureExtractor,
    RankingService,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def run(query: str, limit: int) -> None:
    client = PokeApiClient.create()
    generator = GeminiTextGenerator.create()
    extractor = FeatureExtractor(generator=generator)
    ranking = RankingService(cache=DatasetCache(source=client))

    try:
        print_section("Extracted features")
        features = await extractor.extract(query)
        print(f"  Names:           {', '.join(features.candidate_names) or '-'}")
        print(f"  Types:           {', '.join(features.types) or '-'}")
        print(f"  Abilities:       {', '.join(features.abilities) or '-'}")
        print(f"  Characteristics: {', '.join(features.characteristics) or '-'}")

        print_section("Ranking")
        results = await ranking.rank(features)
        if not results:
            print("  No matches")
        for position, match in enumerate(results[:limit], start=1):
            print(f"  {position:>2}. {match.pokemon.name:<20} {match.confidence:.2f}  {match.reason}")
        if len(results) > limit:
            print(f"  ... {len(results) - limit} more")
    finally:
        await client.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Describe a Pokémon and get ranked matches")
    parser.add_argument("query", help="Free-text description")
    parser.add_argument("--limit", type=int, default=10, help="Number of results to print")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)

    try:
        asyncio.run(run(args.query, args.limit))
    except CatalogUnavailableError as e:
        print(f"\n❌ {e}")
        print("\nCheck network access to POKEAPI_BASE_URL.")


if __name__ == "__main__":
    main()
