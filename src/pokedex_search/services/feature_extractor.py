"""Feature extraction service.

Asks a generative model to read a free-text Pokémon description and reply
with a JSON object of features, then turns that reply into a FeatureBag.
Model replies are often almost-JSON (Markdown fences, trailing commas,
unquoted keys), so every reply is repaired before it is parsed.
"""

import json
import logging
from typing import Any

from json_repair import repair_json

from pokedex_search.config import settings
from pokedex_search.entities import FeatureBag
from pokedex_search.protocols import TextGenerator

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """You are a Pokémon expert. Read the following description:

{description}

The description may contain a Pokémon's name, its characteristics, or a scene
from the Pokémon games, anime, movies or other media. Consider every Pokémon:
regular, Legendary, Mythical, Ultra Beasts, regional forms and the newest
generation. Check your answer against the Pokédex more than once.

Return a single JSON object with these fields:
- name: a real Pokémon name, as an object with "en" (English name) and "zh"
  (Traditional Chinese name).
- types: possible elemental types (such as Fire, Dragon, Psychic, Fairy), as
  an array of strings.
- characteristics: physical appearance and personality traits (body shape,
  colors, behavior), as an array of strings.
- abilities: possible abilities, signature moves or special traits, as an
  array of strings.

Respond with the JSON object only."""


def _as_strings(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _candidate_names(name: Any) -> list[str]:
    """Read candidate names from the ``name`` field.

    Accepts ``{"en": "Pikachu"}``, ``{"en": ["Pichu", "Pikachu"]}``, a bare
    string, or a list of either.
    """
    if isinstance(name, dict):
        return _as_strings(name.get("en"))
    if isinstance(name, list):
        names: list[str] = []
        for item in name:
            names.extend(_candidate_names(item))
        return names
    return _as_strings(name)


class FeatureExtractor:
    """Turns a search description into a FeatureBag.

    ``extract`` never raises: a model error or an unparseable reply yields
    an empty FeatureBag, which ranks to no results.

    Example:
        ```python
        extractor = FeatureExtractor(generator=GeminiTextGenerator.create())
        features = await extractor.extract("a yellow electric mouse")
        ```
    """

    def __init__(self, generator: TextGenerator, max_chars: int | None = None) -> None:
        """Initialize the extractor.

        Args:
            generator: Language model used for extraction (required).
            max_chars: Description prefix length sent to the model. Defaults to settings.
        """
        self._generator = generator
        self._max_chars = max_chars or settings.query_max_chars

    def build_prompt(self, description: str) -> str:
        """Fill the instruction template with the truncated description."""
        return PROMPT_TEMPLATE.format(description=description[: self._max_chars])

    async def extract(self, description: str) -> FeatureBag:
        """Extract features from a description.

        Args:
            description: Free-text query

        Returns:
            The extracted features, or an empty bag on any failure
        """
        try:
            reply = await self._generator.generate(self.build_prompt(description))
        except Exception as e:
            logger.warning("Feature extraction model call failed: %s", e)
            return FeatureBag.empty()

        logger.debug("Model reply: %s", reply)

        try:
            return self.parse(reply)
        except Exception as e:
            logger.warning("Failed to parse model reply: %s: %s", type(e).__name__, e)
            return FeatureBag.empty()

    @staticmethod
    def parse(reply: str) -> FeatureBag:
        """Repair and parse a model reply into a FeatureBag.

        If the payload holds a ``matches`` list (or is itself a list), only
        the first element is used.

        Raises:
            ValueError: If the repaired text is still not valid JSON
        """
        payload = json.loads(repair_json(reply))

        if isinstance(payload, dict) and isinstance(payload.get("matches"), list):
            payload = payload["matches"][0] if payload["matches"] else {}
        elif isinstance(payload, list):
            payload = payload[0] if payload else {}

        if not isinstance(payload, dict):
            return FeatureBag.empty()

        return FeatureBag.create(
            candidate_names=_candidate_names(payload.get("name")),
            types=_as_strings(payload.get("types")),
            abilities=_as_strings(payload.get("abilities")),
            characteristics=_as_strings(payload.get("characteristics")),
        )
