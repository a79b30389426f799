"""Google Gemini text generator.

Wraps the ``google-generativeai`` SDK behind the TextGenerator protocol.
The model is configured lazily on first use so the service can start
(and serve cached lookups) without credentials.
"""

import logging

import google.generativeai as genai

from pokedex_search.config import settings

logger = logging.getLogger(__name__)


class GeminiTextGenerator:
    """Gemini implementation of the TextGenerator protocol.

    Example:
        ```python
        generator = GeminiTextGenerator.create()
        reply = await generator.generate("Describe Pikachu as JSON")
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        temperature: float = 0.2,
    ) -> None:
        """Initialize the Gemini generator.

        Args:
            api_key: Gemini API key. Defaults to settings.gemini_api_key.
            model_name: Gemini model name. Defaults to settings.gemini_model.
            temperature: Sampling temperature for feature extraction.
        """
        self._api_key = api_key or settings.gemini_api_key
        self._model_name = model_name or settings.gemini_model
        self._temperature = temperature
        self._model: genai.GenerativeModel | None = None

    @classmethod
    def create(cls, model_name: str | None = None) -> "GeminiTextGenerator":
        """Factory method to create GeminiTextGenerator with defaults."""
        return cls(model_name=model_name)

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def model(self) -> genai.GenerativeModel:
        """Lazy-configure the Gemini model.

        Raises:
            RuntimeError: If no API key is configured
        """
        if self._model is None:
            if not self._api_key:
                raise RuntimeError("GEMINI_API_KEY is not set")
            genai.configure(api_key=self._api_key)
            self._model = genai.GenerativeModel(self._model_name)
            logger.info("Configured Gemini model %s", self._model_name)
        return self._model

    async def generate(self, prompt: str) -> str:
        """Send the prompt and return the reply text, stripped."""
        response = await self.model.generate_content_async(
            prompt,
            generation_config={"temperature": self._temperature},
        )
        return response.text.strip()

    def is_available(self) -> bool:
        return bool(self._api_key)
