"""Text generator protocol.

Defines the interface for the generative model that turns a search
description into a structured feature payload.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextGenerator(Protocol):
    """Protocol for single-shot text-in / text-out language models."""

    @property
    def model_name(self) -> str:
        """Return the name/identifier of the model."""
        ...

    async def generate(self, prompt: str) -> str:
        """Generate a completion for the prompt.

        Args:
            prompt: The full instruction text

        Returns:
            The raw model reply
        """
        ...

    def is_available(self) -> bool:
        """Check whether the model can be called (e.g. credentials are configured)."""
        ...
