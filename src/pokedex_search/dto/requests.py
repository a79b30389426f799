"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request DTO for a descriptive search.

    The handler will convert this to internal calls to the service layer.
    """

    query: str = Field(
        ...,
        description="Free-text description of the Pokémon to find",
        min_length=1,
    )
