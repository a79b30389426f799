from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokedex_search.api.dependencies import HandlerDep, lifespan
from pokedex_search.config import settings
from pokedex_search.dto import (
    CacheStatusResponse,
    ErrorResponse,
    HealthCheckResponse,
    HistoryResponse,
    PokemonDetailResponse,
    SearchRequest,
    SearchResponse,
)
from pokedex_search.errors import PokedexSearchError

app = FastAPI(
    title="Pokedex Search API",
    description="Describe a Pokémon in your own words and get ranked matches",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PokedexSearchError)
async def pokedex_error_handler(request: Request, exc: PokedexSearchError) -> JSONResponse:
    """Render service errors as ``{"error": message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies as ``{"error": message}`` with status 422."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error=f"Invalid request: {problems}").model_dump(),
    )


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Pokedex Search API",
        "version": "0.1.0",
        "description": "Describe a Pokémon in your own words and get ranked matches",
        "endpoints": {
            "search": "/search",
            "pokemon": "/pokemon/{id}",
            "history": "/history",
            "cache": "/cache/status",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.post(
    "/search",
    response_model=SearchResponse,
    responses={500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def search(request: SearchRequest, handler: HandlerDep) -> SearchResponse:
    """
    Find Pokémon matching a free-text description.

    Args:
        request: Search request with the description.

    Returns:
        Ranked matches, highest confidence first.
    """
    return await handler.search(request)


@app.get(
    "/pokemon/{pokemon_id}",
    response_model=PokemonDetailResponse,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def get_pokemon(pokemon_id: int, handler: HandlerDep) -> PokemonDetailResponse:
    """Get a Pokémon with its localized names."""
    return await handler.get_pokemon(pokemon_id)


@app.get("/history", response_model=HistoryResponse)
async def get_history(handler: HandlerDep) -> HistoryResponse:
    """Get recent top search results, newest first."""
    return await handler.get_history()


@app.delete("/history", response_model=dict[str, Any])
async def clear_history(handler: HandlerDep) -> dict[str, Any]:
    """Clear the search history."""
    return await handler.clear_history()


@app.get("/cache/status", response_model=CacheStatusResponse)
async def cache_status(handler: HandlerDep) -> CacheStatusResponse:
    """Get the catalog cache state and size."""
    return await handler.cache_status()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pokedex_search.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
