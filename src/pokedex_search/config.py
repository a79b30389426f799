import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # PokeAPI
    pokeapi_base_url: str = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
    catalog_limit: int = int(os.getenv("CATALOG_LIMIT", "1500"))
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "30.0"))

    # Catalog population
    fetch_batch_size: int = int(os.getenv("FETCH_BATCH_SIZE", "50"))
    fetch_max_attempts: int = int(os.getenv("FETCH_MAX_ATTEMPTS", "3"))
    fetch_jitter_min_ms: float = float(os.getenv("FETCH_JITTER_MIN_MS", "50"))
    fetch_jitter_max_ms: float = float(os.getenv("FETCH_JITTER_MAX_MS", "80"))
    fetch_backoff_seconds: float = float(os.getenv("FETCH_BACKOFF_SECONDS", "1.0"))
    warm_cache_on_startup: bool = os.getenv("WARM_CACHE_ON_STARTUP", "false").lower() == "true"

    # Gemini
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    query_max_chars: int = int(os.getenv("QUERY_MAX_CHARS", "999"))

    # Search history
    history_ttl_days: int = int(os.getenv("HISTORY_TTL_DAYS", "60"))
    history_max_entries: int = int(os.getenv("HISTORY_MAX_ENTRIES", "50"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def history_ttl_seconds(self) -> float:
        """History horizon expressed in seconds."""
        return self.history_ttl_days * 24 * 60 * 60

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.fetch_batch_size < 1:
            raise ValueError("FETCH_BATCH_SIZE must be at least 1")

        if self.fetch_max_attempts < 1:
            raise ValueError("FETCH_MAX_ATTEMPTS must be at least 1")

        if not 0 <= self.fetch_jitter_min_ms <= self.fetch_jitter_max_ms:
            raise ValueError(
                f"FETCH_JITTER_MIN_MS must be between 0 and FETCH_JITTER_MAX_MS, "
                f"got {self.fetch_jitter_min_ms} > {self.fetch_jitter_max_ms}"
            )

        if self.query_max_chars < 1:
            raise ValueError("QUERY_MAX_CHARS must be at least 1")

        if self.history_ttl_days < 1 or self.history_max_entries < 1:
            raise ValueError("HISTORY_TTL_DAYS and HISTORY_MAX_ENTRIES must be at least 1")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service and scripts."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
