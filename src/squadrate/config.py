"""
Configuration management for squadrate.

Uses Pydantic Settings to load configuration from environment variables
with sensible defaults for development. Every matching threshold, cache
window and rate limit is a named setting so it can be tuned without
touching code.

Usage:
    from squadrate.config import settings
    print(settings.cache_ttl_seconds)
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelayEndpoint(BaseModel):
    """
    A third-party relay that fetches a URL on our behalf.

    `url_template` contains `{url}` (raw target) or `{quoted_url}`
    (percent-encoded target). `envelope` describes how the relay wraps
    the payload: 'raw' returns the page body as-is, 'json_contents'
    returns {"contents": "<page body>"}.
    """

    name: str
    url_template: str
    envelope: str = "raw"


DEFAULT_RELAYS = [
    RelayEndpoint(
        name="cors-anywhere",
        url_template="https://cors-anywhere.herokuapp.com/{url}",
    ),
    RelayEndpoint(
        name="allorigins",
        url_template="https://api.allorigins.win/get?url={quoted_url}",
        envelope="json_contents",
    ),
    RelayEndpoint(
        name="thingproxy",
        url_template="https://thingproxy.freeboard.io/fetch/{url}",
    ),
]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables use the SQUADRATE_ prefix and can be set
    directly or via a .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SQUADRATE_",
        case_sensitive=False,
    )

    # ==========================================================================
    # Roster Database Configuration
    # ==========================================================================

    database_url: str = Field(
        default="sqlite:///squad.db",
        description="SQLAlchemy URL of the roster store (read-only for us)",
    )

    # ==========================================================================
    # Local Dataset Configuration
    # ==========================================================================

    dataset_base_dir: str = Field(
        default=".",
        description="Directory the dataset candidate paths are resolved against",
    )
    dataset_paths: list[str] = Field(
        default=[
            "sofifa_my_players_app.json",
            "data/sofifa_my_players_app.json",
            "public/sofifa_my_players_app.json",
        ],
        description="Candidate relative paths for the on-disk dataset, tried in order",
    )

    # ==========================================================================
    # Cache & Rate Limit Configuration
    # ==========================================================================

    cache_ttl_seconds: float = Field(
        default=3600.0,
        description="Cached results older than this are treated as absent",
    )
    rate_limit_max_requests: int = Field(
        default=10,
        description="Outbound fetch attempts allowed per rate window",
    )
    rate_limit_window_seconds: float = Field(
        default=60.0,
        description="Length of the fixed rate window",
    )

    # ==========================================================================
    # Fetch Configuration
    # ==========================================================================

    fetch_timeout: float = Field(
        default=10.0,
        description="Per-attempt timeout for every network fetch (seconds)",
    )
    search_timeout: float = Field(
        default=15.0,
        description="Per-attempt timeout for remote search requests (seconds)",
    )
    relay_endpoints: list[RelayEndpoint] = Field(
        default=DEFAULT_RELAYS,
        description="Third-party relays tried in order by the relay strategy",
    )
    server_relay_url: Optional[str] = Field(
        default=None,
        description="First-party relay endpoint (POST {'url': ...}); unset disables it",
    )
    fetch_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        description="User agent sent with direct and relayed fetches",
    )
    fetch_origin: str = Field(
        default="http://localhost:5173",
        description="Origin/Referer header used by the direct fetch strategy",
    )
    fetch_browser_enabled: bool = Field(
        default=False,
        description="Add the Playwright browser strategy to the fetch chain",
    )
    fetch_browser_headless: bool = Field(
        default=True,
        description="Run the browser strategy headless",
    )

    # ==========================================================================
    # Batch Configuration
    # ==========================================================================

    batch_size: int = Field(default=3, description="Concurrent resolutions per wave")
    batch_delay_seconds: float = Field(
        default=1.0,
        description="Pause between waves",
    )
    roster_batch_size: int = Field(
        default=5,
        description="Concurrent resolutions per wave when enriching a roster",
    )
    roster_batch_delay_seconds: float = Field(
        default=0.5,
        description="Pause between roster waves",
    )

    # ==========================================================================
    # Player Matching Configuration
    # ==========================================================================

    # See players/matching.py for how these combine
    match_containment_weight: float = Field(
        default=0.9,
        description="Scale applied to substring-containment term scores",
    )
    match_edit_similarity_floor: float = Field(
        default=0.6,
        description="Edit similarity must exceed this to score at all",
    )
    match_edit_similarity_weight: float = Field(
        default=0.8,
        description="Scale applied to edit-similarity term scores",
    )
    match_term_floor: float = Field(
        default=0.5,
        description="A query term counts as matched only above this score",
    )
    match_single_term_boost: float = Field(
        default=1.2,
        description="Boost for single-term (surname only) containment matches",
    )
    match_accept_score: float = Field(
        default=0.6,
        description="Accept any candidate scoring above this",
    )
    match_term_coverage: float = Field(
        default=0.7,
        description="Fraction of query terms that must match for a coverage accept",
    )
    match_coverage_score: float = Field(
        default=0.4,
        description="Minimum score for a coverage accept",
    )
    match_tie_margin: float = Field(
        default=0.1,
        description="Scores closer than this are ranked by matched term count",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: str = Field(
        default="console",
        description="Log format: 'json' for production, 'console' for dev",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure log format is one we know how to render."""
        lower_v = v.lower()
        if lower_v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return lower_v

    @field_validator("rate_limit_max_requests", "batch_size", "roster_batch_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once,
    which is important because loading from .env can be slow.
    """
    return Settings()


# Convenience alias for importing
settings = get_settings()
