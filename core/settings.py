"""
Centralized Settings Configuration

Uses Pydantic Settings to load configuration from environment variables
with validation and type coercion.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DISAMBIGUATION_POLICIES = {"most_games", "most_recent"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (any URL understood by playhouse.db_url)
    database_url: str = "sqlite:///boxscores.db"
    db_max_connections: int = 20
    db_stale_timeout: int = 300

    # Query limits
    top_scorers_limit: int = 10
    max_top_scorers_limit: int = 50
    matchup_top_n: int = 5
    player_sample_limit: int = 20
    max_player_sample_limit: int = 100

    # Query behaviour
    player_disambiguation: str = "most_games"
    matchup_fold_franchise: bool = True
    matchup_concurrent: bool = True

    # Bulk load
    import_batch_size: int = 500

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"
    log_sql: bool = False
    service_name: str = "boxscore-query-service"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",  # Frontend
        "http://localhost:5001",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is either json or console."""
        lower_v = v.lower()
        if lower_v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return lower_v

    @field_validator("player_disambiguation")
    @classmethod
    def validate_disambiguation(cls, v: str) -> str:
        """Validate the player disambiguation policy name."""
        lower_v = v.lower()
        if lower_v not in DISAMBIGUATION_POLICIES:
            raise ValueError(
                f"player_disambiguation must be one of {sorted(DISAMBIGUATION_POLICIES)}"
            )
        return lower_v

    @field_validator(
        "top_scorers_limit",
        "max_top_scorers_limit",
        "matchup_top_n",
        "player_sample_limit",
        "max_player_sample_limit",
        "import_batch_size",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v


def get_settings() -> Settings:
    """
    Get application settings.

    This function creates a new Settings instance each time,
    allowing for testing with different configurations.
    """
    return Settings()


# Default settings instance for convenience
# Import this for quick access: from core.settings import settings
settings = Settings()
