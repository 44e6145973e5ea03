"""
Application configuration loaded from environment variables.

Uses Pydantic Settings to:
1. Read from .env file automatically
2. Provide type-safe access throughout the app
3. Keep the one secret we need (the Anthropic key) out of the code

Usage:
    from study_planner.config import settings
    print(settings.ANTHROPIC_MODEL)

Note: We use a validator that prefers .env values over empty shell
environment variables. An exported-but-empty ANTHROPIC_API_KEY would
otherwise shadow the real key in the .env file.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All application configuration in one place."""

    model_config = SettingsConfigDict(
        env_file=".env",        # Load from .env file
        env_file_encoding="utf-8",
        case_sensitive=True,     # ENV_VAR must match exactly
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def prefer_dotenv_over_empty_env(cls, data):
        """If an env var is empty but .env has a value, use the .env value.

        Pydantic Settings prioritizes real env vars over .env file values,
        even when the real env var is an empty string.
        """
        from dotenv import dotenv_values

        dotenv_vals = dotenv_values(".env")
        for key, dotenv_value in dotenv_vals.items():
            # If the field is missing or empty, use the .env value
            if dotenv_value and (key not in data or not data.get(key)):
                data[key] = dotenv_value
        return data

    # --- Study plan generation ---
    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_MODEL: str = "claude-sonnet-4-20250514"
    PLAN_MAX_TOKENS: int = 8192
    PLAN_TEMPERATURE: float = 0.3

    # --- Application ---
    APP_ENV: str = "development"
    DEBUG: bool = True
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def generation_configured(self) -> bool:
        """True when a credential for the generation service is present."""
        return bool(self.ANTHROPIC_API_KEY.strip())


# Singleton instance, import this everywhere
settings = Settings()
