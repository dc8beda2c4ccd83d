"""Centralized settings for the Wordfolio client via Pydantic BaseSettings.

All configuration is read from environment variables with the WORDFOLIO_
prefix, falling back to the defaults defined here. Set values in a .env file
or export them in the shell before running the CLI.

Only the CLI reads these settings directly.  Library classes (client,
pipelines, resolvers) receive their dependencies through their constructors.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Environment variable names are formed by uppercasing the field name and
    prepending the WORDFOLIO_ prefix.  Example: WORDFOLIO_API_BASE_URL
    overrides api_base_url.
    """

    # REST backend
    api_base_url: str = "http://localhost:5000/api"
    request_timeout_seconds: float = 10.0
    verify_ssl: bool = True

    # Session (token storage and refresh live outside this package)
    token_type: str = "Bearer"
    access_token: str = ""

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="WORDFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Module-level singleton, imported by the CLI layer
settings = Settings()
