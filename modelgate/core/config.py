"""Application configuration settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    These only feed configuration UI hints and env-derived provider configs.
    Runtime URL resolution never reads the environment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Set when running inside a container; changes the base URL placeholder
    docker: bool = False

    # Ollama
    ollama_base_url: str | None = None
    ollama_api_key: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Cached Settings instance.
    """
    return Settings()
