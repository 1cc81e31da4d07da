from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """MDJotter client settings.

    All values are loaded from environment variables.
    A .env file in the working directory is also supported.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Credentials ---
    MDJOTTER_USERNAME: str = ""
    MDJOTTER_PASSWORD: SecretStr = SecretStr("")

    # --- Service location ---
    MDJOTTER_HOSTNAME: str = "localhost"
    MDJOTTER_PORT: int = 3000

    # --- Transport ---
    MDJOTTER_TIMEOUT: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings singleton."""
    return Settings()
