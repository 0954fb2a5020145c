from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import pydantic


class Settings(BaseSettings):
    """
    Manages all application settings.
    Reads from environment variables (and .env file).
    """

    # --- Core Application Configuration ---
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- Bank Configuration ---
    BANK_INITIAL_COINS: int = pydantic.Field(default=10_000, ge=0)
    BANK_STRICT: bool = False

    @pydantic.computed_field
    @property
    def EFFECTIVE_LOG_LEVEL(self) -> str:
        """
        DEBUG always wins over the configured level.
        """
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()

    # Pydantic-Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Returns a cached instance of the Settings object.
    Using @lru_cache ensures the .env file is read only once.
    """
    return Settings()

# Create a single, globally accessible settings instance
settings = get_settings()
