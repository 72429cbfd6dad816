from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FIELDRULES_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Validation
    REJECT_NON_OBJECT: bool = False  # Record a root error instead of passing non-object input


@lru_cache
def get_settings() -> Settings:
    return Settings()
