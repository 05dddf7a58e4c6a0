from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Cashier Local"
    ENVIRONMENT: str = "local"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./data.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Activation
    # ==============================
    LICENSE_VALIDITY_DAYS: int = 365
    ACTIVATION_ENFORCED: bool = True
    ACTIVATION_PATH: str = "/activation"

    # ==============================
    # Seed data
    # ==============================
    SEED_DATA_PATH: str = "seedData.json"
    SEED_DATA_ON_STARTUP: bool = True

    # ==============================
    # Client
    # ==============================
    CATALOG_DEBOUNCE_SECONDS: float = 0.3
    API_BASE_URL: str = "http://localhost:8001"
    API_TIMEOUT_SECONDS: int = 15


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
