from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FACTUURPRO_", env_file=".env", extra="ignore")

    # App
    app_name: str = "FactuurPro"
    api_version: str = "1.0.0"
    environment: str = Field(default="development", validation_alias="FACTUURPRO_ENV")
    log_level: str = "INFO"
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Database
    database_url: str = "sqlite:///./factuurpro.db"
    seed_sample_data: bool = True

    # Invoicing
    invoice_number_prefix: str = "F"


@lru_cache
def get_settings() -> Settings:
    """Return a singleton Settings instance."""
    return Settings()
