from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Text Transformation Engine"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Limits
    max_input_length: int = 100_000
    max_pipeline_steps: int = 50

    # Detection
    multilayer_max_depth: int = 3

    # Key derivation
    kdf_iterations: int = 100_000
    kdf_default_salt: str = "RedConverterSalt2024"

    # Memoization of generated artifacts (QR renderings)
    qr_cache_size: int = 128

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
