"""Application settings and configuration management."""

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Financial Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Search Configuration
    max_per_category: int = Field(default=5, ge=0)
    max_query_length: int = Field(default=100)

    # Interactive session timing
    debounce_delay_ms: int = Field(default=150, ge=0)
    blur_delay_ms: int = Field(default=200, ge=0)

    # Dataset loaded at start-up (bundled sample data when unset)
    sample_data_path: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    def resolve_sample_data_path(self) -> str:
        """Return the dataset file to load at start-up."""
        if self.sample_data_path:
            return self.sample_data_path
        return os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "data", "sample_data.json"
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
