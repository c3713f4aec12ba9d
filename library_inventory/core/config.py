"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    # API Configuration
    api_title: str = "Library Inventory"
    api_description: str = (
        "REST API for tracking book inventory, lookups and borrowing"
    )
    api_version: str = "0.1.0"
    api_prefix: str = "/api/v1"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS Configuration
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"])

    # Inventory Configuration
    seed_sample_data: bool = Field(
        default=False, description="Load the sample catalog into the store at startup"
    )
    max_isbn_length: int = 32
    max_text_length: int = 255
    max_copies_per_request: int = 10000

    # Logging Configuration
    log_level: str = "INFO"
    log_format_general: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_format_request: str = (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s | method=%(method)s path=%(path)s status=%(status_code)s duration_ms=%(duration_ms)s request_id=%(request_id)s"
    )


# Global settings instance
settings = Settings()  # type: ignore[call-arg]
