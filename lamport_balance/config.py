"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .rpc import DEFAULT_RPC_URL


class Settings(BaseSettings):
    """Settings for the balance service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Service
    service_name: str = "lamport-balance"
    service_version: str = "1.0.0"

    # Solana RPC
    rpc_url: str = DEFAULT_RPC_URL
    rpc_timeout: float | None = None  # seconds; None waits indefinitely

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"


# Global settings instance
settings = Settings()
