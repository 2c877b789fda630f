"""Application settings using Pydantic for environment-based configuration."""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    app_name: str = Field(default="patterns-playground", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_workers: int = Field(default=1, description="Number of API workers")
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        description="CORS allowed origins (comma-separated)"
    )

    # Trading configuration served by the configuration service
    trading_api_url: str = Field(
        default="https://api.trading.example.com", description="Trading API base URL"
    )
    risk_check_enabled: bool = Field(default=True, description="Run pre-trade risk checks")
    max_order_size: int = Field(default=1_000_000, description="Maximum order notional")
    default_currency: str = Field(default="USD", description="Default account currency")
    kafka_bootstrap_servers: str = Field(
        default="localhost:9092", description="Kafka bootstrap servers"
    )

    # Command handler
    command_max_attempts: int = Field(default=3, ge=1, description="Max command attempts")
    command_retry_delay_seconds: float = Field(
        default=0.1, ge=0, description="Linear backoff step between command attempts (seconds)"
    )
    command_audit_max_entries: Optional[int] = Field(
        default=10_000, ge=1, description="Newest audit entries kept (unbounded if unset)"
    )

    # Payment Processing
    payment_retry_max_attempts: int = Field(default=3, ge=1, description="Max payment retry attempts")
    payment_retry_base_delay: float = Field(
        default=0.1, ge=0, description="Base delay for retry backoff (seconds)"
    )

    # Fake gateways
    simulate_gateway_latency: bool = Field(
        default=True, description="Sleep inside fake gateways to mimic network latency"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator("default_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Currency codes are stored upper-case."""
        return v.upper()

    def get_allowed_origins_list(self) -> List[str]:
        """Parse allowed origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
