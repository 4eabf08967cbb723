"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    enable_docs: bool = Field(
        default=False,
        description="Serve OpenAPI docs under /api/docs (unknown paths otherwise all return 404)"
    )

    # Validation settings
    dns_timeout_seconds: float = Field(
        default=5.0,
        ge=0,
        description="Upper bound on a hostname lookup; 0 waits indefinitely"
    )

    # Storage settings
    store_backend: str = Field(
        default="memory",
        description="Where short URLs live: 'memory' (lost on restart) or 'redis'"
    )

    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL, required when store_backend is 'redis'"
    )

    redis_key_prefix: str = Field(
        default="shorturl",
        description="Namespace for Redis keys"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
