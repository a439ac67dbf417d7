"""Service configuration loaded from environment variables."""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .numeric_traits import IntegerWidth


class ServiceConfig(BaseModel):
    """Configuration for the modular exponentiation service.

    Attributes:
        default_width: Integer width used when a request does not name one.
        log_level: Name of the logging level for the service logger.
        log_dir: Directory for rotating log files; console only when unset.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
    """

    default_width: IntegerWidth = Field(
        default=IntegerWidth.INT64,
        description="Integer width used when a request does not specify one"
    )
    log_level: str = Field(default="INFO", description="Logging level name")
    log_dir: Optional[str] = Field(None, description="Directory for log files")
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> 'ServiceConfig':
        """Build the configuration from MODEXP_* and SERVER_* variables.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        return cls(
            default_width=os.getenv("MODEXP_DEFAULT_WIDTH", IntegerWidth.INT64.value),
            log_level=os.getenv("MODEXP_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("MODEXP_LOG_DIR") or None,
            host=os.getenv("SERVER_HOST", "127.0.0.1"),
            port=os.getenv("SERVER_PORT", "8000"),
        )


_config: Optional[ServiceConfig] = None


def get_config() -> ServiceConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = ServiceConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
