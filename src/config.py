import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from src.errors import ConfigurationError

DEFAULT_PORT = 10000
DEFAULT_BASE_URL = "https://api-b2b.easybusy.software"

# Level names both logging and uvicorn accept
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _log_level(value: Optional[str]) -> str:
    level = (value or "INFO").strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown LOG_LEVEL: {value}")
    return level


class GatewayConfig(BaseModel):
    """
    Immutable gateway settings, built once at startup and handed to
    every component that needs them.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    timeout: Optional[float] = None
    log_level: str = "INFO"
    metrics_enabled: bool = False

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks
        return f"GatewayConfig(base_url={self.base_url!r}, port={self.port}, host={self.host!r})"

    __str__ = __repr__

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value: Optional[str]) -> str:
        return _log_level(value)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GatewayConfig":
        env = os.environ if environ is None else environ

        api_key = env.get("EASYBUSY_API_KEY")
        if not api_key:
            raise ConfigurationError("Missing EASYBUSY_API_KEY env var")

        values = {
            "api_key": api_key,
            "base_url": env.get("EASYBUSY_BASE_URL") or DEFAULT_BASE_URL,
            "port": env.get("PORT") or DEFAULT_PORT,
            "host": env.get("HOST") or "0.0.0.0",
            "timeout": env.get("EASYBUSY_TIMEOUT") or None,
            "log_level": env.get("LOG_LEVEL"),
            "metrics_enabled": _env_flag(env.get("METRICS_ENABLED")),
        }
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid gateway configuration: {e}") from e
