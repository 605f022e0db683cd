"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

DEFAULT_API_BASE_URL = "https://api.cline.bot"


class AccountApiConfig(BaseModel, frozen=True):
    """Account and transcription API connection configuration."""

    base_url: str = DEFAULT_API_BASE_URL
    api_token: str = ""
    timeout_seconds: float = 30.0


class TelemetryConfig(BaseModel, frozen=True):
    """Telemetry emission configuration."""

    enabled: bool = True


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    account_api: AccountApiConfig = AccountApiConfig()
    telemetry: TelemetryConfig = TelemetryConfig()
    logging: LoggingConfig = LoggingConfig()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        account_api=AccountApiConfig(
            base_url=os.getenv("DICTATION_API_BASE_URL", DEFAULT_API_BASE_URL),
            api_token=os.getenv("DICTATION_API_TOKEN", ""),
            timeout_seconds=float(os.getenv("DICTATION_API_TIMEOUT_SECONDS", "30")),
        ),
        telemetry=TelemetryConfig(
            enabled=_env_flag("DICTATION_TELEMETRY_ENABLED", True),
        ),
        logging=LoggingConfig(
            level=os.getenv("DICTATION_LOG_LEVEL", "INFO"),
        ),
    )
