"""Infrastructure layer exports."""

from .http_account_client import HttpAccountClient
from .logging_telemetry import LoggingTelemetrySink

__all__ = ["HttpAccountClient", "LoggingTelemetrySink"]
