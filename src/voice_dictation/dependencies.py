"""
Explicit construction of the dictation core's collaborators.

Each builder returns a fresh instance. The entry point calls them once at
startup and hands the results to whoever needs them; nothing here is cached
at module level.
"""

import httpx

from voice_dictation.config import AppConfig
from voice_dictation.handlers import RecordingController, TranscriptionGateway
from voice_dictation.infrastructure import HttpAccountClient, LoggingTelemetrySink
from voice_dictation.infrastructure.interfaces import (
    AccountClient,
    AuthProvider,
    MessageHost,
    RecorderBackend,
    TaskHost,
    TelemetrySink,
)


def build_account_client(config: AppConfig) -> HttpAccountClient:
    """Returns an account client bound to the configured API."""
    api = config.account_api
    headers = {"Accept": "application/json"}
    if api.api_token:
        headers["Authorization"] = f"Bearer {api.api_token}"
    client = httpx.AsyncClient(
        base_url=api.base_url,
        headers=headers,
        timeout=httpx.Timeout(api.timeout_seconds),
    )
    return HttpAccountClient(client)


def build_telemetry_sink(config: AppConfig) -> TelemetrySink:
    """Returns the telemetry sink selected by configuration."""
    return LoggingTelemetrySink(enabled=config.telemetry.enabled)


def build_transcription_gateway(
    config: AppConfig,
    account: AccountClient | None = None,
    telemetry: TelemetrySink | None = None,
) -> TranscriptionGateway:
    """Returns a transcription gateway, building default collaborators as needed."""
    return TranscriptionGateway(
        account=account or build_account_client(config),
        telemetry=telemetry or build_telemetry_sink(config),
    )


def build_recording_controller(
    config: AppConfig,
    auth: AuthProvider,
    recorder: RecorderBackend,
    message_host: MessageHost,
    task_host: TaskHost,
    telemetry: TelemetrySink | None = None,
) -> RecordingController:
    """Returns a recording controller wired to the host's collaborators."""
    return RecordingController(
        auth=auth,
        recorder=recorder,
        message_host=message_host,
        task_host=task_host,
        telemetry=telemetry or build_telemetry_sink(config),
    )
