"""Structured-log implementation of the TelemetrySink interface."""

from voice_dictation.logging import setup_logging

from .interfaces import TelemetrySink

logger = setup_logging()


class LoggingTelemetrySink(TelemetrySink):
    """Emits each telemetry event as one structured log record."""

    def __init__(self, enabled: bool = True):
        self._enabled = enabled

    def capture_recording_started(self, task_id: str | None, platform: str) -> None:
        self._emit("voice.recording_started", task_id=task_id, platform=platform)

    def capture_transcription_completed(
        self,
        task_id: str | None,
        text_length: int | None,
        duration_ms: int | None,
        language: str | None,
        is_org_account: bool,
    ) -> None:
        self._emit(
            "voice.transcription_completed",
            task_id=task_id,
            text_length=text_length,
            duration_ms=duration_ms,
            language=language,
            is_org_account=is_org_account,
        )

    def _emit(self, event: str, **properties) -> None:
        if not self._enabled:
            return
        logger.info("Telemetry event", extra={"event": event, **properties})
