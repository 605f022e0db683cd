"""Handler for transcribing a captured audio payload."""

from voice_dictation.domain import TranscriptionOutcome, classify
from voice_dictation.infrastructure.interfaces import AccountClient, TelemetrySink
from voice_dictation.logging import setup_logging

logger = setup_logging()


class TranscriptionGateway:
    """Submits audio to the transcription service and classifies failures."""

    def __init__(self, account: AccountClient, telemetry: TelemetrySink):
        self._account = account
        self._telemetry = telemetry

    async def transcribe_audio(
        self, audio_base64: str, language: str | None = None
    ) -> TranscriptionOutcome:
        """
        Transcribes one complete audio payload in a single attempt.

        Args:
            audio_base64: Base64-encoded audio bytes.
            language: Optional language hint passed through to the service.

        Returns:
            TranscriptionOutcome holding either the transcript text or a
            user-facing error message.
        """
        try:
            logger.info(
                "Transcribing audio",
                extra={"language": language, "payload_size": len(audio_base64)},
            )

            user = await self._account.fetch_me()
            is_org_account = user.has_active_organization

            response = await self._account.transcribe_audio(audio_base64, language)

            logger.info("Transcription successful")
        except Exception as e:
            logger.exception("Voice transcription error")
            return TranscriptionOutcome.failed(classify(e))

        self._capture_completed(len(response.text), language, is_org_account)
        return TranscriptionOutcome.succeeded(response.text)

    def _capture_completed(
        self, text_length: int, language: str | None, is_org_account: bool
    ) -> None:
        try:
            self._telemetry.capture_transcription_completed(
                task_id=None,
                text_length=text_length,
                duration_ms=None,
                language=language,
                is_org_account=is_org_account,
            )
        except Exception:
            logger.exception("Failed to capture transcription telemetry")
