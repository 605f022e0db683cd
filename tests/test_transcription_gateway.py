"""Unit tests for the TranscriptionGateway."""

import pytest

from voice_dictation.domain import (
    NetworkErrorCode,
    Organization,
    TranscriptionOutcome,
    UserInfo,
)
from voice_dictation.domain.error_classifier import (
    NO_INTERNET_MESSAGE,
    REAUTHENTICATE_MESSAGE,
    SERVER_ERROR_MESSAGE,
)
from voice_dictation.exceptions import AccountHttpError, AccountNetworkError
from voice_dictation.handlers import TranscriptionGateway

AUDIO = "UklGRiQAAABXQVZFZm10IBAAAAABAAEAgD4AAAB9AAACABAAZGF0YQAAAAA="


@pytest.fixture
def gateway(account, telemetry):
    return TranscriptionGateway(account=account, telemetry=telemetry)


@pytest.mark.asyncio
class TestTranscribeAudio:
    """Test transcription requests and their outcomes."""

    async def test_success_returns_text_and_emits_telemetry(
        self, gateway, account, telemetry
    ):
        outcome = await gateway.transcribe_audio(AUDIO, "en")

        assert outcome == TranscriptionOutcome(text="hello world")
        assert outcome.error is None
        account.transcribe_audio.assert_awaited_once_with(AUDIO, "en")
        telemetry.capture_transcription_completed.assert_called_once_with(
            task_id=None,
            text_length=len("hello world"),
            duration_ms=None,
            language="en",
            is_org_account=True,
        )

    async def test_inactive_organizations_are_not_org_accounts(
        self, gateway, account, telemetry
    ):
        account.fetch_me.return_value = UserInfo(
            uid="user-1", organizations=[Organization(id="org-1", active=False)]
        )

        await gateway.transcribe_audio(AUDIO)

        kwargs = telemetry.capture_transcription_completed.call_args.kwargs
        assert kwargs["is_org_account"] is False
        assert kwargs["language"] is None

    async def test_telemetry_never_receives_audio_or_text(self, gateway, telemetry):
        await gateway.transcribe_audio(AUDIO, "en")

        call = telemetry.capture_transcription_completed.call_args
        values = list(call.args) + list(call.kwargs.values())
        assert AUDIO not in values
        assert "hello world" not in values

    async def test_empty_transcript_is_still_text(self, gateway, account):
        account.transcribe_audio.return_value = account.transcribe_audio.return_value.model_copy(
            update={"text": ""}
        )

        outcome = await gateway.transcribe_audio(AUDIO)

        assert outcome.text == ""
        assert outcome.error is None

    async def test_profile_failure_is_classified(self, gateway, account):
        account.fetch_me.side_effect = AccountHttpError(401, "token expired")

        outcome = await gateway.transcribe_audio(AUDIO)

        assert outcome == TranscriptionOutcome(error=REAUTHENTICATE_MESSAGE)
        account.transcribe_audio.assert_not_called()

    async def test_http_failure_is_classified(self, gateway, account, telemetry):
        account.transcribe_audio.side_effect = AccountHttpError(500, "boom")

        outcome = await gateway.transcribe_audio(AUDIO)

        assert outcome.text is None
        assert outcome.error == SERVER_ERROR_MESSAGE
        telemetry.capture_transcription_completed.assert_not_called()

    async def test_limit_message_is_verbatim(self, gateway, account):
        account.transcribe_audio.side_effect = AccountHttpError(
            400, "Request exceeds 10MB limit"
        )

        outcome = await gateway.transcribe_audio(AUDIO)

        assert outcome.error == "Request exceeds 10MB limit"

    async def test_network_failure_is_classified(self, gateway, account):
        account.transcribe_audio.side_effect = AccountNetworkError(
            "ENOTFOUND https://api.example.com/api/v1/llm/transcribe",
            code=NetworkErrorCode.ENOTFOUND,
        )

        outcome = await gateway.transcribe_audio(AUDIO)

        assert outcome.error == NO_INTERNET_MESSAGE

    async def test_unexpected_exception_falls_back_to_raw_message(self, gateway, account):
        account.transcribe_audio.side_effect = ValueError("bad payload")

        outcome = await gateway.transcribe_audio(AUDIO)

        assert outcome.error == "Network error: bad payload"

    async def test_transcription_is_attempted_once(self, gateway, account):
        account.transcribe_audio.side_effect = AccountHttpError(503)

        await gateway.transcribe_audio(AUDIO)

        assert account.transcribe_audio.await_count == 1

    async def test_telemetry_failure_is_swallowed(self, gateway, telemetry):
        telemetry.capture_transcription_completed.side_effect = RuntimeError("sink down")

        outcome = await gateway.transcribe_audio(AUDIO, "en")

        assert outcome == TranscriptionOutcome(text="hello world")
