"""Abstract interface for account and transcription API operations."""

from abc import ABC, abstractmethod

from voice_dictation.domain.models import TranscriptionResponse, UserInfo


class AccountClient(ABC):
    """Abstract base class for account API backends."""

    @abstractmethod
    async def fetch_me(self) -> UserInfo:
        """
        Fetches the profile of the authenticated account.

        Raises:
            AccountHttpError: If the API answers with a non-success status.
            AccountNetworkError: If the API cannot be reached.
        """
        pass

    @abstractmethod
    async def transcribe_audio(
        self, audio_base64: str, language: str | None = None
    ) -> TranscriptionResponse:
        """
        Submits a complete audio payload and waits for its transcript.

        Args:
            audio_base64: Base64-encoded audio bytes.
            language: Optional language hint, e.g. "en".

        Returns:
            The transcription response.

        Raises:
            AccountHttpError: If the API answers with a non-success status.
            AccountNetworkError: If the API cannot be reached.
        """
        pass
