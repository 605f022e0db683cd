"""Abstract interface for the local audio recorder."""

from abc import ABC, abstractmethod

from voice_dictation.domain.models import RecorderStartResult


class RecorderBackend(ABC):
    """Abstract base class for audio recording backends."""

    @abstractmethod
    async def start_recording(self) -> RecorderStartResult:
        """
        Begins capturing audio.

        Returns:
            RecorderStartResult describing whether capture started. A backend
            that cannot find its encoder reports
            RecorderErrorCode.DEPENDENCY_MISSING with installation guidance
            in the error text.
        """
        pass
