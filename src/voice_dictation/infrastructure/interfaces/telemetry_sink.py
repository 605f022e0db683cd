"""Abstract interface for telemetry emission."""

from abc import ABC, abstractmethod


class TelemetrySink(ABC):
    """
    Abstract base class for telemetry backends.

    Emission is fire-and-forget: callers never wait on delivery and never
    let a failure here change the outcome of the operation being reported.
    """

    @abstractmethod
    def capture_recording_started(self, task_id: str | None, platform: str) -> None:
        pass

    @abstractmethod
    def capture_transcription_completed(
        self,
        task_id: str | None,
        text_length: int | None,
        duration_ms: int | None,
        language: str | None,
        is_org_account: bool,
    ) -> None:
        pass
