"""Handler exports."""

from .recording_controller import RecordingController
from .transcription_gateway import TranscriptionGateway

__all__ = ["RecordingController", "TranscriptionGateway"]
