"""Voice dictation core: recording start, remote transcription and error classification."""

from voice_dictation.domain import (
    RecordingResult,
    TranscriptionOutcome,
    UserInfo,
    classify,
)
from voice_dictation.handlers import RecordingController, TranscriptionGateway
from voice_dictation.logging import setup_logging

__all__ = [
    "setup_logging",
    "RecordingController",
    "TranscriptionGateway",
    "RecordingResult",
    "TranscriptionOutcome",
    "UserInfo",
    "classify",
]
