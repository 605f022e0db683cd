"""Domain layer exports."""

from .models import (
    ErrorKind,
    FailureDetails,
    MessageRequest,
    MessageResponse,
    MessageType,
    NetworkErrorCode,
    Organization,
    RecorderErrorCode,
    RecorderStartResult,
    RecordingResult,
    TranscriptionOutcome,
    TranscriptionResponse,
    UserInfo,
)
from .error_classifier import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    classify,
    describe_failure,
    match_rule,
)

__all__ = [
    "ErrorKind",
    "FailureDetails",
    "MessageRequest",
    "MessageResponse",
    "MessageType",
    "NetworkErrorCode",
    "Organization",
    "RecorderErrorCode",
    "RecorderStartResult",
    "RecordingResult",
    "TranscriptionOutcome",
    "TranscriptionResponse",
    "UserInfo",
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "classify",
    "describe_failure",
    "match_rule",
]
