"""Domain models for the voice dictation core."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Organization(BaseModel, frozen=True):
    """A single organization membership of an account."""

    id: str
    name: str = ""
    active: bool = False


class UserInfo(BaseModel, frozen=True):
    """Profile of the account the dictation core acts on behalf of."""

    uid: str | None = None
    email: str | None = None
    display_name: str | None = None
    organizations: list[Organization] = Field(default_factory=list)

    @property
    def is_signed_in(self) -> bool:
        return bool(self.uid)

    @property
    def has_active_organization(self) -> bool:
        return any(org.active for org in self.organizations)


class RecordingResult(BaseModel, frozen=True):
    """Outcome of a single start-recording request."""

    success: bool
    error: str = ""

    @model_validator(mode="after")
    def _error_only_on_failure(self) -> "RecordingResult":
        if self.success and self.error:
            raise ValueError("a successful recording result cannot carry an error")
        return self


class RecorderErrorCode(str, Enum):
    """Failure codes a recorder backend may attach to a failed start."""

    DEPENDENCY_MISSING = "dependency_missing"


class RecorderStartResult(BaseModel, frozen=True):
    """What a recorder backend reports after being asked to start."""

    success: bool
    error: str | None = None
    error_code: RecorderErrorCode | None = None


class TranscriptionResponse(BaseModel, frozen=True):
    """Body of a successful transcription API response."""

    text: str


class TranscriptionOutcome(BaseModel, frozen=True):
    """Either the transcript text or a user-facing error, never both."""

    text: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one_field(self) -> "TranscriptionOutcome":
        if (self.text is None) == (self.error is None):
            raise ValueError("exactly one of text or error must be set")
        return self

    @classmethod
    def succeeded(cls, text: str) -> "TranscriptionOutcome":
        return cls(text=text)

    @classmethod
    def failed(cls, error: str) -> "TranscriptionOutcome":
        return cls(error=error)


class MessageType(str, Enum):
    """Severity of a message shown to the user by the host."""

    ERROR = "error"


class MessageRequest(BaseModel, frozen=True):
    """A message the host should display, with optional action buttons."""

    type: MessageType
    message: str
    items: list[str] = Field(default_factory=list)


class MessageResponse(BaseModel, frozen=True):
    """The user's reaction to a displayed message."""

    selected_option: str | None = None


class ErrorKind(str, Enum):
    """Categories of dictation failure, used to select a user-facing message."""

    AUTH_REQUIRED = "auth_required"
    NETWORK_UNAVAILABLE = "network_unavailable"
    CONNECTION_REFUSED = "connection_refused"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    HTTP_UNAUTHORIZED = "http_unauthorized"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    INVALID_AUDIO_FORMAT = "invalid_audio_format"
    LIMIT_EXCEEDED = "limit_exceeded"
    GENERIC_BAD_REQUEST = "generic_bad_request"
    SERVER_ERROR = "server_error"
    UNKNOWN_HTTP = "unknown_http"
    UNKNOWN_NETWORK = "unknown_network"


class NetworkErrorCode(str, Enum):
    """Transport failure codes, named after the socket errors they stand for."""

    ENOTFOUND = "ENOTFOUND"
    ECONNREFUSED = "ECONNREFUSED"
    ETIMEDOUT = "ETIMEDOUT"
    ECONNRESET = "ECONNRESET"
    NETWORK_ERROR = "Network Error"


class FailureDetails(BaseModel, frozen=True):
    """Normalised view of a failed request, as read by the error classifier."""

    message: str
    status: int | None = None
    server_message: str | None = None
    code: NetworkErrorCode | None = None
    auth_required: bool = False
