"""Custom exceptions for the voice dictation core."""

from voice_dictation.domain.models import NetworkErrorCode

SIGN_IN_REQUIRED_MESSAGE = "Please sign in to your account to use Dictation."


class AuthRequiredError(Exception):
    """Raised when dictation is requested without a signed-in account."""

    def __init__(self, message: str = SIGN_IN_REQUIRED_MESSAGE):
        super().__init__(message)


class AccountServiceError(Exception):
    """Raised when a call to the account or transcription API fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class AccountHttpError(AccountServiceError):
    """Raised when the account API answers with a non-success status."""

    def __init__(
        self,
        status: int,
        server_message: str | None = None,
        cause: Exception | None = None,
    ):
        self.status = status
        self.server_message = server_message
        super().__init__(f"Request failed with status code {status}", cause)


class AccountNetworkError(AccountServiceError):
    """Raised when the account API cannot be reached or the transport fails."""

    def __init__(
        self,
        message: str,
        code: NetworkErrorCode | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        super().__init__(message, cause)
