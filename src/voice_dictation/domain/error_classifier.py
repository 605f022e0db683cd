"""
Maps a failed transcription request to a single user-facing message.

Rules are evaluated top to bottom and the first match wins. A missing sign-in
resolves before anything else. Transport-level checks follow and look only at
the transport message and network code, never at the response body, so a
server message that happens to mention a socket error still resolves by
status. The final rule matches everything, which makes the table total.
"""

from typing import Callable, NamedTuple

from voice_dictation.exceptions import (
    AccountHttpError,
    AccountNetworkError,
    AuthRequiredError,
)

from .models import ErrorKind, FailureDetails, NetworkErrorCode

NO_INTERNET_MESSAGE = "No internet connection. Please check your network and try again."
CONNECTION_REFUSED_MESSAGE = "Cannot connect to transcription service. Please try again later."
TIMEOUT_MESSAGE = "Connection timed out. Please check your network and try again."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."
REAUTHENTICATE_MESSAGE = "Authentication failed. Please reauthenticate your account."
INSUFFICIENT_CREDITS_MESSAGE = "Insufficient credits for transcription service."
INVALID_AUDIO_MESSAGE = "Invalid audio format. Please try recording again."
INVALID_REQUEST_MESSAGE = "Invalid audio format or request data."
SERVER_ERROR_MESSAGE = "Transcription server error. Please try again later."


class ClassificationRule(NamedTuple):
    """A predicate paired with the message it produces."""

    kind: ErrorKind
    matches: Callable[[FailureDetails], bool]
    render: Callable[[FailureDetails], str]


def describe_failure(error: BaseException | FailureDetails) -> FailureDetails:
    """Normalises any raised failure into the fields the rules read."""
    if isinstance(error, FailureDetails):
        return error
    if isinstance(error, AccountHttpError):
        return FailureDetails(
            message=str(error),
            status=error.status,
            server_message=error.server_message,
        )
    if isinstance(error, AccountNetworkError):
        return FailureDetails(message=str(error), code=error.code)
    if isinstance(error, AuthRequiredError):
        return FailureDetails(message=str(error), auth_required=True)
    return FailureDetails(message=str(error))


def _network(*codes: NetworkErrorCode) -> Callable[[FailureDetails], bool]:
    def matches(failure: FailureDetails) -> bool:
        return any(
            failure.code == code or code.value in failure.message for code in codes
        )

    return matches


def _status(status: int) -> Callable[[FailureDetails], bool]:
    return lambda failure: failure.status == status


def _bad_request_mentioning(
    check: Callable[[str], bool],
) -> Callable[[FailureDetails], bool]:
    def matches(failure: FailureDetails) -> bool:
        if failure.status != 400 or not failure.server_message:
            return False
        return check(failure.server_message.lower())

    return matches


def _mentions_insufficient_funds(text: str) -> bool:
    return "insufficient" in text and ("balance" in text or "credit" in text)


def _mentions_invalid_audio(text: str) -> bool:
    return "invalid" in text and ("audio" in text or "format" in text)


def _mentions_exceeded_limit(text: str) -> bool:
    return "exceeds" in text and "limit" in text


def _fixed(message: str) -> Callable[[FailureDetails], str]:
    return lambda _failure: message


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        ErrorKind.AUTH_REQUIRED,
        lambda failure: failure.auth_required,
        lambda failure: failure.message,
    ),
    ClassificationRule(
        ErrorKind.NETWORK_UNAVAILABLE,
        _network(NetworkErrorCode.ENOTFOUND),
        _fixed(NO_INTERNET_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.CONNECTION_REFUSED,
        _network(NetworkErrorCode.ECONNREFUSED),
        _fixed(CONNECTION_REFUSED_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.TIMEOUT,
        _network(NetworkErrorCode.ETIMEDOUT, NetworkErrorCode.ECONNRESET),
        _fixed(TIMEOUT_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.NETWORK_ERROR,
        _network(NetworkErrorCode.NETWORK_ERROR),
        _fixed(NETWORK_ERROR_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.HTTP_UNAUTHORIZED,
        _status(401),
        _fixed(REAUTHENTICATE_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.INSUFFICIENT_CREDITS,
        _status(402),
        _fixed(INSUFFICIENT_CREDITS_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.INSUFFICIENT_CREDITS,
        _bad_request_mentioning(_mentions_insufficient_funds),
        _fixed(INSUFFICIENT_CREDITS_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.INVALID_AUDIO_FORMAT,
        _bad_request_mentioning(_mentions_invalid_audio),
        _fixed(INVALID_AUDIO_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.LIMIT_EXCEEDED,
        _bad_request_mentioning(_mentions_exceeded_limit),
        lambda failure: failure.server_message,
    ),
    ClassificationRule(
        ErrorKind.GENERIC_BAD_REQUEST,
        _status(400),
        lambda failure: failure.server_message or INVALID_REQUEST_MESSAGE,
    ),
    ClassificationRule(
        ErrorKind.SERVER_ERROR,
        _status(500),
        _fixed(SERVER_ERROR_MESSAGE),
    ),
    ClassificationRule(
        ErrorKind.UNKNOWN_HTTP,
        lambda failure: failure.status is not None,
        lambda failure: (
            f"Transcription failed: {failure.server_message or failure.message}"
        ),
    ),
    ClassificationRule(
        ErrorKind.UNKNOWN_NETWORK,
        lambda _failure: True,
        lambda failure: f"Network error: {failure.message}",
    ),
)


def match_rule(error: BaseException | FailureDetails) -> ClassificationRule:
    """Returns the first rule matching the failure."""
    failure = describe_failure(error)
    return next(rule for rule in CLASSIFICATION_RULES if rule.matches(failure))


def classify(error: BaseException | FailureDetails) -> str:
    """
    Maps a failure to exactly one user-facing message.

    Args:
        error: The exception raised by the account client, or pre-built
            failure details.

    Returns:
        The message of the first matching rule.
    """
    failure = describe_failure(error)
    return match_rule(failure).render(failure)
