"""Handler for starting a dictation recording."""

import sys

from voice_dictation.domain import (
    MessageRequest,
    MessageType,
    RecorderErrorCode,
    RecorderStartResult,
    RecordingResult,
)
from voice_dictation.exceptions import AuthRequiredError
from voice_dictation.infrastructure.interfaces import (
    AuthProvider,
    MessageHost,
    RecorderBackend,
    TaskHost,
    TelemetrySink,
)
from voice_dictation.logging import setup_logging

logger = setup_logging()

DEPENDENCY_MISSING_MESSAGE = (
    "Your system is missing FFmpeg and the installation instructions "
    "have been sent to the chat"
)
FFMPEG_INSTALL_GUIDANCE = (
    "FFmpeg is required for voice recording but was not found on this system. "
    "Install it with `brew install ffmpeg` on macOS, `sudo apt install ffmpeg` "
    "on Debian or Ubuntu, or `winget install ffmpeg` on Windows, then try "
    "dictation again."
)
SIGN_IN_ACTION = "Sign in"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"

# Older recorder backends only signal a missing encoder through their error text.
_LEGACY_DEPENDENCY_MARKER = "FFmpeg"


def is_dependency_missing(result: RecorderStartResult) -> bool:
    if result.success:
        return False
    if result.error_code == RecorderErrorCode.DEPENDENCY_MISSING:
        return True
    return bool(result.error) and _LEGACY_DEPENDENCY_MARKER in result.error


class RecordingController:
    """Gates recording on sign-in state and interprets the recorder's answer."""

    def __init__(
        self,
        auth: AuthProvider,
        recorder: RecorderBackend,
        message_host: MessageHost,
        task_host: TaskHost,
        telemetry: TelemetrySink,
        platform: str = sys.platform,
    ):
        self._auth = auth
        self._recorder = recorder
        self._message_host = message_host
        self._task_host = task_host
        self._telemetry = telemetry
        self._platform = platform

    async def start_recording(self) -> RecordingResult:
        """
        Starts a dictation recording.

        Never raises. Sign-in problems and unexpected errors are reported to
        the user through a dialog offering to sign in, and come back as a
        failed RecordingResult carrying the error message.

        Returns:
            RecordingResult with the success flag and a user-facing error.
        """
        try:
            return await self._start()
        except Exception as e:
            logger.exception("Error starting recording")
            error_message = str(e) or UNKNOWN_ERROR_MESSAGE
            await self._offer_sign_in(error_message)
            return RecordingResult(success=False, error=error_message)

    async def _start(self) -> RecordingResult:
        user = self._auth.get_info()
        if user is None or not user.is_signed_in:
            raise AuthRequiredError()

        result = await self._recorder.start_recording()

        if result.success:
            self._capture_started()
        elif is_dependency_missing(result):
            logger.warning(
                "Recorder dependency missing, sending installation instructions",
                extra={"error_code": result.error_code},
            )
            await self._task_host.init_task(result.error or FFMPEG_INSTALL_GUIDANCE)
            return RecordingResult(success=False, error=DEPENDENCY_MISSING_MESSAGE)
        else:
            logger.warning(
                "Recorder failed to start",
                extra={"error": result.error, "error_code": result.error_code},
            )

        return RecordingResult(
            success=result.success,
            error="" if result.success else result.error or "",
        )

    def _capture_started(self) -> None:
        try:
            self._telemetry.capture_recording_started(
                self._task_host.current_task_id, self._platform
            )
        except Exception:
            logger.exception("Failed to capture recording telemetry")

    async def _offer_sign_in(self, error_message: str) -> None:
        request = MessageRequest(
            type=MessageType.ERROR,
            message=f"Voice recording error: {error_message}",
            items=[SIGN_IN_ACTION],
        )
        try:
            response = await self._message_host.show_message(request)
            if response.selected_option == SIGN_IN_ACTION:
                await self._auth.create_auth_request()
        except Exception:
            logger.exception("Failed to offer sign-in after recording error")
