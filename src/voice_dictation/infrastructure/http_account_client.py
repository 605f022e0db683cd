"""httpx implementation of the AccountClient interface."""

import socket
from typing import Any

import httpx
from pydantic import ValidationError

from voice_dictation.domain.models import (
    NetworkErrorCode,
    Organization,
    TranscriptionResponse,
    UserInfo,
)
from voice_dictation.exceptions import (
    AccountHttpError,
    AccountNetworkError,
    AccountServiceError,
)
from voice_dictation.logging import setup_logging

from .interfaces import AccountClient

logger = setup_logging()

USER_PATH = "/api/v1/users/me"
TRANSCRIBE_PATH = "/api/v1/llm/transcribe"


def _exception_chain(exc: BaseException):
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _has_request(exc: httpx.HTTPError) -> bool:
    try:
        exc.request
    except RuntimeError:
        return False
    return True


def _network_code(exc: httpx.HTTPError) -> NetworkErrorCode | None:
    """Derives a socket-level failure code from an httpx exception."""
    if isinstance(exc, httpx.TimeoutException):
        return NetworkErrorCode.ETIMEDOUT
    if not isinstance(exc, httpx.NetworkError):
        return None

    for cause in _exception_chain(exc):
        if isinstance(cause, socket.gaierror):
            return NetworkErrorCode.ENOTFOUND
        if isinstance(cause, ConnectionRefusedError):
            return NetworkErrorCode.ECONNREFUSED
        if isinstance(cause, ConnectionResetError):
            return NetworkErrorCode.ECONNRESET
    return NetworkErrorCode.NETWORK_ERROR


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("message", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def _unwrap(body: Any) -> Any:
    if isinstance(body, dict) and isinstance(body.get("data"), dict):
        return body["data"]
    return body


def _parse_user(body: Any) -> UserInfo:
    data = _unwrap(body)
    if not isinstance(data, dict):
        raise ValueError("user profile is not an object")
    organizations = [
        Organization(
            id=str(org.get("organizationId") or org.get("id") or ""),
            name=org.get("name") or "",
            active=bool(org.get("active", False)),
        )
        for org in data.get("organizations") or []
    ]
    return UserInfo(
        uid=data.get("uid") or data.get("id"),
        email=data.get("email"),
        display_name=data.get("displayName"),
        organizations=organizations,
    )


class HttpAccountClient(AccountClient):
    """Handles account and transcription calls over HTTP."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def __aenter__(self) -> "HttpAccountClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_me(self) -> UserInfo:
        body = await self._request("GET", USER_PATH)
        try:
            user = _parse_user(body)
        except (ValueError, ValidationError) as e:
            logger.exception("Malformed user profile response")
            raise AccountServiceError(f"Malformed user profile: {e}", cause=e) from e
        logger.info(
            "User profile fetched",
            extra={"organization_count": len(user.organizations)},
        )
        return user

    async def transcribe_audio(
        self, audio_base64: str, language: str | None = None
    ) -> TranscriptionResponse:
        payload = {"audioData": audio_base64}
        if language is not None:
            payload["language"] = language

        body = await self._request("POST", TRANSCRIBE_PATH, json=payload)
        try:
            return TranscriptionResponse.model_validate(_unwrap(body))
        except ValidationError as e:
            logger.exception("Malformed transcription response")
            raise AccountServiceError(
                f"Malformed transcription response: {e}", cause=e
            ) from e

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Sends one request and returns the decoded JSON body.

        Raises:
            AccountHttpError: If the response status is not 2xx.
            AccountNetworkError: If the transport fails.
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            code = _network_code(e)
            url = str(e.request.url) if _has_request(e) else path
            message = f"{code.value} {url}" if code else str(e) or type(e).__name__
            logger.exception(
                "Account API request failed",
                extra={"path": path, "code": code.value if code else None},
            )
            raise AccountNetworkError(message, code=code, cause=e) from e

        if not response.is_success:
            server_message = _server_message(response)
            logger.error(
                "Account API returned error status",
                extra={"path": path, "status": response.status_code},
            )
            raise AccountHttpError(response.status_code, server_message)

        try:
            return response.json()
        except ValueError as e:
            logger.exception("Account API returned non-JSON body", extra={"path": path})
            raise AccountServiceError(f"Invalid JSON from {path}", cause=e) from e
