"""Unit tests for the domain models."""

import pytest
from pydantic import ValidationError

from voice_dictation.domain import (
    Organization,
    RecordingResult,
    TranscriptionOutcome,
    UserInfo,
)


def test_outcome_rejects_both_fields():
    with pytest.raises(ValidationError):
        TranscriptionOutcome(text="hi", error="boom")


def test_outcome_rejects_neither_field():
    with pytest.raises(ValidationError):
        TranscriptionOutcome()


def test_outcome_constructors():
    assert TranscriptionOutcome.succeeded("hi").error is None
    assert TranscriptionOutcome.failed("boom").text is None


def test_successful_recording_result_cannot_carry_error():
    with pytest.raises(ValidationError):
        RecordingResult(success=True, error="oops")


def test_recording_result_is_frozen():
    result = RecordingResult(success=False, error="oops")
    with pytest.raises(ValidationError):
        result.error = "changed"


def test_user_without_uid_is_not_signed_in():
    assert UserInfo().is_signed_in is False
    assert UserInfo(uid="").is_signed_in is False
    assert UserInfo(uid="user-1").is_signed_in is True


def test_active_organization_detection():
    user = UserInfo(
        uid="user-1",
        organizations=[Organization(id="a"), Organization(id="b", active=True)],
    )
    assert user.has_active_organization is True
    assert UserInfo(uid="user-1").has_active_organization is False
