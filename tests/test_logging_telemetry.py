"""Unit tests for the structured-log telemetry sink."""

import logging

from voice_dictation.infrastructure import LoggingTelemetrySink


def _telemetry_records(caplog):
    return [record for record in caplog.records if record.getMessage() == "Telemetry event"]


def test_recording_started_event(caplog):
    caplog.set_level(logging.INFO)

    LoggingTelemetrySink().capture_recording_started("task-1", "linux")

    (record,) = _telemetry_records(caplog)
    assert record.event == "voice.recording_started"
    assert record.task_id == "task-1"
    assert record.platform == "linux"


def test_transcription_completed_event(caplog):
    caplog.set_level(logging.INFO)

    LoggingTelemetrySink().capture_transcription_completed(
        task_id=None,
        text_length=11,
        duration_ms=None,
        language="en",
        is_org_account=True,
    )

    (record,) = _telemetry_records(caplog)
    assert record.event == "voice.transcription_completed"
    assert record.text_length == 11
    assert record.language == "en"
    assert record.is_org_account is True


def test_disabled_sink_emits_nothing(caplog):
    caplog.set_level(logging.INFO)

    sink = LoggingTelemetrySink(enabled=False)
    sink.capture_recording_started("task-1", "linux")
    sink.capture_transcription_completed(None, 3, None, None, False)

    assert _telemetry_records(caplog) == []
