"""
Voice Dictation CLI.

Entry point for transcribing recorded audio files through the dictation core.
"""

import asyncio
import base64
from pathlib import Path

import typer
from ddtrace import patch_all

from voice_dictation.config import AppConfig, load_config
from voice_dictation.dependencies import (
    build_account_client,
    build_telemetry_sink,
    build_transcription_gateway,
)
from voice_dictation.domain import TranscriptionOutcome
from voice_dictation.logging import setup_logging

patch_all()

app = typer.Typer(
    name="voice-dictation",
    help="Voice dictation: transcribe recorded audio with the remote service.",
    no_args_is_help=True,
)


async def _transcribe(
    config: AppConfig, audio_base64: str, language: str | None
) -> TranscriptionOutcome:
    async with build_account_client(config) as account:
        gateway = build_transcription_gateway(
            config, account=account, telemetry=build_telemetry_sink(config)
        )
        return await gateway.transcribe_audio(audio_base64, language)


@app.command()
def transcribe(
    audio_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Recorded audio file"
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Language hint, e.g. 'en'"
    ),
) -> None:
    """Transcribe an audio file and print the text."""
    config = load_config()
    setup_logging(config.logging.level)

    audio_base64 = base64.b64encode(audio_file.read_bytes()).decode("ascii")
    outcome = asyncio.run(_transcribe(config, audio_base64, language))

    if outcome.error is not None:
        typer.echo(outcome.error, err=True)
        raise typer.Exit(code=1)
    typer.echo(outcome.text)


@app.command("check-config")
def check_config() -> None:
    """Print the effective configuration without revealing the API token."""
    config = load_config()
    api = config.account_api
    token = "set" if api.api_token else "<not set>"

    typer.echo(f"API base URL:   {api.base_url}")
    typer.echo(f"API token:      {token}")
    typer.echo(f"Timeout:        {api.timeout_seconds}s")
    typer.echo(f"Telemetry:      {'enabled' if config.telemetry.enabled else 'disabled'}")
    typer.echo(f"Log level:      {config.logging.level}")


if __name__ == "__main__":
    app()
