"""transcribe-turbo show — summarize a saved JSON transcript."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from transcribe_turbo.models.transcript import TranscriptResult
from transcribe_turbo.utils.io import read_json
from transcribe_turbo.utils.progress import log_error, show_summary

console = Console()


@click.command()
@click.argument("transcript", type=click.Path())
def show_cmd(transcript: str) -> None:
    """Print the summary of a previously written TRANSCRIPT (.json)."""
    path = Path(transcript).resolve()
    if not path.exists():
        log_error(f"Transcript not found: {path}")
        raise SystemExit(1)

    try:
        result = TranscriptResult(**read_json(path))
    except (ValueError, ValidationError) as e:
        log_error(f"Not a transcript record: {path} ({e})")
        raise SystemExit(1)

    show_summary(result, out=console)
