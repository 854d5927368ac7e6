"""transcribe-turbo run — transcribe, enrich and export one file."""

from __future__ import annotations

import click
from rich.console import Console

from transcribe_turbo.errors import TranscribeTurboError
from transcribe_turbo.utils.progress import log_error, show_summary

console = Console()


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path())
@click.option("--config", "-c", "config_path", default=None, type=click.Path(),
              help="YAML run configuration (flags override its values)")
@click.option("--output", "-o", "output_dir", default=None, type=click.Path(),
              help="Output directory [default: ./transcripts]")
@click.option("--model", "-m", default=None, help="Whisper model size [default: base]")
@click.option("--political-mode", is_flag=True, default=None,
              help="Enable political keyword detection and analysis")
@click.option("--speaker-detection", is_flag=True, default=None,
              help="Request speaker labels from the engine")
@click.option("--confidence", default=None, type=float,
              help="Confidence threshold (0.0-1.0) for low-confidence warnings")
@click.option("--format", "-f", "fmt", default=None,
              help="Output format: srt, vtt, txt, json, all [default: srt]")
@click.option("--word-timestamps", is_flag=True, default=None,
              help="Enable word-level timestamps in the engine")
@click.option("--language", "-l", default=None,
              help="Language code (auto-detect if not specified)")
@click.option("--keywords", default=None, type=click.Path(),
              help="Custom keywords file (one phrase per line)")
@click.option("--threads", default=None, type=int,
              help="Worker threads for enrichment (0 = default)")
@click.option("--beam-size", default=None, type=int, help="Beam size for search [default: 5]")
@click.option("--segments", default=None, type=click.Path(),
              help="Pre-computed engine segments (JSON/YAML) instead of running Whisper")
def run_cmd(
    input_path: str,
    config_path: str | None,
    output_dir: str | None,
    model: str | None,
    political_mode: bool | None,
    speaker_detection: bool | None,
    confidence: float | None,
    fmt: str | None,
    word_timestamps: bool | None,
    language: str | None,
    keywords: str | None,
    threads: int | None,
    beam_size: int | None,
    segments: str | None,
) -> None:
    """Transcribe INPUT and write captions/transcripts."""
    from transcribe_turbo.pipeline.orchestrator import load_config, run_transcription

    overrides = {
        "input": input_path,
        "output_dir": output_dir,
        "model": model,
        "political_mode": political_mode,
        "speaker_detection": speaker_detection,
        "confidence": confidence,
        "format": fmt,
        "word_timestamps": word_timestamps,
        "language": language,
        "keywords": keywords,
        "threads": threads,
        "beam_size": beam_size,
        "segments": segments,
    }

    try:
        config = load_config(config_path, overrides)
        transcript, _ = run_transcription(config)
    except TranscribeTurboError as e:
        log_error(f"Transcription failed: {e}")
        raise SystemExit(1)

    show_summary(transcript, out=console)
