"""Deterministic SRT / WebVTT / plain-text / JSON serialization."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from transcribe_turbo.errors import (
    OutputWriteError,
    SerializationError,
    UnsupportedFormatError,
)
from transcribe_turbo.models.config import OUTPUT_FORMATS
from transcribe_turbo.models.transcript import TranscriptResult
from transcribe_turbo.utils.io import write_atomic
from transcribe_turbo.utils.progress import log_success

SUPPORTED_FORMATS = OUTPUT_FORMATS
ALL_FORMATS = "all"


def _split_time(seconds: float) -> tuple[int, int, int, int]:
    """Split seconds into (hours, minutes, seconds, milliseconds), flooring each.

    The value is scaled through its shortest decimal repr so that e.g. 3725.045
    keeps its 45 ms instead of losing one to binary rounding. Hours do not wrap.
    """
    total_ms = int(Decimal(repr(float(seconds))) * 1000)
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    secs, millis = divmod(rem, 1000)
    return hours, minutes, secs, millis


def format_time_srt(seconds: float) -> str:
    """Format seconds as HH:MM:SS,mmm."""
    h, m, s, ms = _split_time(seconds)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def format_time_vtt(seconds: float) -> str:
    """Format seconds as HH:MM:SS.mmm."""
    h, m, s, ms = _split_time(seconds)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"


def render_srt(result: TranscriptResult) -> str:
    blocks = []
    for seg in result.segments:
        blocks.append(
            f"{seg.id}\n"
            f"{format_time_srt(seg.start)} --> {format_time_srt(seg.end)}\n"
            f"{seg.text}\n\n"
        )
    return "".join(blocks)


def render_vtt(result: TranscriptResult) -> str:
    parts = ["WEBVTT\n\n"]
    for seg in result.segments:
        parts.append(
            f"{format_time_vtt(seg.start)} --> {format_time_vtt(seg.end)}\n"
            f"{seg.text}\n\n"
        )
    return "".join(parts)


def render_txt(result: TranscriptResult) -> str:
    return " ".join(seg.text for seg in result.segments)


def render_json(result: TranscriptResult) -> str:
    """Pretty-printed structured record with stable snake_case field names."""
    try:
        return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize transcript: {e}") from e


RENDERERS = {
    "srt": render_srt,
    "vtt": render_vtt,
    "txt": render_txt,
    "json": render_json,
}


def resolve_formats(token: str) -> list[str]:
    """Expand a format token (srt|vtt|txt|json|all) into concrete formats."""
    fmt = token.lower()
    if fmt == ALL_FORMATS:
        return list(SUPPORTED_FORMATS)
    if fmt not in RENDERERS:
        raise UnsupportedFormatError(f"Unsupported format: {token}")
    return [fmt]


def emit(
    result: TranscriptResult,
    fmt: str,
    output_dir: Path | str,
    base_name: str,
) -> list[Path]:
    """Write ``{base_name}.{ext}`` for each requested format.

    Every format is rendered before anything is written, and the first write
    failure aborts the remaining ones.
    """
    formats = resolve_formats(fmt)
    output_dir = Path(output_dir)

    rendered = [(f, RENDERERS[f](result)) for f in formats]

    written: list[Path] = []
    for ext, content in rendered:
        output_path = output_dir / f"{base_name}.{ext}"
        try:
            write_atomic(output_path, content)
        except OSError as e:
            raise OutputWriteError(
                f"Failed to write {ext.upper()} file {output_path}: {e}"
            ) from e
        log_success(f"Saved {ext.upper()}: {output_path}")
        written.append(output_path)

    return written
