"""Linear transcription pipeline: engine → enrich → aggregate → analyze → emit."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from transcribe_turbo.analysis.enrich import enrich_segments, passthrough
from transcribe_turbo.analysis.keywords import KeywordCatalog, build_catalog
from transcribe_turbo.analysis.statistics import aggregate
from transcribe_turbo.analysis.themes import analyze
from transcribe_turbo.engine.base import SpeechEngine, select_engine
from transcribe_turbo.errors import (
    ConfigurationError,
    DirectoryCreateError,
    InputNotFoundError,
)
from transcribe_turbo.models.config import RunConfig
from transcribe_turbo.models.transcript import Segment, TranscriptResult
from transcribe_turbo.output.formats import emit, resolve_formats
from transcribe_turbo.utils.io import read_yaml
from transcribe_turbo.utils.progress import log, log_step, log_warning


def load_config(config_path: Path | str | None, overrides: dict[str, Any]) -> RunConfig:
    """Build a RunConfig from an optional YAML file plus explicit overrides.

    Overrides whose value is None are ignored, so unset CLI flags never mask
    values from the file. A bad format token raises UnsupportedFormatError.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise InputNotFoundError(f"Config file not found: {path}")
        try:
            data.update(read_yaml(path))
        except (OSError, TypeError, ValueError, YAMLError) as e:
            raise ConfigurationError(f"Failed to read config file {path}: {e}") from e

    data.update({k: v for k, v in overrides.items() if v is not None})

    if isinstance(data.get("format"), str):
        resolve_formats(data["format"])

    try:
        return RunConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid run configuration: {e}") from e


def build_transcript(
    filename: str,
    segments: list[Segment],
    *,
    catalog: KeywordCatalog | None = None,
    political_mode: bool = False,
    language: str | None = None,
    model: str = "",
    threads: int = 0,
) -> TranscriptResult:
    """Assemble the transcript record from raw engine segments.

    Enrichment and thematic analysis run only in political mode; statistics
    always run over the final segment sequence.
    """
    if catalog is None:
        catalog = KeywordCatalog()

    if political_mode:
        log_step("Enrich", "Enhancing with political analysis")
        enriched = enrich_segments(segments, catalog, threads=threads)
    else:
        enriched = [passthrough(s) for s in segments]

    statistics = aggregate(enriched)
    log_step(
        "Statistics",
        f"{statistics.total_segments} segments, {statistics.total_words} words",
    )

    political_analysis = None
    if political_mode:
        political_analysis = analyze(enriched, catalog)

    return TranscriptResult(
        filename=filename,
        duration=enriched[-1].end if enriched else 0.0,
        language=language or "auto",
        model_used=model,
        segments=enriched,
        statistics=statistics,
        political_analysis=political_analysis,
    )


def run_transcription(
    config: RunConfig,
    *,
    engine: SpeechEngine | None = None,
) -> tuple[TranscriptResult, list[Path]]:
    """Run the whole pipeline for one input and write the requested formats.

    Returns the transcript (with processing time set) and the written paths.
    """
    input_path = Path(config.input)
    log(f"Starting transcription of: {input_path}")
    start_time = time.time()

    if not input_path.exists():
        raise InputNotFoundError(f"Input file not found: {input_path}")

    # Reject a bad format token before doing any work
    resolve_formats(config.format)

    output_dir = Path(config.output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(
            f"Failed to create output directory {output_dir}: {e}"
        ) from e

    catalog = build_catalog(config.keywords) if config.political_mode else None

    engine = engine or select_engine(config)
    output = engine.transcribe(input_path, config)

    low_confidence = [s for s in output.segments if s.confidence < config.confidence]
    if low_confidence:
        log_warning(
            f"{len(low_confidence)} segment(s) below confidence threshold "
            f"{config.confidence:.2f}"
        )

    transcript = build_transcript(
        input_path.name,
        output.segments,
        catalog=catalog,
        political_mode=config.political_mode,
        language=config.language or output.language,
        model=config.model,
        threads=config.threads,
    )

    processing_time = time.time() - start_time
    transcript = transcript.model_copy(update={"processing_time": processing_time})
    log(f"Transcription completed in {processing_time:.2f}s")

    written = emit(transcript, config.format, output_dir, input_path.stem)
    return transcript, written
