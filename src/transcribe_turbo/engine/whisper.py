"""faster-whisper speech engine (optional ``whisper`` extra)."""

from __future__ import annotations

import math
import time
from pathlib import Path

from transcribe_turbo.engine.base import EngineOutput
from transcribe_turbo.errors import EngineError
from transcribe_turbo.models.config import RunConfig
from transcribe_turbo.models.transcript import Segment
from transcribe_turbo.utils.progress import log_step, log_warning


class WhisperEngine:
    """Transcribe a media file with faster-whisper on CPU."""

    name = "faster-whisper"

    def __init__(self, device: str = "cpu") -> None:
        self.device = device

    def transcribe(self, path: Path, config: RunConfig) -> EngineOutput:
        try:
            from faster_whisper import WhisperModel
        except ImportError:
            raise EngineError(
                "faster-whisper is required for transcription. "
                "Install with: pip install transcribe-turbo[whisper], "
                "or pass --segments with pre-computed segments"
            )

        compute_type = "int8" if self.device == "cpu" else "float16"
        log_step("Transcribe", f"Loading model: {config.model} ({self.device}, {compute_type})")

        if config.speaker_detection:
            log_warning("Speaker detection is not performed; speaker labels stay empty")

        start_time = time.time()
        try:
            model = WhisperModel(
                config.model,
                device=self.device,
                compute_type=compute_type,
                cpu_threads=config.threads,
            )
            segments_gen, info = model.transcribe(
                str(path),
                beam_size=config.beam_size,
                word_timestamps=config.word_timestamps,
                language=config.language,
            )
            segments = self._collect(segments_gen)
        except Exception as e:
            raise EngineError(f"Whisper transcription failed: {e}") from e

        log_step(
            "Transcribe",
            f"{path.name}: {len(segments)} segments in {time.time() - start_time:.1f}s",
        )
        return EngineOutput(segments=segments, language=getattr(info, "language", None))

    @staticmethod
    def _collect(segments_gen) -> list[Segment]:
        segments: list[Segment] = []
        for seg in segments_gen:
            text = seg.text.strip()
            if seg.end <= seg.start:
                log_warning(f"Skipping zero-length segment at {seg.start:.2f}s: '{text[:40]}'")
                continue
            confidence = min(1.0, max(0.0, math.exp(seg.avg_logprob)))
            segments.append(Segment(
                id=len(segments) + 1,
                start=max(0.0, seg.start),
                end=seg.end,
                text=text,
                confidence=confidence,
            ))
        return segments
