"""Speech engine protocol and selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from transcribe_turbo.models.config import RunConfig
from transcribe_turbo.models.transcript import Segment


@dataclass
class EngineOutput:
    """Raw segments plus whatever the engine reports about the audio."""

    segments: list[Segment] = field(default_factory=list)
    language: str | None = None


class SpeechEngine(Protocol):
    """Protocol that every speech-to-text adapter implements."""

    name: str

    def transcribe(self, path: Path, config: RunConfig) -> EngineOutput: ...


def select_engine(config: RunConfig) -> SpeechEngine:
    """Use the sidecar reader when segments are supplied, otherwise Whisper."""
    if config.segments:
        from transcribe_turbo.engine.sidecar import SidecarEngine
        return SidecarEngine(Path(config.segments))

    from transcribe_turbo.engine.whisper import WhisperEngine
    return WhisperEngine()
