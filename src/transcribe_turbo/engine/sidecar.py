"""Read pre-computed engine segments from a JSON or YAML sidecar file."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from transcribe_turbo.engine.base import EngineOutput
from transcribe_turbo.errors import EngineError, InputNotFoundError
from transcribe_turbo.models.config import RunConfig
from transcribe_turbo.models.transcript import Segment
from transcribe_turbo.utils.io import load_yaml, read_json
from transcribe_turbo.utils.progress import log_step


class SidecarEngine:
    """Replays segments an external engine already produced.

    Accepts either a bare list of segment records or an object with a
    ``segments`` list and an optional ``language``.
    """

    name = "sidecar"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def transcribe(self, path: Path, config: RunConfig) -> EngineOutput:
        if not self.path.exists():
            raise InputNotFoundError(f"Segments file not found: {self.path}")

        try:
            if self.path.suffix.lower() in (".yaml", ".yml"):
                data = load_yaml(self.path)
            else:
                data = read_json(self.path)
        except (OSError, ValueError, YAMLError) as e:
            raise EngineError(f"Failed to read segments file {self.path}: {e}") from e

        language = None
        if isinstance(data, dict):
            language = data.get("language")
            data = data.get("segments", [])
        if not isinstance(data, list):
            raise EngineError(f"Segments file {self.path} holds no segment list")

        try:
            segments = [Segment(**dict(item)) for item in data]
        except (TypeError, ValueError, ValidationError) as e:
            raise EngineError(f"Malformed segment in {self.path}: {e}") from e

        log_step("Engine", f"Loaded {len(segments)} segments for {path.name}")
        return EngineOutput(segments=segments, language=language)
