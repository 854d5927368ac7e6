"""Run configuration model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

OUTPUT_FORMATS = ("srt", "vtt", "txt", "json")
FORMAT_TOKENS = OUTPUT_FORMATS + ("all",)


class RunConfig(BaseModel):
    """Configuration for a single transcription run."""

    input: str
    output_dir: str = "./transcripts"
    model: str = "base"
    political_mode: bool = False
    speaker_detection: bool = False
    confidence: float = Field(default=0.8, ge=0.0, le=1.0)
    format: str = "srt"  # srt | vtt | txt | json | all
    word_timestamps: bool = False
    language: str | None = None
    keywords: str | None = None
    threads: int = Field(default=0, ge=0)
    beam_size: int = Field(default=5, ge=1)
    segments: str | None = None  # engine sidecar file; bypasses Whisper

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        token = value.lower()
        if token not in FORMAT_TOKENS:
            raise ValueError(
                f"Unsupported format: {value} (expected one of {', '.join(FORMAT_TOKENS)})"
            )
        return token
