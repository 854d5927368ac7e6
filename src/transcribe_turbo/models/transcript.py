"""Transcript data models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from transcribe_turbo.models.analysis import PoliticalAnalysis

Sentiment = Literal["positive", "negative", "neutral"]


class Segment(BaseModel):
    """A raw time-coded segment as produced by the speech engine."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: int = Field(ge=1)
    start: float = Field(ge=0.0)
    end: float
    text: str
    confidence: float = Field(ge=0.0, le=1.0)
    speaker: str | None = None

    @model_validator(mode="after")
    def _check_bounds(self) -> Segment:
        if self.end <= self.start:
            raise ValueError(
                f"Segment {self.id}: end ({self.end}) must be after start ({self.start})"
            )
        return self

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def word_count(self) -> int:
        return len(self.text.split())


class EnrichedSegment(Segment):
    """A segment with keyword, sentiment and emphasis annotations.

    When enrichment is disabled the annotation fields stay empty/None.
    """

    political_keywords: list[str] = Field(default_factory=list)
    sentiment: Sentiment | None = None
    emphasis_level: float | None = Field(default=None, ge=0.0, le=1.0)


class TranscriptStatistics(BaseModel):
    """Summary counts over the final segment sequence."""

    model_config = ConfigDict(frozen=True)

    total_segments: int = 0
    total_words: int = 0
    average_confidence: float = 0.0
    speech_duration: float = 0.0
    silence_duration: float = 0.0
    speakers_detected: int = 0


class TranscriptResult(BaseModel):
    """The complete transcript record handed to the format emitter."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    filename: str
    duration: float = 0.0
    language: str = "auto"
    model_used: str = ""
    processing_time: float = 0.0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    segments: list[EnrichedSegment] = Field(default_factory=list)
    statistics: TranscriptStatistics = Field(default_factory=TranscriptStatistics)
    political_analysis: PoliticalAnalysis | None = None
