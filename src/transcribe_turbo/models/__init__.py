"""Pydantic data models for transcribe-turbo."""

from transcribe_turbo.models.analysis import (
    PolicyMention,
    PoliticalAnalysis,
    QuotableMoment,
)
from transcribe_turbo.models.config import RunConfig
from transcribe_turbo.models.transcript import (
    EnrichedSegment,
    Segment,
    TranscriptResult,
    TranscriptStatistics,
)

__all__ = [
    "EnrichedSegment",
    "PolicyMention",
    "PoliticalAnalysis",
    "QuotableMoment",
    "RunConfig",
    "Segment",
    "TranscriptResult",
    "TranscriptStatistics",
]
