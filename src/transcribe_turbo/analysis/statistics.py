"""Summary statistics over the final segment sequence."""

from __future__ import annotations

from transcribe_turbo.models.transcript import Segment, TranscriptStatistics


def aggregate(segments: list[Segment]) -> TranscriptStatistics:
    """Reduce segments to counts, mean confidence and speaker total.

    Silence is not measured from inter-segment gaps; it is always 0.0.
    """
    total_segments = len(segments)
    if total_segments == 0:
        return TranscriptStatistics()

    total_words = sum(s.word_count for s in segments)
    average_confidence = sum(s.confidence for s in segments) / total_segments
    speakers = {s.speaker for s in segments if s.speaker}

    return TranscriptStatistics(
        total_segments=total_segments,
        total_words=total_words,
        average_confidence=average_confidence,
        speech_duration=segments[-1].end,
        silence_duration=0.0,
        speakers_detected=len(speakers),
    )
