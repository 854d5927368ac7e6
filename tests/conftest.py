"""Shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from transcribe_turbo.analysis.keywords import KeywordCatalog
from transcribe_turbo.models.transcript import Segment

SAMPLE_SEGMENTS = [
    {
        "id": 1,
        "start": 0.0,
        "end": 5.2,
        "text": "Thank you for joining us today for this important discussion about healthcare reform.",
        "confidence": 0.95,
        "speaker": "Speaker 1",
    },
    {
        "id": 2,
        "start": 5.2,
        "end": 12.8,
        "text": "We need to ensure that every American has access to affordable healthcare without compromise.",
        "confidence": 0.92,
        "speaker": "Speaker 1",
    },
    {
        "id": 3,
        "start": 12.8,
        "end": 20.1,
        "text": "Our economy depends on healthy workers and families who aren't burdened by medical debt.",
        "confidence": 0.89,
        "speaker": "Speaker 1",
    },
]


@pytest.fixture
def catalog() -> KeywordCatalog:
    return KeywordCatalog()


@pytest.fixture
def segments() -> list[Segment]:
    return [Segment(**s) for s in SAMPLE_SEGMENTS]


def _make_segment(id: int, text: str, *, start: float | None = None, **kwargs) -> Segment:
    start = float(id - 1) * 2.0 if start is None else start
    kwargs.setdefault("confidence", 0.9)
    return Segment(id=id, start=start, end=start + 1.5, text=text, **kwargs)


@pytest.fixture
def make_segment():
    """Factory for segments laid out two seconds apart."""
    return _make_segment


@pytest.fixture
def media_file(tmp_path: Path) -> Path:
    path = tmp_path / "speech.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path


@pytest.fixture
def segments_file(tmp_path: Path) -> Path:
    path = tmp_path / "speech.segments.json"
    path.write_text(
        json.dumps({"language": "en", "segments": SAMPLE_SEGMENTS}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def raw_records() -> list[dict]:
    return [dict(s) for s in SAMPLE_SEGMENTS]
