import pytest

from transcribe_turbo.analysis.enrich import passthrough
from transcribe_turbo.analysis.statistics import aggregate


def test_sample_statistics(segments) -> None:
    stats = aggregate([passthrough(s) for s in segments])
    assert stats.total_segments == 3
    assert stats.total_words == 41
    assert stats.average_confidence == pytest.approx(0.92, abs=1e-4)
    assert stats.speech_duration == pytest.approx(20.1)
    assert stats.silence_duration == 0.0
    assert stats.speakers_detected == 1


def test_empty_input() -> None:
    stats = aggregate([])
    assert stats.total_segments == 0
    assert stats.total_words == 0
    assert stats.average_confidence == 0.0
    assert stats.speech_duration == 0.0
    assert stats.speakers_detected == 0


def test_speakers_ignore_missing_and_empty_labels(make_segment) -> None:
    segs = [
        make_segment(1, "one", speaker="Host"),
        make_segment(2, "two", speaker="Guest"),
        make_segment(3, "three", speaker="Host"),
        make_segment(4, "four"),
        make_segment(5, "five", speaker=""),
    ]
    assert aggregate(segs).speakers_detected == 2


def test_words_split_on_any_whitespace(make_segment) -> None:
    segs = [make_segment(1, "  several\twords\nhere  "), make_segment(2, "")]
    assert aggregate(segs).total_words == 3


def test_speech_duration_is_last_segment_end(make_segment) -> None:
    segs = [make_segment(1, "a", start=10.0), make_segment(2, "b", start=2.0)]
    assert aggregate(segs).speech_duration == pytest.approx(3.5)
