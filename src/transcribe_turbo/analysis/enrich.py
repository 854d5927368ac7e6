"""Per-segment enrichment: keyword detection, sentiment and emphasis."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed

from transcribe_turbo.analysis.keywords import KeywordCatalog
from transcribe_turbo.models.transcript import EnrichedSegment, Segment
from transcribe_turbo.utils.progress import log_step

POSITIVE_WORDS = (
    "good", "great", "excellent", "wonderful", "amazing",
    "fantastic", "success", "progress", "improve", "better",
)
NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "horrible", "disaster",
    "failure", "crisis", "problem", "decline", "worse",
)


def detect_keywords(text: str, catalog: KeywordCatalog) -> list[str]:
    """Return every catalog phrase found in ``text``, lowercased, sorted, unique."""
    text_lower = text.lower()
    found = set()
    for _, phrases in catalog.categories():
        for phrase in phrases:
            phrase_lower = phrase.lower()
            if phrase_lower in text_lower:
                found.add(phrase_lower)
    return sorted(found)


def analyze_sentiment(text: str) -> str:
    """Label text positive, negative or neutral by lexicon hits."""
    text_lower = text.lower()
    positive = sum(1 for word in POSITIVE_WORDS if word in text_lower)
    negative = sum(1 for word in NEGATIVE_WORDS if word in text_lower)

    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def calculate_emphasis(text: str) -> float:
    """Score rhetorical intensity from punctuation and capitalization, in [0, 1]."""
    if not text:
        return 0.0

    exclamations = text.count("!")
    questions = text.count("?")
    caps_ratio = sum(1 for c in text if c.isupper()) / len(text)

    return min(1.0, exclamations * 0.3 + caps_ratio * 10.0 + questions * 0.2)


def enrich(segment: Segment, catalog: KeywordCatalog) -> EnrichedSegment:
    """Attach keyword, sentiment and emphasis annotations to one segment."""
    return EnrichedSegment(
        **segment.model_dump(),
        political_keywords=detect_keywords(segment.text, catalog),
        sentiment=analyze_sentiment(segment.text),
        emphasis_level=calculate_emphasis(segment.text),
    )


def passthrough(segment: Segment) -> EnrichedSegment:
    """Wrap a segment with empty annotations (enrichment disabled)."""
    return EnrichedSegment(**segment.model_dump())


def enrich_segments(
    segments: list[Segment],
    catalog: KeywordCatalog,
    *,
    threads: int = 0,
) -> list[EnrichedSegment]:
    """Enrich segments on a thread pool, returning them in input order.

    Work is dispatched per index and collected by the same index, so the
    result order never depends on completion order. ``threads=0`` lets the
    executor pick its default worker count.
    """
    if not segments:
        return []

    results: list[EnrichedSegment | None] = [None] * len(segments)

    with ThreadPoolExecutor(max_workers=threads or None) as executor:
        futures = {
            executor.submit(enrich, segment, catalog): index
            for index, segment in enumerate(segments)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    log_step("Enrich", f"Annotated {len(results)} segments")
    return results  # type: ignore[return-value]
