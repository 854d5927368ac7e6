"""Cross-segment thematic analysis."""

from __future__ import annotations

from collections import Counter

from transcribe_turbo.analysis.keywords import CATEGORY_TITLES, KeywordCatalog
from transcribe_turbo.models.analysis import (
    PolicyMention,
    PoliticalAnalysis,
    QuotableMoment,
)
from transcribe_turbo.models.transcript import EnrichedSegment
from transcribe_turbo.utils.progress import log_step

MIN_THEME_COUNT = 2
MAX_TALKING_POINTS = 5
QUOTABLE_EMPHASIS = 0.3

STANCES = {
    "positive": "support",
    "negative": "oppose",
    "neutral": "neutral",
}


def key_themes(segments: list[EnrichedSegment]) -> list[str]:
    """Keywords appearing in at least two segments, alphabetically."""
    counts = Counter(kw for s in segments for kw in s.political_keywords)
    return sorted(kw for kw, count in counts.items() if count >= MIN_THEME_COUNT)


def talking_points(segments: list[EnrichedSegment]) -> list[str]:
    """Texts of keyword-dense segments (more than two keywords), first five."""
    dense = [s.text for s in segments if len(s.political_keywords) > 2]
    return dense[:MAX_TALKING_POINTS]


def quotable_moments(segments: list[EnrichedSegment]) -> list[QuotableMoment]:
    """Segments with strong emphasis or several keywords, in segment order."""
    moments = []
    for s in segments:
        emphasis = s.emphasis_level or 0.0
        if emphasis > QUOTABLE_EMPHASIS or len(s.political_keywords) > 1:
            moments.append(QuotableMoment(
                start=s.start,
                end=s.end,
                text=s.text,
                viral_potential=emphasis + 0.1 * len(s.political_keywords),
                context=f"Political discussion at {s.start:.1f}s",
            ))
    return moments


def sentiment_distribution(segments: list[EnrichedSegment]) -> dict[str, float]:
    """Fraction of labelled segments per sentiment; empty if none are labelled."""
    counts = Counter(s.sentiment for s in segments if s.sentiment is not None)
    labelled = sum(counts.values())
    if labelled == 0:
        return {}
    return {label: count / labelled for label, count in counts.items()}


def detect_policy_mentions(
    segments: list[EnrichedSegment],
    catalog: KeywordCatalog,
) -> list[PolicyMention]:
    """Record each topical category raised in a segment, with a stance.

    The general category is not a policy area and is skipped.
    """
    mentions = []
    for s in segments:
        found = set(s.political_keywords)
        if not found:
            continue
        for name, phrases in catalog.categories():
            if name == "general":
                continue
            matched = found.intersection(p.lower() for p in phrases)
            if not matched:
                continue
            mentions.append(PolicyMention(
                policy=CATEGORY_TITLES[name],
                stance=STANCES.get(s.sentiment or "neutral", "neutral"),
                confidence=min(1.0, 0.5 + 0.1 * len(matched)),
                timestamp=s.start,
            ))
    return mentions


def analyze(
    segments: list[EnrichedSegment],
    catalog: KeywordCatalog,
) -> PoliticalAnalysis:
    """Derive themes, talking points, quotes, sentiment and policy mentions."""
    analysis = PoliticalAnalysis(
        key_themes=key_themes(segments),
        talking_points=talking_points(segments),
        quotable_moments=quotable_moments(segments),
        sentiment_distribution=sentiment_distribution(segments),
        policy_mentions=detect_policy_mentions(segments, catalog),
    )
    log_step(
        "Analyze",
        f"{len(analysis.key_themes)} themes, "
        f"{len(analysis.talking_points)} talking points, "
        f"{len(analysis.quotable_moments)} quotable moments",
    )
    return analysis
