"""Cross-segment analysis models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QuotableMoment(BaseModel):
    """A segment flagged as highly shareable."""

    model_config = ConfigDict(frozen=True)

    start: float
    end: float
    text: str
    viral_potential: float = Field(ge=0.0)
    context: str


class PolicyMention(BaseModel):
    """A policy area raised in a segment, with the speaker's stance."""

    model_config = ConfigDict(frozen=True)

    policy: str
    stance: str  # support | oppose | neutral
    confidence: float = Field(ge=0.0, le=1.0)
    timestamp: float


class PoliticalAnalysis(BaseModel):
    """Themes, talking points and sentiment derived from enriched segments."""

    model_config = ConfigDict(frozen=True)

    key_themes: list[str] = Field(default_factory=list)
    talking_points: list[str] = Field(default_factory=list, max_length=5)
    quotable_moments: list[QuotableMoment] = Field(default_factory=list)
    sentiment_distribution: dict[str, float] = Field(default_factory=dict)
    policy_mentions: list[PolicyMention] = Field(default_factory=list)
