"""Categorized political keyword catalog."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from transcribe_turbo.errors import KeywordFileError
from transcribe_turbo.utils.progress import log_step, log_warning

CATEGORIES = (
    "economy",
    "healthcare",
    "education",
    "environment",
    "immigration",
    "foreign_policy",
    "social_issues",
    "general",
)

CATEGORY_TITLES = {
    "economy": "Economy",
    "healthcare": "Healthcare",
    "education": "Education",
    "environment": "Environment",
    "immigration": "Immigration",
    "foreign_policy": "Foreign Policy",
    "social_issues": "Social Issues",
    "general": "General",
}


@dataclass(frozen=True)
class KeywordCatalog:
    """Eight fixed keyword categories of lowercase phrases.

    ``general`` is the extension point for caller-supplied phrases; those keep
    their on-disk case and are matched case-insensitively.
    """

    economy: tuple[str, ...] = (
        "economy", "jobs", "employment", "unemployment", "inflation", "recession",
        "growth", "gdp", "budget", "deficit", "debt", "tax", "taxes", "spending",
        "investment", "business", "trade", "tariff", "minimum wage", "income",
        "poverty", "wealth", "inequality", "stimulus", "bailout", "economic",
    )
    healthcare: tuple[str, ...] = (
        "healthcare", "health care", "medicine", "hospital", "insurance", "medicare",
        "medicaid", "affordable care act", "obamacare", "prescription", "drugs",
        "medical", "doctor", "nurse", "pandemic", "covid", "vaccine", "public health",
        "mental health", "addiction", "opioid", "pharmaceutical", "coverage",
    )
    education: tuple[str, ...] = (
        "education", "school", "schools", "university", "college", "student", "students",
        "teacher", "teachers", "learning", "curriculum", "funding", "budget",
        "graduation", "literacy", "achievement", "standardized testing", "charter",
        "public education", "higher education", "student loan", "debt", "tuition",
    )
    environment: tuple[str, ...] = (
        "environment", "climate", "global warming", "carbon", "emissions", "pollution",
        "clean energy", "renewable", "solar", "wind", "nuclear", "fossil fuel",
        "oil", "gas", "coal", "green", "sustainability", "conservation", "epa",
        "paris agreement", "greenhouse gas", "environmental",
    )
    immigration: tuple[str, ...] = (
        "immigration", "immigrant", "immigrants", "border", "deportation", "asylum",
        "refugee", "daca", "dreamers", "citizenship", "naturalization", "visa",
        "legal immigration", "illegal immigration", "sanctuary", "wall", "barrier",
        "ice", "customs", "border patrol", "comprehensive reform",
    )
    foreign_policy: tuple[str, ...] = (
        "foreign policy", "international", "diplomacy", "war", "peace", "military",
        "defense", "nato", "alliance", "treaty", "sanctions", "trade war",
        "china", "russia", "iran", "israel", "palestine", "afghanistan", "iraq",
        "syria", "north korea", "terrorism", "security", "intelligence",
    )
    social_issues: tuple[str, ...] = (
        "abortion", "reproductive rights", "gun control", "second amendment", "firearms",
        "marriage equality", "lgbtq", "transgender", "discrimination", "civil rights",
        "racism", "police", "criminal justice", "prison", "reform", "voting rights",
        "gerrymandering", "supreme court", "constitution", "amendment",
    )
    general: tuple[str, ...] = (
        "america", "american", "democracy", "freedom", "liberty", "justice", "equality",
        "opportunity", "progress", "change", "reform", "conservative", "liberal",
        "bipartisan", "compromise", "leadership", "values", "future", "generation",
        "community", "family", "working families", "middle class", "seniors",
    )

    def categories(self) -> list[tuple[str, tuple[str, ...]]]:
        """Return (name, phrases) pairs in catalog order."""
        return [(name, getattr(self, name)) for name in CATEGORIES]

    def with_custom(self, phrases: list[str]) -> KeywordCatalog:
        """Return a copy with ``phrases`` appended to the general category."""
        if not phrases:
            return self
        return replace(self, general=self.general + tuple(phrases))

    def __len__(self) -> int:
        return sum(len(phrases) for _, phrases in self.categories())


def parse_keywords(content: str) -> list[str]:
    """Parse a keyword file body: one phrase per line, ``#`` lines are comments."""
    phrases = []
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            phrases.append(line)
    return phrases


def load_custom_keywords(path: Path | str) -> list[str]:
    """Read custom phrases from a plain-text keyword file."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise KeywordFileError(f"Failed to read keywords file {path}: {e}") from e
    return parse_keywords(content)


def build_catalog(keywords_path: Path | str | None = None) -> KeywordCatalog:
    """Build the catalog, appending custom phrases when a keyword file is given.

    A declared file that does not exist is skipped; one that exists but cannot
    be read raises ``KeywordFileError``.
    """
    catalog = KeywordCatalog()
    if keywords_path is None:
        return catalog

    path = Path(keywords_path)
    if not path.exists():
        log_warning(f"Keywords file not found, using built-in catalog: {path}")
        return catalog

    custom = load_custom_keywords(path)
    catalog = catalog.with_custom(custom)
    log_step(
        "Keywords",
        f"Loaded {len(custom)} custom phrases from {path.name} ({len(catalog)} total)",
    )
    return catalog
