"""Job title classification into seniority and department."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TitlePattern:
    """A set of title keywords mapped to a seniority/department pair."""

    keywords: frozenset[str]
    seniority: str
    department: str

    @classmethod
    def build(cls, keywords: Iterable[str], seniority: str, department: str) -> "TitlePattern":
        """Create a pattern, lower-casing its keywords."""
        return cls(
            keywords=frozenset(k.lower() for k in keywords),
            seniority=seniority,
            department=department,
        )

    def matches(self, lower_title: str) -> bool:
        """Check if any keyword occurs in an already lower-cased title."""
        return any(keyword in lower_title for keyword in self.keywords)


@dataclass(frozen=True)
class TitleClassification:
    """Seniority and department inferred from a job title."""

    seniority: str
    department: str


PatternTable = Sequence[TitlePattern]


class TitleClassifier:
    """
    Classify job titles with an ordered pattern table.

    Patterns are checked in table order and the first one with a keyword
    contained in the title wins, so more specific patterns (e.g. "vp")
    must come before generic ones (e.g. "manager").
    """

    def __init__(self, patterns: PatternTable):
        self.patterns = tuple(patterns)

    def classify(self, job_title: str | None) -> TitleClassification | None:
        """
        Classify a free-text job title.

        Args:
            job_title: Title as entered on the contact, may be empty

        Returns:
            Classification of the first matching pattern, or None
        """
        if not job_title:
            return None

        lower_title = job_title.lower()
        for pattern in self.patterns:
            if pattern.matches(lower_title):
                return TitleClassification(
                    seniority=pattern.seniority,
                    department=pattern.department,
                )

        return None


def classify_title(job_title: str | None, patterns: PatternTable) -> TitleClassification | None:
    """Classify a title against a pattern table without keeping a classifier around."""
    return TitleClassifier(patterns).classify(job_title)
