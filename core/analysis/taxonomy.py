"""Labels and fixed texts used in analysis results.

This module defines the risk types, severities, recommendation priorities,
sentiment labels and readability bands reported by the Document Analyzer.

Usage:
    from core.analysis.taxonomy import RiskType, Severity, difficulty_for
"""

from enum import Enum


class RiskType(str, Enum):
    """Rule-based risks the analyzer checks for."""

    INCOMPLETE_CONTENT = "incomplete_content"
    """Placeholder text is still present in the document."""

    LIABILITY_CLAUSE = "liability_clause"
    """The document contains liability provisions."""

    AMBIGUOUS_LANGUAGE = "ambiguous_language"
    """The document uses optional language."""


class Severity(str, Enum):
    """Severity levels for identified risks."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    """Priority of a recommendation."""
    HIGH = "high"
    MEDIUM = "medium"


class Importance(str, Enum):
    """Importance attached to an extracted key point."""
    HIGH = "high"


class SentimentLabel(str, Enum):
    """Overall tone of a document."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class Difficulty(str, Enum):
    """Readability bands for the reading-ease score."""
    EASY = "Easy"
    MEDIUM = "Medium"
    DIFFICULT = "Difficult"
    VERY_DIFFICULT = "Very Difficult"


RISK_TYPE_DESCRIPTIONS: dict[RiskType, str] = {
    RiskType.INCOMPLETE_CONTENT: "Document contains placeholder text that needs to be filled",
    RiskType.LIABILITY_CLAUSE: "Document contains liability provisions",
    RiskType.AMBIGUOUS_LANGUAGE: 'Document contains optional language ("may")',
}

RISK_SEVERITIES: dict[RiskType, Severity] = {
    RiskType.INCOMPLETE_CONTENT: Severity.HIGH,
    RiskType.LIABILITY_CLAUSE: Severity.MEDIUM,
    RiskType.AMBIGUOUS_LANGUAGE: Severity.LOW,
}

FINALIZE_DRAFT_TEXT = "Document is still in draft status. Review and finalize before use."
ASSIGN_AUTHOR_TEXT = "Assign proper author to document"
RUN_ANALYSIS_TEXT = "Run full legal analysis for comprehensive review"


def difficulty_for(score: float) -> Difficulty:
    """Map a reading-ease score to its difficulty band.

    Bands are exclusive on the lower bound:
    - above 80 → Easy
    - above 50 → Medium
    - above 30 → Difficult
    - otherwise → Very Difficult
    """
    if score > 80:
        return Difficulty.EASY
    if score > 50:
        return Difficulty.MEDIUM
    if score > 30:
        return Difficulty.DIFFICULT
    return Difficulty.VERY_DIFFICULT


def classify_sentiment(positive: int, negative: int) -> SentimentLabel:
    """Pick the majority label; ties are neutral."""
    if positive > negative:
        return SentimentLabel.POSITIVE
    if negative > positive:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL
