"""Analysis and comparison result models."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from core.analysis.taxonomy import (
    Difficulty,
    Importance,
    Priority,
    RiskType,
    SentimentLabel,
    Severity,
)


class Summary(BaseModel):
    """Opening excerpt and size counts of a document."""
    text: str
    word_count: int
    sentence_count: int
    character_count: int


class KeyPoint(BaseModel):
    """A sentence that matched a keyword category."""
    category: str
    text: str
    importance: Importance = Importance.HIGH


class LegalTermCount(BaseModel):
    """Occurrences of a legal term in the document text."""
    term: str
    occurrences: int


class SectionStats(BaseModel):
    """Per-section structure statistics."""
    name: str
    word_count: int
    is_empty: bool


class StructureReport(BaseModel):
    """Section layout of a document."""
    total_sections: int
    sections: list[SectionStats] = []


class SentimentReport(BaseModel):
    """Indicator-word tone classification."""
    overall: SentimentLabel
    positive_indicators: int
    negative_indicators: int


class RiskFinding(BaseModel):
    """A rule-based risk flagged in the document."""
    type: RiskType
    severity: Severity
    description: str


class Recommendation(BaseModel):
    """A follow-up action suggested for the document."""
    priority: Priority
    text: str


class ReadabilityReport(BaseModel):
    """Reading-ease score and the counts it was computed from."""
    score: int = Field(..., ge=0, le=100)
    difficulty: Difficulty
    word_count: int
    sentence_count: int


class AnalysisResult(BaseModel):
    """Full heuristic analysis of a document."""
    document_id: str
    document_type: str
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    summary: Summary
    key_points: list[KeyPoint] = []
    legal_terms: list[LegalTermCount] = []
    structure: StructureReport
    sentiment: SentimentReport
    risks: list[RiskFinding] = []
    recommendations: list[Recommendation] = []
    readability: ReadabilityReport


class SimilarityReport(BaseModel):
    """Vocabulary shared by two documents."""
    common_words: int
    common_terms: list[str] = []


class DifferenceReport(BaseModel):
    """Size differences between two documents."""
    length_difference: int
    word_count_difference: int


class StructuralDifference(BaseModel):
    """Section counts of the two compared documents."""
    doc1_sections: int
    doc2_sections: int


class ComparisonResult(BaseModel):
    """Result of comparing two documents."""
    similarities: SimilarityReport
    differences: DifferenceReport
    structural_differences: StructuralDifference
