"""Document Analyzer - heuristic text analysis of legal documents.

Every analysis step works on the document's flattened text: the title
followed by each section's content, joined with single spaces. Steps are
independent single passes over that text (or its sentence/word splits):

- summary: opening sentences and size counts
- key points: sentences matching the keyword taxonomy
- legal terms: whole-word frequency of common legal terms
- structure: per-section word counts and placeholder detection
- sentiment: indicator-word majority vote
- risks: rule-based checklist
- recommendations: metadata-driven follow-ups
- readability: Flesch reading-ease estimate

The analyzer never mutates the document it reads.
"""

import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from app.models.analysis import (
    AnalysisResult,
    ComparisonResult,
    DifferenceReport,
    KeyPoint,
    LegalTermCount,
    ReadabilityReport,
    Recommendation,
    RiskFinding,
    SectionStats,
    SentimentReport,
    SimilarityReport,
    StructuralDifference,
    StructureReport,
    Summary,
)
from core.analysis.lexicon import DEFAULT_AUTHOR, DEFAULT_LEXICON, Lexicon, has_placeholder
from core.analysis.taxonomy import (
    ASSIGN_AUTHOR_TEXT,
    FINALIZE_DRAFT_TEXT,
    RISK_SEVERITIES,
    RISK_TYPE_DESCRIPTIONS,
    RUN_ANALYSIS_TEXT,
    Importance,
    Priority,
    RiskType,
    classify_sentiment,
    difficulty_for,
)
from core.exceptions import AnalysisError

logger = logging.getLogger("casebinder.document_analyzer")

WHITESPACE = re.compile(r"\s+")
SENTENCE_TERMINATORS = re.compile(r"[.!?]")
VOWEL_CLUSTER = re.compile(r"[aeiou]{1,2}", re.IGNORECASE)


def split_words(text: str) -> list[str]:
    """Split on whitespace runs, keeping empty edge tokens.

    A text that starts with a space yields an empty first token; word counts
    throughout the analyzer are based on this split.
    """
    return WHITESPACE.split(text)


def flatten_text(document: Any) -> str:
    """Join a document's title and section contents into one string."""
    text = document.content.title or ""
    for section in document.content.sections.values():
        text += " " + (section.content or "")
    return text


@dataclass
class AnalysisOutcome:
    """Result of an analyze call: either a result or the error that stopped it."""
    success: bool
    result: AnalysisResult | None = None
    error: AnalysisError | None = None

    def unwrap(self) -> AnalysisResult:
        """Return the result, or raise the captured AnalysisError."""
        if self.error is not None:
            raise self.error
        return self.result


class DocumentAnalyzer:
    """Stateless heuristic analyzer for generated legal documents.

    Example:
        analyzer = DocumentAnalyzer()
        outcome = analyzer.analyze(document)
        if outcome.success:
            print(outcome.result.readability.score)
    """

    KEY_POINT_LIMIT = 10
    SUMMARY_SENTENCES = 3
    COMMON_TERMS_LIMIT = 20

    # Flesch reading-ease constants
    READING_EASE_BASE = 206.835
    WORDS_PER_SENTENCE_WEIGHT = 1.015
    SYLLABLES_PER_WORD_WEIGHT = 84.6

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        default_author: str = DEFAULT_AUTHOR,
    ) -> None:
        """Initialize the analyzer with a lexicon and the placeholder author name."""
        self.lexicon = lexicon or DEFAULT_LEXICON
        self.default_author = default_author
        self._term_patterns = [
            (term, re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE))
            for term in self.lexicon.legal_terms
        ]

    def analyze(self, document: Any) -> AnalysisOutcome:
        """Run every analysis step on a document.

        Args:
            document: A Document (or any object with the same content and
                metadata attributes).

        Returns:
            AnalysisOutcome holding either the full result or the error. No
            partial result is ever returned.
        """
        try:
            text = flatten_text(document)
            result = AnalysisResult(
                document_id=document.id,
                document_type=document.type,
                analyzed_at=datetime.now(timezone.utc),
                summary=self.summarize(text),
                key_points=self.extract_key_points(text),
                legal_terms=self.extract_legal_terms(text),
                structure=self.analyze_structure(document),
                sentiment=self.analyze_sentiment(text),
                risks=self.identify_risks(text),
                recommendations=self.generate_recommendations(document),
                readability=self.calculate_readability(text),
            )
        except Exception as e:
            logger.exception("Analysis failed for document %s", getattr(document, "id", "<unknown>"))
            error = AnalysisError(e)
            error.__cause__ = e
            return AnalysisOutcome(success=False, error=error)

        logger.debug(
            "Analyzed document %s: %d key points, %d risks, readability %d",
            result.document_id,
            len(result.key_points),
            len(result.risks),
            result.readability.score,
        )
        return AnalysisOutcome(success=True, result=result)

    def summarize(self, text: str) -> Summary:
        """Take the first sentences of the text as a summary."""
        sentences = [s for s in text.split(".") if s.strip()]
        return Summary(
            text=". ".join(sentences[: self.SUMMARY_SENTENCES]),
            word_count=len(split_words(text)),
            sentence_count=len(sentences),
            character_count=len(text),
        )

    def extract_key_points(self, text: str) -> list[KeyPoint]:
        """Find sentences containing taxonomy keywords, in scan order."""
        key_points: list[KeyPoint] = []
        for sentence in text.split("."):
            lowered = sentence.lower()
            for category, keywords in self.lexicon.keyword_taxonomy.items():
                for keyword in keywords:
                    if keyword in lowered:
                        key_points.append(KeyPoint(
                            category=category,
                            text=sentence.strip(),
                            importance=Importance.HIGH,
                        ))
                        if len(key_points) >= self.KEY_POINT_LIMIT:
                            return key_points
        return key_points

    def extract_legal_terms(self, text: str) -> list[LegalTermCount]:
        """Count whole-word legal term occurrences, most frequent first."""
        found = []
        for term, pattern in self._term_patterns:
            occurrences = len(pattern.findall(text))
            if occurrences:
                found.append(LegalTermCount(term=term, occurrences=occurrences))
        # sorted() is stable, so ties keep lexicon order
        return sorted(found, key=lambda t: t.occurrences, reverse=True)

    def analyze_structure(self, document: Any) -> StructureReport:
        """Report word counts and placeholder state for each section."""
        sections = document.content.sections
        return StructureReport(
            total_sections=len(sections),
            sections=[
                SectionStats(
                    name=section.heading,
                    word_count=len(split_words(section.content)),
                    is_empty=has_placeholder(section.content),
                )
                for section in sections.values()
            ],
        )

    def analyze_sentiment(self, text: str) -> SentimentReport:
        """Classify tone by how many indicator words appear at all."""
        lowered = text.lower()
        positive = sum(1 for word in self.lexicon.positive_words if word in lowered)
        negative = sum(1 for word in self.lexicon.negative_words if word in lowered)
        return SentimentReport(
            overall=classify_sentiment(positive, negative),
            positive_indicators=positive,
            negative_indicators=negative,
        )

    def identify_risks(self, text: str) -> list[RiskFinding]:
        """Apply the risk checklist in fixed order."""
        lowered = text.lower()
        checks = [
            (RiskType.INCOMPLETE_CONTENT, has_placeholder(text)),
            (RiskType.LIABILITY_CLAUSE, self.lexicon.liability_marker in lowered),
            (RiskType.AMBIGUOUS_LANGUAGE, self.lexicon.optional_language_marker in lowered),
        ]
        return [
            RiskFinding(
                type=risk_type,
                severity=RISK_SEVERITIES[risk_type],
                description=RISK_TYPE_DESCRIPTIONS[risk_type],
            )
            for risk_type, triggered in checks
            if triggered
        ]

    def generate_recommendations(self, document: Any) -> list[Recommendation]:
        """Suggest follow-ups based on status, author and prior analysis."""
        recommendations = []
        metadata = document.metadata

        if metadata.status == "draft":
            recommendations.append(Recommendation(priority=Priority.HIGH, text=FINALIZE_DRAFT_TEXT))

        if not metadata.author or metadata.author == self.default_author:
            recommendations.append(Recommendation(priority=Priority.MEDIUM, text=ASSIGN_AUTHOR_TEXT))

        if getattr(document, "analysis", None) is None:
            recommendations.append(Recommendation(priority=Priority.MEDIUM, text=RUN_ANALYSIS_TEXT))

        return recommendations

    def calculate_readability(self, text: str) -> ReadabilityReport:
        """Estimate Flesch reading ease.

        The sentence count keeps the empty segment after a trailing
        terminator, so "One. Two." counts as three sentences.
        """
        words = len(split_words(text))
        sentences = len(SENTENCE_TERMINATORS.split(text))
        syllables = len(VOWEL_CLUSTER.findall(text))

        reading_ease = max(0.0, min(100.0,
            self.READING_EASE_BASE
            - self.WORDS_PER_SENTENCE_WEIGHT * (words / sentences)
            - self.SYLLABLES_PER_WORD_WEIGHT * (syllables / words)
        ))

        return ReadabilityReport(
            score=math.floor(reading_ease + 0.5),
            difficulty=difficulty_for(reading_ease),
            word_count=words,
            sentence_count=sentences,
        )

    def compare(self, first: Any, second: Any) -> ComparisonResult:
        """Compare vocabulary, size and section counts of two documents."""
        text1 = flatten_text(first).lower()
        text2 = flatten_text(second).lower()
        words1 = split_words(text1)
        words2 = split_words(text2)

        vocabulary2 = set(words2)
        common = [word for word in dict.fromkeys(words1) if word in vocabulary2]

        return ComparisonResult(
            similarities=SimilarityReport(
                common_words=len(common),
                common_terms=common[: self.COMMON_TERMS_LIMIT],
            ),
            differences=DifferenceReport(
                length_difference=abs(len(text1) - len(text2)),
                word_count_difference=abs(len(words1) - len(words2)),
            ),
            structural_differences=StructuralDifference(
                doc1_sections=len(first.content.sections),
                doc2_sections=len(second.content.sections),
            ),
        )

