"""Unit tests for the Document Analyzer.

Tests cover:
- Text flattening
- Summary and key point extraction
- Legal term counting and ordering
- Section structure and placeholder detection
- Sentiment classification
- Risk checklist and recommendations
- Readability scoring
- Error capture and document comparison
"""

from types import SimpleNamespace

import pytest

from app.models.document import DocumentStatus, DocumentUpdate
from core.analysis.document_analyzer import (
    AnalysisOutcome,
    DocumentAnalyzer,
    flatten_text,
    split_words,
)
from core.analysis.lexicon import Lexicon
from core.analysis.taxonomy import (
    ASSIGN_AUTHOR_TEXT,
    FINALIZE_DRAFT_TEXT,
    RUN_ANALYSIS_TEXT,
    Difficulty,
    Priority,
    RiskType,
    SentimentLabel,
    Severity,
    difficulty_for,
)
from core.exceptions import AnalysisError


class TestFlattenText:
    """Tests for building the flattened document text."""

    def test_title_then_sections_in_order(self, generator):
        doc = generator.generate("agreement", {
            "title": "Lease",
            "Preamble": "One",
            "Recitals": "Two",
            "Terms and Conditions": "Three",
            "Signatures": "Four",
        })
        assert flatten_text(doc) == "Lease One Two Three Four"

    def test_split_words_keeps_leading_empty_token(self):
        assert split_words(" content") == ["", "content"]
        assert split_words("") == [""]


class TestSummary:
    """Tests for summary generation."""

    def test_first_three_sentences(self, analyzer):
        summary = analyzer.summarize("First. Second. Third. Fourth.")
        assert summary.text == "First.  Second.  Third"
        assert summary.sentence_count == 4
        assert summary.word_count == 4
        assert summary.character_count == len("First. Second. Third. Fourth.")

    def test_blank_segments_are_skipped(self, analyzer):
        summary = analyzer.summarize("One.. . Two")
        assert summary.sentence_count == 2


class TestKeyPoints:
    """Tests for keyword-driven key point extraction."""

    def test_categories_in_taxonomy_order(self, analyzer):
        points = analyzer.extract_key_points("The Client must pay within ten days")
        assert [p.category for p in points] == ["obligations", "dates"]
        assert all(p.text == "The Client must pay within ten days" for p in points)
        assert all(p.importance.value == "high" for p in points)

    def test_substring_match(self, analyzer):
        # "can" matches inside "cancel"
        points = analyzer.extract_key_points("Either side may cancel")
        assert [p.category for p in points] == ["rights", "rights"]

    def test_capped_at_ten(self, analyzer):
        text = "The party shall pay. " * 15
        points = analyzer.extract_key_points(text)
        assert len(points) == 10
        assert points[0].category == "obligations"
        assert points[1].category == "parties"

    def test_no_matches(self, analyzer):
        assert analyzer.extract_key_points("Nothing relevant here") == []


class TestLegalTerms:
    """Tests for legal term frequency."""

    def test_sorted_by_occurrences(self, analyzer):
        text = "The contract is a contract. Breach of contract. The agreement and the breach."
        terms = analyzer.extract_legal_terms(text)
        assert [(t.term, t.occurrences) for t in terms] == [
            ("contract", 3),
            ("breach", 2),
            ("agreement", 1),
        ]

    def test_ties_keep_lexicon_order(self, analyzer):
        terms = analyzer.extract_legal_terms("jurisdiction, party and agreement")
        assert [t.term for t in terms] == ["agreement", "party", "jurisdiction"]

    def test_whole_word_only(self, analyzer):
        assert analyzer.extract_legal_terms("contracts between parties") == []

    def test_case_insensitive_multi_word(self, analyzer):
        terms = analyzer.extract_legal_terms("FORCE MAJEURE applies. Governing Law is Delaware.")
        assert {t.term for t in terms} == {"force majeure", "governing law"}

    def test_custom_lexicon(self):
        analyzer = DocumentAnalyzer(lexicon=Lexicon(legal_terms=("tenant", "lease")))
        terms = analyzer.extract_legal_terms("The tenant signs the lease. The tenant pays.")
        assert [(t.term, t.occurrences) for t in terms] == [("tenant", 2), ("lease", 1)]


class TestStructure:
    """Tests for per-section structure stats."""

    def test_placeholder_detection(self, generator, analyzer):
        doc = generator.generate("contract", {"Terms": "Add here"})
        structure = analyzer.analyze_structure(doc)

        assert structure.total_sections == 5
        by_name = {s.name: s for s in structure.sections}
        assert by_name["Terms"].is_empty is False
        assert by_name["Header"].is_empty is True

    def test_placeholder_text_is_empty(self, generator, analyzer):
        doc = generator.generate("contract")
        terms = next(s for s in analyzer.analyze_structure(doc).sections if s.name == "Terms")
        assert doc.content.sections["Terms"].content == "[Add Terms content here]"
        assert terms.is_empty is True
        assert terms.word_count == 4


class TestSentiment:
    """Tests for indicator-word sentiment."""

    def test_tie_is_neutral(self, analyzer):
        sentiment = analyzer.analyze_sentiment("We agree to remedy any breach.")
        assert sentiment.overall == SentimentLabel.NEUTRAL
        assert sentiment.positive_indicators == 1
        assert sentiment.negative_indicators == 1

    def test_positive_majority(self, analyzer):
        sentiment = analyzer.analyze_sentiment("A fair and reasonable outcome")
        assert sentiment.overall == SentimentLabel.POSITIVE

    def test_negative_majority(self, analyzer):
        sentiment = analyzer.analyze_sentiment("Any Dispute over a Violation")
        assert sentiment.overall == SentimentLabel.NEGATIVE
        assert sentiment.negative_indicators == 2

    def test_each_word_counts_once(self, analyzer):
        sentiment = analyzer.analyze_sentiment("breach breach breach, agree")
        assert sentiment.negative_indicators == 1
        assert sentiment.overall == SentimentLabel.NEUTRAL


class TestRisks:
    """Tests for the risk checklist."""

    def test_all_risks_in_order(self, analyzer):
        risks = analyzer.identify_risks("[Add Terms content here] The seller is LIABLE and may refuse.")
        assert [(r.type, r.severity) for r in risks] == [
            (RiskType.INCOMPLETE_CONTENT, Severity.HIGH),
            (RiskType.LIABILITY_CLAUSE, Severity.MEDIUM),
            (RiskType.AMBIGUOUS_LANGUAGE, Severity.LOW),
        ]

    def test_clean_text(self, analyzer):
        assert analyzer.identify_risks("The buyer pays the price.") == []

    def test_placeholder_markers_required_together(self, analyzer):
        assert analyzer.identify_risks("[Add something") == []


class TestRecommendations:
    """Tests for metadata-driven recommendations."""

    def test_fresh_draft(self, generator, analyzer):
        doc = generator.generate("memo")
        recs = analyzer.generate_recommendations(doc)
        assert [(r.priority, r.text) for r in recs] == [
            (Priority.HIGH, FINALIZE_DRAFT_TEXT),
            (Priority.MEDIUM, ASSIGN_AUTHOR_TEXT),
            (Priority.MEDIUM, RUN_ANALYSIS_TEXT),
        ]

    def test_final_authored_and_analyzed(self, generator, analyzer):
        doc = generator.generate("memo", {"author": "A. Counsel"})
        doc = generator.update_document(doc, DocumentUpdate(status=DocumentStatus.FINAL))
        doc = doc.model_copy(update={"analysis": analyzer.analyze(doc).unwrap()})
        assert analyzer.generate_recommendations(doc) == []

    def test_custom_default_author(self, generator):
        analyzer = DocumentAnalyzer(default_author="Clerk")
        doc = generator.generate("memo", {"author": "Clerk"})
        texts = [r.text for r in analyzer.generate_recommendations(doc)]
        assert ASSIGN_AUTHOR_TEXT in texts


class TestReadability:
    """Tests for the reading-ease score."""

    def test_trailing_terminator_counts_as_sentence(self, analyzer):
        # "Parties agree to reasonable terms." splits into two segments on [.!?]
        report = analyzer.calculate_readability("Parties agree to reasonable terms.")
        assert report.sentence_count == 2
        assert report.word_count == 5
        assert report.score == 35
        assert report.difficulty == Difficulty.DIFFICULT

    def test_clamped_high(self, analyzer):
        report = analyzer.calculate_readability("")
        assert report.score == 100
        assert report.difficulty == Difficulty.EASY

    def test_clamped_low(self, analyzer):
        report = analyzer.calculate_readability("Indemnification obligations survive.")
        assert report.score == 0
        assert report.difficulty == Difficulty.VERY_DIFFICULT

    @pytest.mark.parametrize("score, expected", [
        (100.0, Difficulty.EASY),
        (80.01, Difficulty.EASY),
        (80.0, Difficulty.MEDIUM),
        (50.5, Difficulty.MEDIUM),
        (50.0, Difficulty.DIFFICULT),
        (30.5, Difficulty.DIFFICULT),
        (30.0, Difficulty.VERY_DIFFICULT),
        (0.0, Difficulty.VERY_DIFFICULT),
    ])
    def test_difficulty_bands(self, score, expected):
        assert difficulty_for(score) == expected

    def test_label_uses_unrounded_score(self, analyzer):
        # Empty text is one word in one sentence with no syllables
        analyzer.READING_EASE_BASE = 81.415
        report = analyzer.calculate_readability("")
        assert report.score == 80
        assert report.difficulty == Difficulty.EASY

    @pytest.mark.parametrize("text", [
        "a",
        "Notwithstanding anything herein, indemnification obligations survive termination.",
        "Go. Now! Why? Yes.",
    ])
    def test_score_in_range(self, analyzer, text):
        assert 0 <= analyzer.calculate_readability(text).score <= 100


class TestAnalyze:
    """Tests for the full analyze call."""

    def test_unfilled_memo(self, generator, analyzer):
        doc = generator.generate("memo")
        for name, section in doc.content.sections.items():
            assert section.content == f"[Add {name} content here]"

        outcome = analyzer.analyze(doc)
        assert outcome.success is True
        result = outcome.result

        assert result.document_id == doc.id
        assert result.document_type == "memo"
        assert result.risks[0].type == RiskType.INCOMPLETE_CONTENT
        assert result.risks[0].severity == Severity.HIGH
        assert result.structure.total_sections == 7
        assert all(s.is_empty for s in result.structure.sections)

    def test_deterministic(self, generator, analyzer):
        doc = generator.generate("contract", {
            "Terms": "The Client shall pay within 30 days. Late payment may incur a penalty.",
        })
        first = analyzer.analyze(doc).unwrap()
        second = analyzer.analyze(doc).unwrap()
        assert first.model_dump(exclude={"analyzed_at"}) == second.model_dump(exclude={"analyzed_at"})

    def test_does_not_mutate_document(self, generator, analyzer):
        doc = generator.generate("brief", {"Arguments": "The defendant is liable."})
        before = doc.model_dump()
        analyzer.analyze(doc)
        assert doc.model_dump() == before

    def test_failure_is_captured(self, analyzer):
        broken = SimpleNamespace(
            id="doc-1",
            type="memo",
            content=SimpleNamespace(title="Untitled"),
            metadata=SimpleNamespace(status="draft", author="System"),
            analysis=None,
        )
        outcome = analyzer.analyze(broken)

        assert isinstance(outcome, AnalysisOutcome)
        assert outcome.success is False
        assert outcome.result is None
        assert isinstance(outcome.error, AnalysisError)
        assert isinstance(outcome.error.cause, AttributeError)
        assert str(outcome.error).startswith("Analysis failed:")

        with pytest.raises(AnalysisError) as exc_info:
            outcome.unwrap()
        assert exc_info.value.__cause__ is outcome.error.cause


class TestCompare:
    """Tests for document comparison."""

    def test_identical_documents(self, generator, analyzer):
        content = {"Terms": "The buyer shall pay the seller. The seller delivers goods."}
        first = generator.generate("contract", content)
        second = generator.generate("contract", content)

        result = analyzer.compare(first, second)
        distinct = set(split_words(flatten_text(first).lower()))

        assert result.similarities.common_words == len(distinct)
        assert result.differences.length_difference == 0
        assert result.differences.word_count_difference == 0
        assert result.structural_differences.doc1_sections == 5
        assert result.structural_differences.doc2_sections == 5

    def test_different_documents(self, generator, analyzer):
        first = generator.generate("agreement", {"title": "Alpha beta", "Preamble": "gamma"})
        second = generator.generate("memo", {"title": "ALPHA delta"})

        result = analyzer.compare(first, second)

        assert result.similarities.common_terms[0] == "alpha"
        assert "beta" not in result.similarities.common_terms
        assert result.structural_differences.doc1_sections == 4
        assert result.structural_differences.doc2_sections == 7
        assert result.differences.length_difference == abs(
            len(flatten_text(first)) - len(flatten_text(second))
        )

    def test_common_terms_capped(self, generator, analyzer):
        words = " ".join(f"word{i}" for i in range(30))
        first = generator.generate("memo", {"Issue": words})
        second = generator.generate("memo", {"Issue": words})
        result = analyzer.compare(first, second)
        assert len(result.similarities.common_terms) == 20
        assert result.similarities.common_words > 20
