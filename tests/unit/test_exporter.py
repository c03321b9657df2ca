"""Unit tests for the Document Exporter."""

import json

import pytest

from core.exceptions import InvalidArgumentError
from core.files.ingestion import TextIngestionService
from core.generation.exporter import DocumentExporter


@pytest.fixture
def exporter() -> DocumentExporter:
    return DocumentExporter()


@pytest.fixture
def contract(generator):
    return generator.generate("contract", {
        "author": "A. Counsel",
        "Terms": "Payment is due <within> 30 days & on receipt.",
    })


class TestExport:
    """Tests for each export format."""

    def test_text(self, exporter, contract):
        result = exporter.export(contract, "txt")

        assert result.format == "txt"
        assert result.media_type == "text/plain"
        assert result.filename == f"{contract.name}.txt"
        assert result.content.startswith("Legal Contract\nType: contract\n")
        assert "Author: A. Counsel" in result.content
        assert "=" * 50 in result.content
        assert "Terms\n-----\nPayment is due <within> 30 days & on receipt.\n" in result.content

    def test_default_format_is_text(self, exporter, contract):
        assert exporter.export(contract).format == "txt"

    def test_html_escapes_content(self, exporter, contract):
        result = exporter.export(contract, "html")

        assert result.media_type == "text/html"
        assert "<h1>Legal Contract</h1>" in result.content
        assert "<h2>Terms</h2>" in result.content
        assert "&lt;within&gt;" in result.content
        assert "&amp;" in result.content

    def test_json(self, exporter, contract):
        result = exporter.export(contract, "json")
        data = json.loads(result.content)

        assert data["id"] == contract.id
        assert data["version"] == 1
        assert list(data["content"]["sections"]) == ["Header", "Parties", "Terms", "Conditions", "Signatures"]

    def test_pdf(self, exporter, contract):
        result = exporter.export(contract, "pdf")

        assert result.media_type == "application/pdf"
        assert isinstance(result.content, bytes)
        assert result.content.startswith(b"%PDF")

        extracted = TextIngestionService().extract_from_pdf(result.content)
        assert "Legal Contract" in extracted.raw_text
        assert "Signatures" in extracted.raw_text

    def test_pdf_spans_pages(self, exporter, generator):
        long_text = "\n".join(f"Line {i}" for i in range(200))
        doc = generator.generate("memo", {"Analysis": long_text})
        extracted = TextIngestionService().extract_from_pdf(exporter.export(doc, "pdf").content)
        assert extracted.page_count > 1

    @pytest.mark.parametrize("fmt", ["docx", "PDF", ""])
    def test_unsupported_format(self, exporter, contract, fmt):
        with pytest.raises(InvalidArgumentError, match="Unsupported format"):
            exporter.export(contract, fmt)
