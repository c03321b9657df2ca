"""Shared fixtures for Casebinder tests."""

from datetime import datetime, timedelta, timezone
from itertools import count

import fitz  # PyMuPDF
import pytest

from app.config import Settings
from core.analysis.document_analyzer import DocumentAnalyzer
from core.generation.document_generator import DocumentGenerator
from core.manager import LegalDocumentManager


@pytest.fixture
def clock():
    """Clock that advances one second per call."""
    start = datetime(2024, 1, 15, 9, 30, 0, tzinfo=timezone.utc)
    ticks = count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def generator(clock) -> DocumentGenerator:
    return DocumentGenerator(clock=clock)


@pytest.fixture
def analyzer() -> DocumentAnalyzer:
    return DocumentAnalyzer()


@pytest.fixture
def manager(clock) -> LegalDocumentManager:
    settings = Settings(max_upload_size_mb=1)
    return LegalDocumentManager(settings=settings, generator=DocumentGenerator(clock=clock))


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF with known text content."""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Hello PDF World", fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    doc = fitz.open()
    for text in ("Page one content", "Page two content"):
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data
