"""Text extraction for uploaded files.

PDF uploads are read with PyMuPDF; plain-text uploads are decoded as UTF-8.
Other supported formats are stored without extracted text.
"""

import logging
import re
from dataclasses import dataclass

import fitz  # PyMuPDF

from core.exceptions import InvalidArgumentError

logger = logging.getLogger("casebinder.ingestion")


@dataclass
class PageContent:
    """Represents extracted content from a single PDF page."""
    page_number: int
    text: str
    word_count: int


@dataclass
class ExtractedText:
    """Text pulled out of an uploaded file."""
    filename: str
    page_count: int
    pages: list[PageContent]
    total_word_count: int
    raw_text: str

    @property
    def is_empty(self) -> bool:
        """Check if the file has no extractable text."""
        return self.total_word_count == 0


class TextIngestionService:
    """Extracts plain text from uploaded file bytes."""

    def extract(self, data: bytes, filename: str, extension: str) -> ExtractedText | None:
        """Extract text for the formats that carry it.

        Args:
            data: Raw file bytes.
            filename: Name of the uploaded file.
            extension: Lowercased extension without the dot.

        Returns:
            ExtractedText for pdf and txt files, None for other formats.
        """
        if extension == "pdf":
            return self.extract_from_pdf(data, filename)
        if extension == "txt":
            return self.extract_from_txt(data, filename)
        return None

    def extract_from_pdf(self, pdf_bytes: bytes, filename: str = "document.pdf") -> ExtractedText:
        """Extract text content from PDF bytes, page by page.

        Raises:
            InvalidArgumentError: If the bytes are not a readable PDF.
        """
        pages: list[PageContent] = []
        all_text_parts: list[str] = []
        total_words = 0

        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except (fitz.EmptyFileError, fitz.FileDataError) as e:
            logger.warning("Rejected upload %s: unreadable PDF", filename)
            raise InvalidArgumentError(f"Unreadable PDF: {filename}") from e

        with doc:
            for page_num in range(len(doc)):
                text = self._clean_text(doc[page_num].get_text("text"))
                word_count = len(text.split())

                pages.append(PageContent(
                    page_number=page_num + 1,  # 1-indexed
                    text=text,
                    word_count=word_count,
                ))
                all_text_parts.append(text)
                total_words += word_count

        return ExtractedText(
            filename=filename,
            page_count=len(pages),
            pages=pages,
            total_word_count=total_words,
            raw_text="\n\n".join(all_text_parts),
        )

    def extract_from_txt(self, data: bytes, filename: str = "document.txt") -> ExtractedText:
        """Decode a plain-text upload as a single page."""
        text = self._clean_text(data.decode("utf-8", errors="replace"))
        word_count = len(text.split())
        return ExtractedText(
            filename=filename,
            page_count=1,
            pages=[PageContent(page_number=1, text=text, word_count=word_count)],
            total_word_count=word_count,
            raw_text=text,
        )

    def _clean_text(self, text: str) -> str:
        """Normalize whitespace in extracted text."""
        # Collapse runs of blank lines to a single paragraph break
        text = re.sub(r'\n{3,}', '\n\n', text)
        text = re.sub(r' {2,}', ' ', text)
        return text.strip()
