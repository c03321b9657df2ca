"""Document Exporter - renders documents as txt, html, json or pdf."""

import html
import logging
import textwrap
from dataclasses import dataclass

import fitz  # PyMuPDF

from app.models.document import Document
from core.exceptions import InvalidArgumentError

logger = logging.getLogger("casebinder.exporter")


@dataclass
class ExportResult:
    """A rendered document ready to be written or served."""
    format: str
    filename: str
    media_type: str
    content: str | bytes


class DocumentExporter:
    """Renders documents to the supported export formats."""

    SUPPORTED_FORMATS: dict[str, str] = {
        "txt": "text/plain",
        "html": "text/html",
        "json": "application/json",
        "pdf": "application/pdf",
    }

    # PDF page layout (points)
    PDF_MARGIN = 54
    PDF_FONT_SIZE = 10
    PDF_LINE_HEIGHT = 14
    PDF_WRAP_WIDTH = 95

    def export(self, document: Document, format: str = "txt") -> ExportResult:
        """Render a document in the requested format.

        Raises:
            InvalidArgumentError: If the format is not supported.
        """
        media_type = self.SUPPORTED_FORMATS.get(format)
        if media_type is None:
            raise InvalidArgumentError(f"Unsupported format: {format}")

        if format == "txt":
            content: str | bytes = self.to_text(document)
        elif format == "html":
            content = self.to_html(document)
        elif format == "json":
            content = document.model_dump_json(indent=2)
        else:
            content = self.to_pdf(document)

        logger.info("Exported document %s as %s", document.id, format)
        return ExportResult(
            format=format,
            filename=f"{document.name}.{format}",
            media_type=media_type,
            content=content,
        )

    def to_text(self, document: Document) -> str:
        """Render the document as plain text with a header block."""
        text = f"{document.content.title}\n"
        text += f"Type: {document.type}\n"
        text += f"Created: {document.metadata.created.isoformat()}\n"
        text += f"Author: {document.metadata.author}\n"
        text += f"\n{'=' * 50}\n\n"

        for section in document.content.sections.values():
            text += f"{section.heading}\n"
            text += f"{'-' * len(section.heading)}\n"
            text += f"{section.content}\n\n"

        return text

    def to_html(self, document: Document) -> str:
        """Render the document as a standalone HTML page with escaped content."""
        title = html.escape(document.content.title)
        parts = [
            f"<html><head><title>{title}</title></head><body>",
            f"<h1>{title}</h1>",
            f"<p><small>Type: {html.escape(document.type)} | "
            f"Author: {html.escape(document.metadata.author)}</small></p>",
            "<hr>",
        ]
        for section in document.content.sections.values():
            parts.append(f"<h2>{html.escape(section.heading)}</h2>")
            parts.append(f"<p>{html.escape(section.content)}</p>")
        parts.append("</body></html>")
        return "\n".join(parts)

    def to_pdf(self, document: Document) -> bytes:
        """Lay the text export out on letter-size pages."""
        lines: list[str] = []
        for line in self.to_text(document).splitlines():
            lines.extend(textwrap.wrap(line, self.PDF_WRAP_WIDTH) or [""])

        pdf = fitz.open()
        try:
            page_height = fitz.paper_rect("letter").height
            lines_per_page = int((page_height - 2 * self.PDF_MARGIN) // self.PDF_LINE_HEIGHT)

            for start in range(0, max(len(lines), 1), lines_per_page):
                page = pdf.new_page(width=fitz.paper_rect("letter").width, height=page_height)
                y = self.PDF_MARGIN + self.PDF_FONT_SIZE
                for line in lines[start:start + lines_per_page]:
                    page.insert_text((self.PDF_MARGIN, y), line, fontsize=self.PDF_FONT_SIZE)
                    y += self.PDF_LINE_HEIGHT

            pdf.set_metadata({"title": document.content.title, "author": document.metadata.author})
            return pdf.tobytes()
        finally:
            pdf.close()
