"""Template-based document generation and export."""

from core.generation.document_generator import DocumentGenerator
from core.generation.exporter import DocumentExporter, ExportResult

__all__ = ["DocumentGenerator", "DocumentExporter", "ExportResult"]
