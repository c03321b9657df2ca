"""Folders, uploads and text extraction."""

from core.files.file_manager import FileManager, SUPPORTED_FORMATS
from core.files.ingestion import TextIngestionService

__all__ = ["FileManager", "SUPPORTED_FORMATS", "TextIngestionService"]
