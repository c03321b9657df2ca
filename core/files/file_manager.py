"""File Manager - folder tree and upload registry.

Folders reference their parent and children by id only, so the tree holds no
object cycles.
"""

import logging
from datetime import datetime, timezone
from pathlib import PurePath

from app.models.files import Folder, UploadedFile
from core.exceptions import InvalidArgumentError, NotFoundError
from core.files.ingestion import TextIngestionService

logger = logging.getLogger("casebinder.file_manager")

SUPPORTED_FORMATS: tuple[str, ...] = (
    "pdf", "docx", "doc", "txt", "rtf",
    "jpg", "png", "gif",
    "mp3", "wav",
    "mp4", "avi",
    "pptx", "ppt",
)


class FileManager:
    """In-memory folders and uploaded files."""

    def __init__(
        self,
        max_file_size_bytes: int = 500 * 1024 * 1024,
        ingestion: TextIngestionService | None = None,
    ) -> None:
        self.max_file_size_bytes = max_file_size_bytes
        self.ingestion = ingestion or TextIngestionService()
        self._folders: dict[str, Folder] = {}
        self._uploads: dict[str, UploadedFile] = {}

    def create_folder(self, name: str, parent_id: str | None = None) -> Folder:
        """Create a folder, optionally nested under an existing one."""
        if parent_id is not None and parent_id not in self._folders:
            raise NotFoundError(f"Folder not found: {parent_id}")

        folder = Folder(name=name, parent_id=parent_id)
        self._folders[folder.id] = folder

        if parent_id is not None:
            parent = self._folders[parent_id]
            parent.children.append(folder.id)
            parent.modified = datetime.now(timezone.utc)

        logger.info("Created folder %s (%s)", folder.id, name)
        return folder

    def get_folder(self, folder_id: str) -> Folder:
        folder = self._folders.get(folder_id)
        if folder is None:
            raise NotFoundError(f"Folder not found: {folder_id}")
        return folder

    def list_children(self, folder_id: str) -> list[Folder]:
        """Return the direct subfolders of a folder."""
        folder = self.get_folder(folder_id)
        return [self._folders[child_id] for child_id in folder.children]

    def add_document(self, folder_id: str, document_id: str) -> Folder:
        """File a document into a folder. Adding twice is a no-op."""
        folder = self.get_folder(folder_id)
        if document_id not in folder.documents:
            folder.documents.append(document_id)
            folder.modified = datetime.now(timezone.utc)
        return folder

    def remove_document(self, folder_id: str, document_id: str) -> Folder:
        folder = self.get_folder(folder_id)
        folder.documents = [d for d in folder.documents if d != document_id]
        folder.modified = datetime.now(timezone.utc)
        return folder

    def detach_document(self, document_id: str) -> list[Folder]:
        """Drop a document from every folder that lists it."""
        folders = [f for f in self._folders.values() if document_id in f.documents]
        for folder in folders:
            self.remove_document(folder.id, document_id)
        return folders

    def upload(self, filename: str, data: bytes, case_id: str | None = None) -> UploadedFile:
        """Register an uploaded file and extract its text where possible.

        Raises:
            InvalidArgumentError: If the extension is unsupported or the file
                exceeds the size limit.
        """
        extension = PurePath(filename).suffix.lstrip(".").lower()
        if extension not in SUPPORTED_FORMATS:
            logger.warning("Rejected upload %s: unsupported format", filename)
            raise InvalidArgumentError(f"Unsupported file format: {extension or filename}")

        if len(data) > self.max_file_size_bytes:
            logger.warning("Rejected upload %s: %d bytes over limit", filename, len(data))
            raise InvalidArgumentError(
                f"File too large: {len(data)} bytes (limit {self.max_file_size_bytes})"
            )

        extracted = self.ingestion.extract(data, filename, extension)

        upload = UploadedFile(
            filename=filename,
            extension=extension,
            size_bytes=len(data),
            case_id=case_id,
            page_count=extracted.page_count if extracted else 0,
            extracted_text=extracted.raw_text if extracted else None,
        )
        self._uploads[upload.id] = upload

        logger.info("Stored upload %s (%s, %d bytes)", upload.id, filename, len(data))
        return upload

    def get_upload(self, upload_id: str) -> UploadedFile:
        upload = self._uploads.get(upload_id)
        if upload is None:
            raise NotFoundError(f"Upload not found: {upload_id}")
        return upload

    def list_uploads(self, case_id: str | None = None) -> list[UploadedFile]:
        """List uploads, optionally only those attached to one case."""
        uploads = list(self._uploads.values())
        if case_id is not None:
            uploads = [u for u in uploads if u.case_id == case_id]
        return uploads
