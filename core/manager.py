"""Legal Document Manager - facade over generation, storage and analysis.

The manager owns the document map and wires the generator, case store,
analyzer, exporter and file manager together. Documents are replaced, never
edited in place: updates and analysis attach produce a new record under the
same id.
"""

import logging
from typing import Any

from app.config import Settings, get_settings
from app.models.analysis import AnalysisResult, ComparisonResult
from app.models.case import Case, CaseStatus
from app.models.document import Document, DocumentUpdate, TemplateDefinition
from app.models.files import Folder, UploadedFile
from core.analysis.document_analyzer import DocumentAnalyzer
from core.cases.case_store import CaseStore
from core.exceptions import NotFoundError
from core.files.file_manager import FileManager
from core.generation.document_generator import DocumentGenerator
from core.generation.exporter import DocumentExporter, ExportResult

logger = logging.getLogger("casebinder.manager")


class LegalDocumentManager:
    """Entry point for case and document operations."""

    def __init__(
        self,
        settings: Settings | None = None,
        generator: DocumentGenerator | None = None,
        analyzer: DocumentAnalyzer | None = None,
        case_store: CaseStore | None = None,
        file_manager: FileManager | None = None,
        exporter: DocumentExporter | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.generator = generator or DocumentGenerator(default_author=settings.default_author)
        self.analyzer = analyzer or DocumentAnalyzer(default_author=settings.default_author)
        self.case_store = case_store or CaseStore(default_author=settings.default_author)
        self.file_manager = file_manager or FileManager(
            max_file_size_bytes=settings.max_upload_size_bytes,
        )
        self.exporter = exporter or DocumentExporter()
        self._documents: dict[str, Document] = {}

    # Documents

    def create_document(
        self,
        case_id: str | None = None,
        document_type: str = "memo",
        content: dict[str, Any] | None = None,
    ) -> Document:
        """Generate a document and register it, attaching it to a case if given."""
        if case_id is not None:
            # Fail before generating so nothing is stored for a bad case id
            self.case_store.get_case(case_id)

        document = self.generator.generate(document_type=document_type, content=content, case_id=case_id)
        self._documents[document.id] = document

        if case_id is not None:
            self.case_store.add_document(case_id, document.id)

        logger.info("Created document %s (%s)", document.name, document.id)
        return document

    def get_document(self, document_id: str) -> Document:
        document = self._documents.get(document_id)
        if document is None:
            raise NotFoundError(f"Document not found: {document_id}")
        return document

    def list_documents(self, case_id: str | None = None) -> list[Document]:
        if case_id is None:
            return list(self._documents.values())
        return [self._documents[d] for d in self.case_store.get_documents(case_id) if d in self._documents]

    def update_document(self, document_id: str, update: DocumentUpdate) -> Document:
        document = self.generator.update_document(self.get_document(document_id), update)
        self._documents[document_id] = document
        return document

    def delete_document(self, document_id: str) -> Document:
        """Remove a document and detach it from its case and folders."""
        document = self.get_document(document_id)
        del self._documents[document_id]
        if document.case_id is not None and self.case_store.has_case(document.case_id):
            self.case_store.remove_document(document.case_id, document_id)
        self.file_manager.detach_document(document_id)
        logger.info("Deleted document %s", document_id)
        return document

    def analyze_document(self, document_id: str) -> AnalysisResult:
        """Analyze a stored document and attach the result to it.

        Raises:
            NotFoundError: If the document does not exist.
            AnalysisError: If any analysis step fails.
        """
        document = self.get_document(document_id)
        result = self.analyzer.analyze(document).unwrap()
        self._documents[document_id] = document.model_copy(update={"analysis": result})
        return result

    def compare_documents(self, first_id: str, second_id: str) -> ComparisonResult:
        return self.analyzer.compare(self.get_document(first_id), self.get_document(second_id))

    def export_document(self, document_id: str, format: str = "txt") -> ExportResult:
        return self.exporter.export(self.get_document(document_id), format)

    # Templates

    def get_templates(self) -> dict[str, TemplateDefinition]:
        return self.generator.get_templates()

    def add_template(self, name: str, definition: TemplateDefinition | dict[str, Any]) -> TemplateDefinition:
        return self.generator.add_template(name, definition)

    # Cases

    def create_case(self, name: str, metadata: dict[str, Any] | None = None) -> Case:
        return self.case_store.create_case(name, metadata)

    def get_case(self, case_id: str) -> Case:
        return self.case_store.get_case(case_id)

    def list_cases(self, status: str | None = None, type: str | None = None, client: str | None = None) -> list[Case]:
        return self.case_store.list_cases(status=status, type=type, client=client)

    def update_case_status(self, case_id: str, status: str | CaseStatus) -> Case:
        return self.case_store.update_status(case_id, status)

    def get_case_documents(self, case_id: str) -> list[Document]:
        return self.list_documents(case_id=case_id)

    # Folders and uploads

    def create_folder(self, name: str, parent_id: str | None = None, case_id: str | None = None) -> Folder:
        """Create a folder, optionally registering it on a case."""
        if case_id is not None:
            self.case_store.get_case(case_id)
        folder = self.file_manager.create_folder(name, parent_id)
        if case_id is not None:
            self.case_store.add_folder(case_id, folder.id)
        return folder

    def get_folder(self, folder_id: str) -> Folder:
        return self.file_manager.get_folder(folder_id)

    def add_document_to_folder(self, folder_id: str, document_id: str) -> Folder:
        self.get_document(document_id)
        return self.file_manager.add_document(folder_id, document_id)

    def upload_file(self, filename: str, data: bytes, case_id: str | None = None) -> UploadedFile:
        if case_id is not None:
            self.case_store.get_case(case_id)
        return self.file_manager.upload(filename, data, case_id)


_manager: LegalDocumentManager | None = None


def get_manager() -> LegalDocumentManager:
    """Dependency returning the process-wide manager."""
    global _manager
    if _manager is None:
        _manager = LegalDocumentManager()
    return _manager
