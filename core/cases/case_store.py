"""Case Store - in-memory registry of cases and their documents."""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from app.models.case import Case, CaseStatus
from core.exceptions import InvalidArgumentError, NotFoundError

logger = logging.getLogger("casebinder.case_store")

# Fields that may be edited after a case is opened
EDITABLE_FIELDS = frozenset({
    "name", "type", "client", "opponent", "court_name", "case_number",
    "judge", "description", "priority", "due_date", "tags", "custom_fields",
})

# Fields a caller may supply when opening a case
CREATABLE_FIELDS = (EDITABLE_FIELDS - {"name"}) | {"status", "created_by"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_status(status: str | CaseStatus) -> CaseStatus:
    """Validate a status value against the allowed case statuses."""
    try:
        return CaseStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in CaseStatus)
        raise InvalidArgumentError(f"Invalid status: {status} (expected one of {valid})") from None


class CaseStore:
    """Owns all cases, keyed by generated id."""

    def __init__(self, default_author: str = "System") -> None:
        self.default_author = default_author
        self._cases: dict[str, Case] = {}

    def create_case(self, name: str, metadata: dict[str, Any] | None = None) -> Case:
        """Open a new case.

        Args:
            name: Case name.
            metadata: Optional case fields (status, type, client, ...).

        Raises:
            InvalidArgumentError: If a supplied field is invalid or cannot be set
                by the caller.
        """
        metadata = {k: v for k, v in (metadata or {}).items() if v is not None}
        unknown = set(metadata) - CREATABLE_FIELDS
        if unknown:
            raise InvalidArgumentError(f"Fields cannot be set: {', '.join(sorted(unknown))}")
        if "status" in metadata:
            metadata["status"] = parse_status(metadata["status"])
        metadata.setdefault("created_by", self.default_author)

        try:
            case = Case(name=name, **metadata)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid case metadata: {e}") from e

        self._cases[case.id] = case
        logger.info("Opened case %s (%s)", case.id, name)
        return case

    def get_case(self, case_id: str) -> Case:
        case = self._cases.get(case_id)
        if case is None:
            raise NotFoundError(f"Case not found: {case_id}")
        return case

    def has_case(self, case_id: str) -> bool:
        return case_id in self._cases

    def add_document(self, case_id: str, document_id: str) -> Case:
        """Attach a document to a case. Attaching twice is a no-op."""
        case = self.get_case(case_id)
        if document_id not in case.documents:
            case.documents.append(document_id)
            case.modified_at = _utcnow()
        return case

    def add_documents(self, case_id: str, document_ids: list[str]) -> Case:
        case = self.get_case(case_id)
        for document_id in document_ids:
            if document_id not in case.documents:
                case.documents.append(document_id)
        case.modified_at = _utcnow()
        return case

    def remove_document(self, case_id: str, document_id: str) -> Case:
        case = self.get_case(case_id)
        case.documents = [d for d in case.documents if d != document_id]
        case.modified_at = _utcnow()
        return case

    def get_documents(self, case_id: str) -> list[str]:
        """Return the ids of documents attached to a case."""
        return list(self.get_case(case_id).documents)

    def add_folder(self, case_id: str, folder_id: str) -> Case:
        case = self.get_case(case_id)
        if folder_id not in case.folders:
            case.folders.append(folder_id)
            case.modified_at = _utcnow()
        return case

    def update_status(self, case_id: str, status: str | CaseStatus) -> Case:
        """Move a case to a new status.

        Raises:
            NotFoundError: If the case does not exist.
            InvalidArgumentError: If the status is not a valid case status.
        """
        case = self.get_case(case_id)
        case.status = parse_status(status)
        case.modified_at = _utcnow()
        logger.info("Case %s status -> %s", case_id, case.status.value)
        return case

    def update_case(self, case_id: str, **fields: Any) -> Case:
        """Edit descriptive fields of a case."""
        case = self.get_case(case_id)
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise InvalidArgumentError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        try:
            updated = Case.model_validate({**case.model_dump(), **fields, "modified_at": _utcnow()})
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid case fields: {e}") from e

        self._cases[case_id] = updated
        return updated

    def list_cases(
        self,
        status: str | None = None,
        type: str | None = None,
        client: str | None = None,
    ) -> list[Case]:
        """List cases, filtered by exact status/type and client substring."""
        cases = list(self._cases.values())

        if status:
            cases = [c for c in cases if c.status.value == status]

        if type:
            cases = [c for c in cases if c.type == type]

        if client:
            needle = client.lower()
            cases = [c for c in cases if needle in c.client.lower()]

        return cases

    def delete_case(self, case_id: str) -> Case:
        case = self.get_case(case_id)
        del self._cases[case_id]
        logger.info("Deleted case %s", case_id)
        return case
