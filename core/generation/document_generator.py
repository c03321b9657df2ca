"""Document Generator - scaffolds documents from named templates.

Sections the caller does not fill get placeholder text naming the section,
which the analyzer later reports as incomplete content.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from pydantic import ValidationError

from app.models.document import (
    Document,
    DocumentContent,
    DocumentMetadata,
    DocumentStatus,
    DocumentUpdate,
    Section,
    TemplateDefinition,
)
from core.analysis.lexicon import DEFAULT_AUTHOR, placeholder_for
from core.exceptions import InvalidArgumentError
from core.generation.templates import DEFAULT_TEMPLATES

logger = logging.getLogger("casebinder.document_generator")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentGenerator:
    """Creates and updates template-based documents."""

    NAME_TIMESTAMP_FORMAT = "%Y-%m-%d_%H%M%S"

    def __init__(
        self,
        templates: dict[str, TemplateDefinition] | None = None,
        default_author: str = DEFAULT_AUTHOR,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the generator.

        Args:
            templates: Template registry; defaults to a copy of the built-ins.
            default_author: Author recorded when the caller supplies none.
            clock: Source of timestamps.
        """
        self.templates = dict(templates if templates is not None else DEFAULT_TEMPLATES)
        self.default_author = default_author
        self._clock = clock

    def generate(
        self,
        document_type: str = "memo",
        content: dict[str, Any] | None = None,
        case_id: str | None = None,
        timestamp: datetime | None = None,
    ) -> Document:
        """Generate a new draft document.

        Args:
            document_type: Name of a registered template.
            content: Optional mapping with ``title``, ``author``, ``tags``
                and section texts keyed by section name.
            case_id: Case the document belongs to, if any.
            timestamp: Creation time; defaults to now.

        Returns:
            A version 1 draft Document.

        Raises:
            InvalidArgumentError: If the template is not registered.
        """
        template = self.templates.get(document_type)
        if template is None:
            logger.warning("Rejected unknown document type: %s", document_type)
            raise InvalidArgumentError(f"Unknown document type: {document_type}")

        content = content or {}
        timestamp = timestamp or self._clock()

        document = Document(
            name=f"{template.title}_{timestamp.strftime(self.NAME_TIMESTAMP_FORMAT)}",
            type=document_type,
            case_id=case_id,
            template=template.model_copy(deep=True),
            content=self._build_content(template, content),
            metadata=DocumentMetadata(
                created=timestamp,
                modified=timestamp,
                author=content.get("author") or self.default_author,
                status=DocumentStatus.DRAFT,
            ),
            version=1,
            tags=list(content.get("tags") or []),
            analysis=None,
        )

        logger.info("Generated %s document %s", document_type, document.id)
        return document

    def _build_content(self, template: TemplateDefinition, content: dict[str, Any]) -> DocumentContent:
        """Fill template sections from caller content, using placeholders for gaps."""
        now = self._clock()
        return DocumentContent(
            title=content.get("title") or template.title,
            sections={
                name: Section(
                    heading=name,
                    content=content.get(name) or placeholder_for(name),
                    timestamp=now,
                )
                for name in template.sections
            },
        )

    def get_templates(self) -> dict[str, TemplateDefinition]:
        """Return the registered templates."""
        return dict(self.templates)

    def add_template(self, name: str, definition: TemplateDefinition | dict[str, Any]) -> TemplateDefinition:
        """Register a template, replacing any existing one with the same name.

        Raises:
            InvalidArgumentError: If the name is blank or the definition is invalid.
        """
        if not name or not name.strip():
            raise InvalidArgumentError("Template name must not be empty")

        if not isinstance(definition, TemplateDefinition):
            try:
                definition = TemplateDefinition.model_validate(definition)
            except ValidationError as e:
                raise InvalidArgumentError(f"Invalid template {name!r}: {e}") from e

        self.templates[name] = definition
        logger.info("Registered template %s", name)
        return definition

    def update_document(self, document: Document, update: DocumentUpdate) -> Document:
        """Apply explicit changes, returning a new version of the document.

        Section texts keyed by an unknown section name are appended as new
        sections. Any attached analysis is dropped since it describes the
        previous content.
        """
        now = self._clock()

        sections = {name: section.model_copy() for name, section in document.content.sections.items()}
        for name, text in update.sections.items():
            if name in sections:
                sections[name] = sections[name].model_copy(update={"content": text, "timestamp": now})
            else:
                sections[name] = Section(heading=name, content=text, timestamp=now)

        content = DocumentContent(
            title=update.title if update.title is not None else document.content.title,
            sections=sections,
        )

        metadata_changes: dict[str, Any] = {"modified": now}
        if update.author is not None:
            metadata_changes["author"] = update.author
        if update.status is not None:
            metadata_changes["status"] = update.status

        updated = document.model_copy(update={
            "content": content,
            "metadata": document.metadata.model_copy(update=metadata_changes),
            "version": document.version + 1,
            "tags": list(update.tags) if update.tags is not None else list(document.tags),
            "analysis": None,
        })

        logger.info("Updated document %s to version %d", updated.id, updated.version)
        return updated

