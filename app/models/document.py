"""Document data models."""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from app.models.analysis import AnalysisResult


class DocumentStatus(str, Enum):
    """Lifecycle status of a generated document."""
    DRAFT = "draft"
    FINAL = "final"


class TemplateDefinition(BaseModel):
    """A named document scaffold: title plus ordered section names."""
    title: str
    sections: list[str]

    @field_validator("sections")
    @classmethod
    def validate_sections(cls, v: list[str]) -> list[str]:
        """Require at least one section and no duplicate names."""
        if not v:
            raise ValueError("Template must define at least one section")
        if len(set(v)) != len(v):
            raise ValueError("Template section names must be unique")
        return v


class Section(BaseModel):
    """A single titled block of document text."""
    heading: str
    content: str
    timestamp: datetime


class DocumentContent(BaseModel):
    """Title and ordered sections of a document."""
    title: str
    sections: dict[str, Section] = {}


class DocumentMetadata(BaseModel):
    """Authorship and lifecycle information."""
    created: datetime
    modified: datetime
    author: str
    status: DocumentStatus = DocumentStatus.DRAFT


class Document(BaseModel):
    """A legal document generated from a template."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    type: str
    case_id: str | None = None
    template: TemplateDefinition
    content: DocumentContent
    metadata: DocumentMetadata
    version: int = 1
    tags: list[str] = []
    analysis: AnalysisResult | None = None


class DocumentCreate(BaseModel):
    """Schema for creating a new document."""
    document_type: str = "memo"
    case_id: str | None = None
    title: str | None = None
    author: str | None = None
    tags: list[str] = []
    sections: dict[str, str] = {}

    def to_content(self) -> dict[str, object]:
        """Flatten into the content mapping understood by the generator."""
        content: dict[str, object] = dict(self.sections)
        if self.title:
            content["title"] = self.title
        if self.author:
            content["author"] = self.author
        if self.tags:
            content["tags"] = list(self.tags)
        return content


class DocumentUpdate(BaseModel):
    """Explicit changes to apply to an existing document."""
    title: str | None = None
    sections: dict[str, str] = {}
    author: str | None = None
    status: DocumentStatus | None = None
    tags: list[str] | None = None


class DocumentResponse(BaseModel):
    """Response schema for document listings."""
    id: str
    name: str
    type: str
    case_id: str | None
    status: DocumentStatus
    author: str
    version: int
    created: datetime
    modified: datetime
    analyzed: bool

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        """Build the listing view of a document."""
        return cls(
            id=document.id,
            name=document.name,
            type=document.type,
            case_id=document.case_id,
            status=document.metadata.status,
            author=document.metadata.author,
            version=document.version,
            created=document.metadata.created,
            modified=document.metadata.modified,
            analyzed=document.analysis is not None,
        )
