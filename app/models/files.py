"""Folder and upload data models."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Folder(BaseModel):
    """A folder in the document tree. Parent and children are referenced by id."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    parent_id: str | None = None
    children: list[str] = []
    documents: list[str] = []
    created: datetime = Field(default_factory=_utcnow)
    modified: datetime = Field(default_factory=_utcnow)


class FolderCreate(BaseModel):
    """Schema for creating a folder."""
    name: str
    parent_id: str | None = None


class FolderDocument(BaseModel):
    """Request body for filing a document into a folder."""
    document_id: str


class UploadedFile(BaseModel):
    """An uploaded file registered against an optional case."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    filename: str
    extension: str
    size_bytes: int
    case_id: str | None = None
    uploaded_at: datetime = Field(default_factory=_utcnow)
    page_count: int = 0
    extracted_text: str | None = None
