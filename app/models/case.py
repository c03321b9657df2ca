"""Case data models."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class CaseStatus(str, Enum):
    """Lifecycle status of a legal case."""
    OPEN = "open"
    ACTIVE = "active"
    PENDING = "pending"
    CLOSED = "closed"
    ARCHIVED = "archived"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Case(BaseModel):
    """A legal matter grouping documents, folders and parties."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    status: CaseStatus = CaseStatus.OPEN
    type: str = "general"
    client: str = ""
    opponent: str = ""
    court_name: str = ""
    case_number: str = ""
    judge: str = ""
    description: str = ""
    priority: str = "medium"
    created_at: datetime = Field(default_factory=_utcnow)
    modified_at: datetime = Field(default_factory=_utcnow)
    created_by: str = "System"
    due_date: datetime | None = None
    documents: list[str] = []
    folders: list[str] = []
    tags: list[str] = []
    custom_fields: dict[str, Any] = {}


class CaseCreate(BaseModel):
    """Schema for opening a new case."""
    name: str
    status: CaseStatus | None = None
    type: str | None = None
    client: str | None = None
    opponent: str | None = None
    court_name: str | None = None
    case_number: str | None = None
    judge: str | None = None
    description: str | None = None
    priority: str | None = None
    created_by: str | None = None
    due_date: datetime | None = None
    tags: list[str] | None = None
    custom_fields: dict[str, Any] | None = None

    def metadata(self) -> dict[str, Any]:
        """Return only the fields the caller actually supplied."""
        return self.model_dump(exclude={"name"}, exclude_none=True)


class CaseStatusUpdate(BaseModel):
    """Request body for changing a case status."""
    status: str
