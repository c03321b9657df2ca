"""Folder routes."""

from fastapi import APIRouter, Depends

from app.models.files import Folder, FolderCreate, FolderDocument
from core.manager import LegalDocumentManager, get_manager

router = APIRouter()


@router.post("/", response_model=Folder, status_code=201)
async def create_folder(
    request: FolderCreate,
    case_id: str | None = None,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Folder:
    """Create a folder, optionally nested and attached to a case."""
    return manager.create_folder(request.name, parent_id=request.parent_id, case_id=case_id)


@router.get("/{folder_id}", response_model=Folder)
async def get_folder(
    folder_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Folder:
    """Get folder by ID."""
    return manager.get_folder(folder_id)


@router.post("/{folder_id}/documents", response_model=Folder)
async def add_folder_document(
    folder_id: str,
    request: FolderDocument,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Folder:
    """File a document into a folder."""
    return manager.add_document_to_folder(folder_id, request.document_id)
