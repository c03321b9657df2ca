"""Case management routes."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.models.case import Case, CaseCreate, CaseStatusUpdate
from app.models.document import DocumentResponse
from app.models.files import UploadedFile
from core.manager import LegalDocumentManager, get_manager

router = APIRouter()


@router.post("/", response_model=Case, status_code=201)
async def create_case(
    request: CaseCreate,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Case:
    """Open a new case."""
    return manager.create_case(request.name, request.metadata())


@router.get("/", response_model=list[Case])
async def list_cases(
    status: str | None = None,
    type: str | None = None,
    client: str | None = None,
    manager: LegalDocumentManager = Depends(get_manager),
) -> list[Case]:
    """List cases filtered by status, type or client name."""
    return manager.list_cases(status=status, type=type, client=client)


@router.get("/{case_id}", response_model=Case)
async def get_case(
    case_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Case:
    """Get case by ID."""
    return manager.get_case(case_id)


@router.patch("/{case_id}/status", response_model=Case)
async def update_case_status(
    case_id: str,
    request: CaseStatusUpdate,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Case:
    """Change the status of a case."""
    return manager.update_case_status(case_id, request.status)


@router.get("/{case_id}/documents", response_model=list[DocumentResponse])
async def list_case_documents(
    case_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> list[DocumentResponse]:
    """List the documents attached to a case."""
    return [DocumentResponse.from_document(doc) for doc in manager.get_case_documents(case_id)]


@router.post("/{case_id}/uploads", response_model=UploadedFile, status_code=201)
async def upload_case_file(
    case_id: str,
    file: UploadFile = File(...),
    manager: LegalDocumentManager = Depends(get_manager),
) -> UploadedFile:
    """Upload a file to a case, extracting text from PDF and TXT files."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    content = await file.read()
    return manager.upload_file(file.filename, content, case_id=case_id)
