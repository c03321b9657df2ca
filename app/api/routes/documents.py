"""Document generation and management routes."""

from fastapi import APIRouter, Depends, Query, Response

from app.models.document import Document, DocumentCreate, DocumentResponse, DocumentUpdate, TemplateDefinition
from core.manager import LegalDocumentManager, get_manager

router = APIRouter()


@router.post("/", response_model=Document, status_code=201)
async def create_document(
    request: DocumentCreate,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Document:
    """Generate a new document from a template."""
    return manager.create_document(
        case_id=request.case_id,
        document_type=request.document_type,
        content=request.to_content(),
    )


@router.get("/", response_model=list[DocumentResponse])
async def list_documents(
    case_id: str | None = None,
    manager: LegalDocumentManager = Depends(get_manager),
) -> list[DocumentResponse]:
    """List all documents, optionally for one case."""
    return [DocumentResponse.from_document(doc) for doc in manager.list_documents(case_id=case_id)]


@router.get("/templates", response_model=dict[str, TemplateDefinition])
async def list_templates(
    manager: LegalDocumentManager = Depends(get_manager),
) -> dict[str, TemplateDefinition]:
    """List the registered document templates."""
    return manager.get_templates()


@router.put("/templates/{name}", response_model=TemplateDefinition)
async def add_template(
    name: str,
    definition: TemplateDefinition,
    manager: LegalDocumentManager = Depends(get_manager),
) -> TemplateDefinition:
    """Register or replace a document template."""
    return manager.add_template(name, definition)


@router.get("/{document_id}", response_model=Document)
async def get_document(
    document_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Document:
    """Get document by ID."""
    return manager.get_document(document_id)


@router.patch("/{document_id}", response_model=Document)
async def update_document(
    document_id: str,
    update: DocumentUpdate,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Document:
    """Apply changes to a document, bumping its version."""
    return manager.update_document(document_id, update)


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> Response:
    """Delete a document and detach it from its case."""
    manager.delete_document(document_id)
    return Response(status_code=204)


@router.get("/{document_id}/export")
async def export_document(
    document_id: str,
    format: str = Query("txt"),
    manager: LegalDocumentManager = Depends(get_manager),
) -> Response:
    """Download a document as txt, html, json or pdf."""
    exported = manager.export_document(document_id, format)
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
