"""Analysis API routes for document analysis and comparison."""

from fastapi import APIRouter, Depends

from app.models.analysis import AnalysisResult, ComparisonResult
from core.manager import LegalDocumentManager, get_manager

router = APIRouter()


@router.get("/compare", response_model=ComparisonResult)
async def compare_documents(
    first: str,
    second: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> ComparisonResult:
    """Compare vocabulary, size and structure of two documents."""
    return manager.compare_documents(first, second)


@router.post("/{document_id}", response_model=AnalysisResult)
async def analyze_document(
    document_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> AnalysisResult:
    """Analyze a document and attach the result to it.

    Returns summary, key points, legal terms, structure, sentiment, risks,
    recommendations and readability.
    """
    return manager.analyze_document(document_id)


@router.get("/{document_id}", response_model=AnalysisResult)
async def get_analysis(
    document_id: str,
    manager: LegalDocumentManager = Depends(get_manager),
) -> AnalysisResult:
    """Get the analysis attached to a document, running it if missing."""
    document = manager.get_document(document_id)
    if document.analysis is not None:
        return document.analysis
    return manager.analyze_document(document_id)
