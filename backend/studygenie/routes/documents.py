"""
Document routes - list, fetch, render and delete analyzed documents.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..core import get_logger, StoreError
from ..models import Document, DocumentStatus, DeleteDocumentResponse
from ..presentation import AnalysisView, HistoryEntry, build_analysis_view, build_history_view
from ..services.infrastructure.storage import DocumentRepository, get_document_repository

logger = get_logger(__name__, component="document_routes")

router = APIRouter(prefix="/api", tags=["documents"])


def _get_or_404(repository: DocumentRepository, document_id: str) -> Document:
    document = repository.get(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return document


def _list_documents(repository: DocumentRepository) -> List[Document]:
    try:
        return repository.list_all()
    except StoreError as e:
        logger.error("Failed to list documents", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch documents")


@router.get(
    "/documents",
    response_model=List[Document],
    response_model_exclude_none=True,
)
async def list_documents(repository: DocumentRepository = Depends(get_document_repository)):
    """All documents, newest first"""
    return _list_documents(repository)


@router.get(
    "/documents/{document_id}",
    response_model=Document,
    response_model_exclude_none=True,
)
async def get_document(document_id: str, repository: DocumentRepository = Depends(get_document_repository)):
    return _get_or_404(repository, document_id)


@router.get(
    "/documents/{document_id}/view",
    response_model=AnalysisView,
    response_model_exclude_none=True,
)
async def get_document_view(document_id: str, repository: DocumentRepository = Depends(get_document_repository)):
    """Render-ready analysis: templates, icons, labels and table of contents"""
    document = _get_or_404(repository, document_id)
    if document.status != DocumentStatus.COMPLETE or document.analysis is None:
        raise HTTPException(
            status_code=409,
            detail=f"Document analysis is not complete (status: {document.status.value})",
        )
    return build_analysis_view(document.analysis)


@router.get(
    "/history",
    response_model=List[HistoryEntry],
    response_model_exclude_none=True,
)
async def get_history(repository: DocumentRepository = Depends(get_document_repository)):
    """History sidebar entries, newest first"""
    return build_history_view(_list_documents(repository))


@router.delete("/documents/{document_id}", response_model=DeleteDocumentResponse)
async def delete_document(document_id: str, repository: DocumentRepository = Depends(get_document_repository)):
    if not repository.delete(document_id):
        raise HTTPException(status_code=404, detail="Document not found")
    logger.info("Document deleted", extra={"document_id": document_id})
    return DeleteDocumentResponse(success=True)
