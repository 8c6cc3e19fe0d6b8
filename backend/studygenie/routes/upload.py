"""
Upload route

Reads the multipart file with a streaming size guard, then delegates to
DocumentUploadUseCase. The request returns once the analysis has finished
(complete document) or failed (500 with the error record's id).
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from ..config import MAX_UPLOAD_SIZE
from ..core import (
    get_logger,
    validate_file_size,
    AnalysisFailedError,
    DocumentNotFoundError,
    UploadValidationError,
)
from ..models import Document
from ..services.analysis import DocumentAnalyzer, get_analyzer
from ..services.infrastructure.storage import DocumentRepository, get_document_repository
from ..services.use_cases import DocumentUploadRequest, DocumentUploadUseCase

logger = get_logger(__name__, component="upload_routes")

router = APIRouter(prefix="/api", tags=["upload"])

CHUNK_SIZE = 1024 * 1024


async def _read_limited(file: UploadFile, max_size: int) -> bytes:
    """Read the upload in chunks, rejecting it as soon as it exceeds max_size."""
    size = 0
    chunks = []
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        size += len(chunk)
        if size > max_size:
            logger.warning("File too large", extra={
                "size": size,
                "max_size": max_size,
                "file_name": file.filename,
            })
            validate_file_size(size, max_size)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/upload",
    response_model=Document,
    response_model_exclude_none=True,
)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    repository: DocumentRepository = Depends(get_document_repository),
    analyzer: DocumentAnalyzer = Depends(get_analyzer),
):
    """
    Upload a PDF or image and return its analysis

    Errors:
    - 400: no file, invalid type, empty or too large
    - 500: analysis failed (body carries detail and documentId)
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        content = await _read_limited(file, MAX_UPLOAD_SIZE)
        logger.info("File upload received", extra={
            "file_name": file.filename,
            "size": len(content),
            "content_type": file.content_type,
        })

        use_case = DocumentUploadUseCase(repository, analyzer)
        return await use_case.execute(DocumentUploadRequest(
            content=content,
            file_name=file.filename or "upload",
            content_type=file.content_type,
            max_size_bytes=MAX_UPLOAD_SIZE,
        ))
    except UploadValidationError as e:
        logger.warning("Upload rejected", extra={"file_name": file.filename, "error": str(e)})
        raise HTTPException(status_code=400, detail=str(e))
    except AnalysisFailedError as e:
        document_id = e.document.id if e.document is not None else None
        return JSONResponse(
            status_code=500,
            content={"detail": e.message, "documentId": document_id},
        )
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error("Upload failed", extra={
            "file_name": file.filename,
            "error": str(e),
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to upload document")
