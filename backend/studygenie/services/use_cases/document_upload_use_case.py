"""
Document upload use case.

Encapsulates the upload-and-analyze flow:
    - Validates the file type and size
    - Creates the document record in analyzing status
    - Runs the analyzer and normalizes its output
    - Moves the record to complete (with analysis) or error (with message)

Classes:
    DocumentUploadRequest: Input for one upload
    DocumentUploadUseCase: Main use case implementation
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from studygenie.config import DEFAULT_UPLOAD_NAMES
from studygenie.core import (
    get_logger,
    set_document_id,
    LogTimer,
    sanitize_filename,
    validate_upload,
    classify_file_type,
    AnalysisFailedError,
    DocumentNotFoundError,
)
from studygenie.models import Document, DocumentCreate, DocumentStatus, FileType
from studygenie.services.analysis import DocumentAnalyzer, normalize_analysis
from studygenie.services.infrastructure.storage import DocumentRepository

from .base import UseCase

logger = get_logger(__name__, component="upload_use_case")

DEFAULT_ERROR_MESSAGE = "Failed to analyze document"
CANCELLED_ERROR_MESSAGE = "Analysis was cancelled"


@dataclass
class DocumentUploadRequest:
    """
    Request object for the upload operation.

    Attributes:
        content: Raw file bytes
        file_name: Name supplied by the client (sanitized before storing)
        content_type: MIME type supplied by the client
        max_size_bytes: Optional override of the configured upload limit
    """
    content: bytes
    file_name: str
    content_type: Optional[str]
    max_size_bytes: Optional[int] = None


class DocumentUploadUseCase(UseCase[DocumentUploadRequest, Document]):
    """
    Use case for uploading and analyzing one document.

    State machine: analyzing -> complete | error. There is no retry; a
    failed analysis leaves a permanent error record.

    Error Handling:
        - UploadValidationError before any record is created
        - AnalysisFailedError (carrying the error record) when analysis fails
    """

    def __init__(self, repository: DocumentRepository, analyzer: DocumentAnalyzer):
        self.repository = repository
        self.analyzer = analyzer

    async def execute(self, request: DocumentUploadRequest) -> Document:
        mime_type = validate_upload(request.content_type, len(request.content), request.max_size_bytes)

        try:
            file_name = sanitize_filename(request.file_name or "")
        except ValueError:
            file_name = DEFAULT_UPLOAD_NAMES.get(mime_type, "upload")
            logger.info("Using default file name", extra={"original": request.file_name, "sanitized": file_name})

        document = self.repository.create(DocumentCreate(
            file_name=file_name,
            file_type=FileType(classify_file_type(mime_type)),
            file_size=len(request.content),
            uploaded_at=datetime.now(timezone.utc),
            status=DocumentStatus.ANALYZING,
        ))
        set_document_id(document.id)
        logger.info(
            "Document created, starting analysis",
            extra={"file_name": file_name, "file_size": document.file_size, "mime_type": mime_type},
        )

        try:
            with LogTimer(logger, f"analysis of {file_name}"):
                raw = await self.analyzer.analyze(request.content, file_name, mime_type)
                analysis = normalize_analysis(raw, file_name, mime_type)
        except asyncio.CancelledError:
            self.repository.update(document.id, {
                "status": DocumentStatus.ERROR,
                "error_message": CANCELLED_ERROR_MESSAGE,
            })
            logger.warning("Document analysis cancelled", extra={"file_name": file_name})
            raise
        except Exception as e:
            message = str(e) or DEFAULT_ERROR_MESSAGE
            failed = self.repository.update(document.id, {
                "status": DocumentStatus.ERROR,
                "error_message": message,
            })
            logger.error(
                "Document analysis failed",
                extra={"file_name": file_name, "error": message, "error_type": type(e).__name__},
            )
            raise AnalysisFailedError(message, document=failed or document) from e

        completed = self.repository.update(document.id, {
            "status": DocumentStatus.COMPLETE,
            "analysis": analysis,
        })
        if completed is None:
            # Deleted while the analysis was running
            raise DocumentNotFoundError(document.id)
        logger.info(
            "Document analysis complete",
            extra={"section_count": len(analysis.sections)},
        )
        return completed
