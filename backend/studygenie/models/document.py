"""
Document schemas and status constants

A Document is one uploaded file plus its lifecycle status and, once
complete, its analysis.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from .analysis import CamelModel, DocumentAnalysis, FileType, as_utc


class DocumentStatus(str, Enum):
    """Lifecycle: uploading -> analyzing -> complete | error"""

    # Kept for compatibility with stored data; uploads enter at ANALYZING.
    UPLOADING = "uploading"
    ANALYZING = "analyzing"
    COMPLETE = "complete"
    ERROR = "error"

    def is_terminal(self) -> bool:
        """Check if this status is a terminal state (no further transitions)."""
        return self in (DocumentStatus.COMPLETE, DocumentStatus.ERROR)


class DocumentCreate(CamelModel):
    """Insert payload for the document store (id is generated)"""
    file_name: str
    file_type: FileType
    file_size: int = Field(ge=0)
    uploaded_at: datetime
    status: DocumentStatus = DocumentStatus.ANALYZING
    analysis: Optional[DocumentAnalysis] = None
    error_message: Optional[str] = None

    @field_validator("uploaded_at")
    @classmethod
    def _uploaded_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def _status_matches_payload(self) -> "DocumentCreate":
        # analysis only on complete records, errorMessage only on failed ones
        if (self.analysis is not None) != (self.status == DocumentStatus.COMPLETE):
            raise ValueError(f"analysis must be set exactly when status is complete (status={self.status.value})")
        if (self.error_message is not None) != (self.status == DocumentStatus.ERROR):
            raise ValueError(f"errorMessage must be set exactly when status is error (status={self.status.value})")
        return self


class Document(DocumentCreate):
    """A stored document record"""
    id: str
    revision: int = 1


class DeleteDocumentResponse(CamelModel):
    """Response body of a successful delete"""
    success: bool = True
