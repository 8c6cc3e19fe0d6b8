"""
Core Exceptions
Standardized base exceptions for the application.

Use cases raise these; routes translate them into HTTP responses.
"""

from typing import Any, Optional


class StudyGenieError(Exception):
    """Base exception for all application errors."""
    pass


class UploadValidationError(StudyGenieError):
    """Uploaded file was rejected before any document was created."""
    pass


class DocumentNotFoundError(StudyGenieError):
    """No document exists with the requested id."""

    def __init__(self, document_id: str):
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id


class InfrastructureError(StudyGenieError):
    """Base exception for infrastructure errors (LLM, Storage, etc)."""
    pass


class AnalysisError(InfrastructureError):
    """The analysis model call failed, timed out or returned unusable output."""
    pass


class StoreError(InfrastructureError):
    """The document store could not complete an operation."""
    pass


class StaleRevisionError(StoreError):
    """An update was made against an outdated document revision."""

    def __init__(self, document_id: str, expected: int, actual: int):
        super().__init__(
            f"Document {document_id} is at revision {actual}, expected {expected}"
        )
        self.document_id = document_id
        self.expected = expected
        self.actual = actual


class AnalysisFailedError(StudyGenieError):
    """Upload finished with the document in error status.

    Carries the stored document so callers can report its id.
    """

    def __init__(self, message: str, document: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.document = document
