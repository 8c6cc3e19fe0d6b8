"""
Pydantic models for documents, analyses and API responses
"""

from .analysis import (
    CamelModel,
    SectionType,
    FileType,
    AnalysisSection,
    DocumentAnalysis,
)
from .document import (
    DocumentStatus,
    DocumentCreate,
    Document,
    DeleteDocumentResponse,
)

__all__ = [
    "CamelModel",
    "SectionType",
    "FileType",
    "AnalysisSection",
    "DocumentAnalysis",
    "DocumentStatus",
    "DocumentCreate",
    "Document",
    "DeleteDocumentResponse",
]
