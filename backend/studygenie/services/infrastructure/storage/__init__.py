"""Storage layer - document persistence."""

from .document_repository import (
    DocumentRepository,
    InMemoryDocumentRepository,
    get_document_repository,
)

__all__ = [
    "DocumentRepository",
    "InMemoryDocumentRepository",
    "get_document_repository",
]
