"""
Document repository - data access for uploaded documents.

Implements the Repository pattern so the upload flow and routes never touch
the backing map directly. The in-memory implementation is volatile (a
restart loses every document) and unsynchronized: concurrent updates of
the same id are last-write-wins unless the caller passes expected_revision.

Classes:
    DocumentRepository: Abstract interface for document data access
    InMemoryDocumentRepository: dict-backed implementation
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import ValidationError

from studygenie.core import get_logger, StoreError, StaleRevisionError
from studygenie.models import Document, DocumentCreate

logger = get_logger(__name__, component="document_repository")

# Fields an update may not touch
_PROTECTED_FIELDS = frozenset({"id", "revision"})


class DocumentRepository(ABC):
    """
    Abstract repository for document data access.

    Returned records are snapshots; mutating them does not change the store.
    """

    @abstractmethod
    def create(self, data: DocumentCreate) -> Document:
        """
        Store a new document under a freshly generated id.

        Raises:
            StoreError: if no unused id could be generated
        """
        pass

    @abstractmethod
    def get(self, document_id: str) -> Optional[Document]:
        """Retrieve a document by id, or None if absent."""
        pass

    @abstractmethod
    def update(
        self,
        document_id: str,
        fields: Mapping[str, Any],
        expected_revision: Optional[int] = None,
    ) -> Optional[Document]:
        """
        Shallow-merge fields into an existing document.

        Each named field replaces the stored value wholesale (the nested
        analysis is never deep-merged).

        Args:
            document_id: Document to update
            fields: Field name (snake_case) to new value
            expected_revision: If given, the update only applies when the
                stored revision matches

        Returns:
            The updated document, or None if the id is unknown

        Raises:
            StaleRevisionError: expected_revision does not match
            StoreError: unknown or protected field, or invalid value
        """
        pass

    @abstractmethod
    def delete(self, document_id: str) -> bool:
        """Delete a document; returns True if one existed."""
        pass

    @abstractmethod
    def list_all(self) -> List[Document]:
        """All documents, newest upload first."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored documents."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every document."""
        pass


class InMemoryDocumentRepository(DocumentRepository):
    """dict-backed document repository for a single process."""

    MAX_ID_ATTEMPTS = 5

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self._documents: Dict[str, Document] = {}
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def _new_id(self) -> str:
        for _ in range(self.MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._documents:
                return candidate
        raise StoreError(f"Could not generate a unique document id after {self.MAX_ID_ATTEMPTS} attempts")

    def create(self, data: DocumentCreate) -> Document:
        document = Document(id=self._new_id(), revision=1, **dict(data))
        self._documents[document.id] = document
        logger.debug("Document created", extra={"document_id": document.id, "status": document.status.value})
        return document.model_copy(deep=True)

    def get(self, document_id: str) -> Optional[Document]:
        document = self._documents.get(document_id)
        return document.model_copy(deep=True) if document else None

    def update(
        self,
        document_id: str,
        fields: Mapping[str, Any],
        expected_revision: Optional[int] = None,
    ) -> Optional[Document]:
        existing = self._documents.get(document_id)
        if existing is None:
            return None

        if expected_revision is not None and expected_revision != existing.revision:
            raise StaleRevisionError(document_id, expected_revision, existing.revision)

        unknown = set(fields) - set(Document.model_fields)
        if unknown:
            raise StoreError(f"Unknown document fields: {sorted(unknown)}")
        protected = set(fields) & _PROTECTED_FIELDS
        if protected:
            raise StoreError(f"Fields cannot be updated: {sorted(protected)}")

        merged = {name: getattr(existing, name) for name in Document.model_fields}
        merged.update(fields)
        merged["revision"] = existing.revision + 1

        try:
            updated = Document.model_validate(merged)
        except ValidationError as e:
            raise StoreError(f"Invalid update for document {document_id}: {e}") from e

        self._documents[document_id] = updated
        logger.debug("Document updated", extra={
            "document_id": document_id,
            "fields": sorted(fields),
            "revision": updated.revision,
        })
        return updated.model_copy(deep=True)

    def delete(self, document_id: str) -> bool:
        removed = self._documents.pop(document_id, None) is not None
        if removed:
            logger.debug("Document deleted", extra={"document_id": document_id})
        return removed

    def list_all(self) -> List[Document]:
        documents = sorted(self._documents.values(), key=lambda d: d.uploaded_at, reverse=True)
        return [document.model_copy(deep=True) for document in documents]

    def count(self) -> int:
        return len(self._documents)

    def clear(self) -> None:
        self._documents.clear()


_document_repository: Optional[DocumentRepository] = None


def get_document_repository() -> DocumentRepository:
    """Get the process-wide document repository (FastAPI dependency)."""
    global _document_repository
    if _document_repository is None:
        _document_repository = InMemoryDocumentRepository()
    return _document_repository
