"""
Use cases - business operations independent of HTTP.
"""

from .base import UseCase
from .document_upload_use_case import (
    DocumentUploadRequest,
    DocumentUploadUseCase,
    DEFAULT_ERROR_MESSAGE,
)

__all__ = [
    "UseCase",
    "DocumentUploadRequest",
    "DocumentUploadUseCase",
    "DEFAULT_ERROR_MESSAGE",
]
