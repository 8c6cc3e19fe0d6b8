"""
API Routes
"""

from .documents import router as documents_router
from .upload import router as upload_router

__all__ = [
    "documents_router",
    "upload_router",
]
