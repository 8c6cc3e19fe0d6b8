"""
Upload validation helpers.

Centralized checks run before any document record is created, so that a
rejected upload never leaves a trace in the store.

Functions:
    validate_file_type: Check the MIME type against the allow-list
    validate_file_size: Check the byte count against the size bound
    validate_upload: Run both checks
    classify_file_type: Map a MIME type to the stored file-type tag
"""

from typing import Optional

from studygenie.config import ALLOWED_MIME_TYPES, MAX_UPLOAD_SIZE
from studygenie.core.exceptions import UploadValidationError


def validate_file_type(content_type: Optional[str]) -> str:
    """
    Validate that an upload's MIME type is allowed.

    Args:
        content_type: MIME type from the upload request (e.g. "application/pdf")

    Returns:
        The normalized (lowercase, parameters stripped) MIME type

    Raises:
        UploadValidationError: if the type is missing or not in the allow-list

    Example:
        >>> validate_file_type("image/PNG")
        'image/png'
    """
    normalized = (content_type or "").split(";")[0].strip().lower()
    if normalized not in ALLOWED_MIME_TYPES:
        raise UploadValidationError(
            "Invalid file type. Only PDF, JPG, and PNG are allowed."
        )
    return normalized


def validate_file_size(size: int, max_size: Optional[int] = None) -> int:
    """
    Validate an upload's size in bytes.

    Raises:
        UploadValidationError: if the file is empty or larger than max_size
    """
    limit = MAX_UPLOAD_SIZE if max_size is None else max_size
    if size <= 0:
        raise UploadValidationError("Uploaded file is empty.")
    if size > limit:
        raise UploadValidationError(
            f"File too large. Maximum size: {limit / (1024 * 1024):.0f}MB"
        )
    return size


def validate_upload(content_type: Optional[str], size: int, max_size: Optional[int] = None) -> str:
    """Validate type and size; returns the normalized MIME type."""
    mime_type = validate_file_type(content_type)
    validate_file_size(size, max_size)
    return mime_type


def classify_file_type(mime_type: str) -> str:
    """Stored file-type tag: "pdf" for anything naming pdf, "image" otherwise."""
    return "pdf" if "pdf" in (mime_type or "").lower() else "image"
