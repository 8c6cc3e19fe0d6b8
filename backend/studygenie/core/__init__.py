"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - llm_logger.py: Model request/response logging
    - exceptions.py: Domain exception hierarchy
    - security.py: Filename sanitization
    - validation.py: Upload validation

Usage:
    from studygenie.core import get_logger, sanitize_filename, validate_upload
"""

# Logging
from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_document_id,
    clear_context,
    LogTimer,
)

# Exceptions
from .exceptions import (
    StudyGenieError,
    UploadValidationError,
    DocumentNotFoundError,
    InfrastructureError,
    AnalysisError,
    StoreError,
    StaleRevisionError,
    AnalysisFailedError,
)

# Security
from .security import sanitize_filename

# Validation
from .validation import (
    validate_file_type,
    validate_file_size,
    validate_upload,
    classify_file_type,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_document_id",
    "clear_context",
    "LogTimer",
    # Exceptions
    "StudyGenieError",
    "UploadValidationError",
    "DocumentNotFoundError",
    "InfrastructureError",
    "AnalysisError",
    "StoreError",
    "StaleRevisionError",
    "AnalysisFailedError",
    # Security
    "sanitize_filename",
    # Validation
    "validate_file_type",
    "validate_file_size",
    "validate_upload",
    "classify_file_type",
]
