"""
Security utilities for uploaded file metadata
"""

import os

from .logging import get_logger

logger = get_logger(__name__, component="security")


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a client-supplied filename before it is stored or logged

    Removes:
    - Directory components (/, \\)
    - Null bytes and control characters
    - Leading dots
    - Characters that are invalid on common file systems

    Raises:
        ValueError: If filename is empty or invalid after sanitization

    Example:
        >>> sanitize_filename("../../notes/week1.pdf")
        'week1.pdf'
    """
    original_filename = filename

    # Handle both separators regardless of host OS
    filename = os.path.basename(filename.replace("\\", "/"))
    filename = filename.replace('\x00', '')
    filename = ''.join(char for char in filename if 31 < ord(char) != 127)

    for char in '<>:"|?*':
        filename = filename.replace(char, '')

    filename = filename.strip().lstrip('.').strip()[:255]

    if not filename or filename.replace('.', '') == '':
        logger.warning("Filename sanitization resulted in empty string", extra={
            "original": original_filename
        })
        raise ValueError("Invalid filename after sanitization")

    if filename != original_filename:
        logger.info("Filename sanitized", extra={
            "original": original_filename,
            "sanitized": filename
        })

    return filename

