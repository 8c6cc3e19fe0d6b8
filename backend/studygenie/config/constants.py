"""
Constants configuration

API settings, CORS configuration and upload limits.
"""

import os

# API settings
API_TITLE = "StudyGenie API"
API_DESCRIPTION = "Student-friendly AI breakdowns of uploaded study material"
API_VERSION = "1.0.0"

# CORS origins (comma separated override via CORS_ORIGINS)
_DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
]
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", ",".join(_DEFAULT_CORS_ORIGINS)).split(",")
    if origin.strip()
]

# File upload settings
ALLOWED_MIME_TYPES = [
    "application/pdf",
    "image/jpeg",
    "image/jpg",
    "image/png",
]

# Stored name when the client-supplied one sanitizes to nothing
DEFAULT_UPLOAD_NAMES = {
    "application/pdf": "upload.pdf",
    "image/jpeg": "upload.jpg",
    "image/jpg": "upload.jpg",
    "image/png": "upload.png",
}

MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(20 * 1024 * 1024)))  # 20MB default

# Analysis call settings
ANALYSIS_TIMEOUT_SECONDS = float(os.getenv("ANALYSIS_TIMEOUT_SECONDS", "120"))
ANALYSIS_MAX_OUTPUT_TOKENS = int(os.getenv("ANALYSIS_MAX_OUTPUT_TOKENS", "4096"))

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "ALLOWED_MIME_TYPES",
    "DEFAULT_UPLOAD_NAMES",
    "MAX_UPLOAD_SIZE",
    "ANALYSIS_TIMEOUT_SECONDS",
    "ANALYSIS_MAX_OUTPUT_TOKENS",
]
