"""
Application configuration and settings
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .constants import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    ALLOWED_MIME_TYPES,
    DEFAULT_UPLOAD_NAMES,
    MAX_UPLOAD_SIZE,
    ANALYSIS_TIMEOUT_SECONDS,
    ANALYSIS_MAX_OUTPUT_TOKENS,
)

# Model configuration
from .models import (
    ModelConfig,
    PipelineModels,
    ACTIVE_PIPELINE,
    DEFAULT_PIPELINE_MODELS,
    get_model_config,
)

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
    "ModelConfig",
    "PipelineModels",
    "ACTIVE_PIPELINE",
    "DEFAULT_PIPELINE_MODELS",
    "get_model_config",
]
