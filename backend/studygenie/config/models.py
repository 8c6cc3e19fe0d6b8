"""
Model Configuration for Pipeline Steps

Each step that talks to the model has its own configuration so the model can
be tuned without touching the calling code.

=== BACKEND CONFIGURATION ===

    - USE_VERTEX_AI=false (default): Google Gemini API, requires GEMINI_API_KEY
    - USE_VERTEX_AI=true: Vertex AI, requires GCP_PROJECT_ID (GCP_LOCATION optional)

Set ANALYSIS_MODEL to override the model used for document analysis.
"""

import os
from dataclasses import dataclass, field


@dataclass
class ModelConfig:
    """Configuration for a single model"""
    model_name: str
    description: str = ""


@dataclass
class PipelineModels:
    """
    Model configuration for each step of the study-material pipeline.

    Pipeline Steps:
    1. Analysis - Read an uploaded PDF/image and produce the study breakdown
    """

    analysis: ModelConfig = field(default_factory=lambda: ModelConfig(
        model_name=os.getenv("ANALYSIS_MODEL", "gemini-2.5-flash"),
        description="Student-friendly breakdown of uploaded material"
    ))


DEFAULT_PIPELINE_MODELS = PipelineModels()

ACTIVE_PIPELINE = DEFAULT_PIPELINE_MODELS


def get_model_config(step: str) -> ModelConfig:
    """
    Get the model configuration for a specific pipeline step.

    Args:
        step: Pipeline step name (e.g., 'analysis')

    Returns:
        ModelConfig for the specified step
    """
    if hasattr(ACTIVE_PIPELINE, step):
        return getattr(ACTIVE_PIPELINE, step)
    raise ValueError(f"Unknown pipeline step: {step}")
