"""
Prompt templates.

Usage:
    from studygenie.services.infrastructure.llm.prompting_engine.prompts import STUDY_ANALYSIS_USER

    prompt = STUDY_ANALYSIS_USER.format(file_name="notes.pdf")
"""

from .base import PromptTemplate
from .analysis import STUDY_ANALYSIS_SYSTEM, STUDY_ANALYSIS_USER


__all__ = [
    "PromptTemplate",
    "STUDY_ANALYSIS_SYSTEM",
    "STUDY_ANALYSIS_USER",
]
