"""Study material analysis: model collaborator and response normalizer."""

from .analyzer import DocumentAnalyzer, StudyMaterialAnalyzer, get_analyzer
from .normalizer import normalize_analysis, normalize_sections, DEFAULT_OVERVIEW

__all__ = [
    "DocumentAnalyzer",
    "StudyMaterialAnalyzer",
    "get_analyzer",
    "normalize_analysis",
    "normalize_sections",
    "DEFAULT_OVERVIEW",
]
