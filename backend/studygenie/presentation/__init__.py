"""Presentation layer - render-ready views for the client."""

from .view import (
    AnalysisView,
    SectionView,
    TocEntry,
    HistoryEntry,
    build_analysis_view,
    build_history_view,
    format_file_size,
    format_relative_time,
    section_presentation,
)

__all__ = [
    "AnalysisView",
    "SectionView",
    "TocEntry",
    "HistoryEntry",
    "build_analysis_view",
    "build_history_view",
    "format_file_size",
    "format_relative_time",
    "section_presentation",
]
