"""
Analysis normalizer.

Turns whatever object the model returned into a well-formed
DocumentAnalysis. Missing or malformed fields get safe defaults; nothing
here raises for bad model output.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from studygenie.core import get_logger, classify_file_type
from studygenie.models import AnalysisSection, DocumentAnalysis, FileType, SectionType

logger = get_logger(__name__, component="normalizer")

DEFAULT_OVERVIEW = "Analysis of uploaded document"
DEFAULT_SECTION_TYPE = SectionType.EXPLANATION.value


def _text(value: Any) -> Optional[str]:
    """Non-empty string or None; other types count as missing."""
    if isinstance(value, str) and value:
        return value
    return None


def _string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    result = []
    for entry in value:
        if isinstance(entry, str):
            result.append(entry)
        elif isinstance(entry, bool):
            result.append("true" if entry else "false")
        elif entry is not None:
            result.append(str(entry))
    return result


def _unique_id(candidate: Optional[str], index: int, used: set) -> str:
    positional = f"section-{index}"
    if candidate and candidate not in used:
        return candidate
    if positional not in used:
        return positional
    suffix = 2
    while f"{positional}-{suffix}" in used:
        suffix += 1
    return f"{positional}-{suffix}"


def normalize_sections(raw_sections: Any) -> List[AnalysisSection]:
    """Normalize the sections list; entries that are not objects become empty sections."""
    if not isinstance(raw_sections, list):
        return []

    sections = []
    used_ids: set = set()
    for index, entry in enumerate(raw_sections):
        if not isinstance(entry, dict):
            entry = {}

        section_id = _unique_id(_text(entry.get("id")), index, used_ids)
        used_ids.add(section_id)

        section_type = _text(entry.get("type")) or DEFAULT_SECTION_TYPE
        if not SectionType.is_known(section_type):
            logger.warning(
                f"Unknown section type '{section_type}', rendering with default template",
                extra={"section_id": section_id},
            )

        sections.append(AnalysisSection(
            id=section_id,
            type=section_type,
            title=_text(entry.get("title")) or f"Section {index + 1}",
            content=_text(entry.get("content")) or "",
            items=_string_list(entry.get("items")),
        ))
    return sections


def normalize_analysis(
    raw: Dict[str, Any],
    file_name: str,
    mime_type: str,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> DocumentAnalysis:
    """
    Build a DocumentAnalysis from a raw model response.

    Args:
        raw: Parsed JSON object from the model
        file_name: Original upload name (title fallback)
        mime_type: Upload MIME type, decides the file type
        now: Upload timestamp (defaults to the current UTC time)
        id_factory: Analysis id generator (defaults to UUID4)
    """
    if not isinstance(raw, dict):
        raw = {}

    analysis = DocumentAnalysis(
        id=(id_factory or (lambda: str(uuid.uuid4())))(),
        file_name=file_name,
        file_type=FileType(classify_file_type(mime_type)),
        uploaded_at=now or datetime.now(timezone.utc),
        title=_text(raw.get("title")) or file_name,
        overview=_text(raw.get("overview")) or DEFAULT_OVERVIEW,
        sections=normalize_sections(raw.get("sections")),
        key_takeaways=_string_list(raw.get("keyTakeaways")) or [],
    )
    logger.debug(
        "Analysis normalized",
        extra={"file_name": file_name, "section_count": len(analysis.sections)},
    )
    return analysis
