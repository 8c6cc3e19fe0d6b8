"""
Render-ready views of analyses and the document history.

Pure functions: they take stored models and return view models that tell
the client which template, icon and label to use for each block. Nothing
here touches the store or the model.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from studygenie.models import (
    CamelModel,
    Document,
    DocumentAnalysis,
    DocumentStatus,
    FileType,
    SectionType,
)

# Sections beyond this count get a table of contents
TOC_MIN_SECTIONS = 3

DEFAULT_TEMPLATE = "default"

# type -> (template, icon, label)
SECTION_PRESENTATION: Dict[str, Tuple[str, str, str]] = {
    SectionType.EXPLANATION.value: ("paragraph", "Lightbulb", "Explanation"),
    SectionType.KEY_POINTS.value: ("bulletList", "Key", "Key Points"),
    SectionType.FORMULA.value: ("monospace", "Calculator", "Formula"),
    SectionType.STEP_BY_STEP.value: ("numberedList", "ListOrdered", "Step-by-Step"),
    SectionType.EXAMPLE.value: ("boxed", "BookOpen", "Example"),
    SectionType.SUMMARY.value: ("paragraph", "FileText", "Summary"),
    SectionType.DEFINITION.value: ("quote", "Quote", "Definition"),
}
UNKNOWN_PRESENTATION = (DEFAULT_TEMPLATE, "FileText", "Content")

FILE_TYPE_ICONS = {
    FileType.PDF: "FileText",
    FileType.IMAGE: "Image",
}

STATUS_BADGES = {
    DocumentStatus.ANALYZING: "Analyzing",
    DocumentStatus.ERROR: "Error",
}


class SectionView(CamelModel):
    id: str
    number: int
    type: str
    template: str
    icon: str
    label: str
    title: str
    content: str
    items: Optional[List[str]] = None
    expanded: bool = True


class TocEntry(CamelModel):
    number: int
    id: str
    title: str


class AnalysisView(CamelModel):
    id: str
    title: str
    overview: str
    file_name: str
    file_type: FileType
    uploaded_at: datetime
    sections: List[SectionView]
    toc: Optional[List[TocEntry]] = None
    key_takeaways: List[str]


class HistoryEntry(CamelModel):
    id: str
    title: str
    file_name: str
    file_type: FileType
    icon: str
    status: DocumentStatus
    badge: Optional[str] = None
    uploaded_at: datetime
    relative_time: str
    file_size: str


def section_presentation(section_type: str, has_items: bool) -> Tuple[str, str, str]:
    """Template, icon and label for a section type.

    List templates need items; without them the block is a paragraph.
    """
    template, icon, label = SECTION_PRESENTATION.get(section_type, UNKNOWN_PRESENTATION)
    if template in ("bulletList", "numberedList") and not has_items:
        template = "paragraph"
    return template, icon, label


def build_analysis_view(analysis: DocumentAnalysis) -> AnalysisView:
    sections = []
    for number, section in enumerate(analysis.sections, start=1):
        template, icon, label = section_presentation(section.type, bool(section.items))
        sections.append(SectionView(
            id=section.id,
            number=number,
            type=section.type,
            template=template,
            icon=icon,
            label=label,
            title=section.title,
            content=section.content,
            items=list(section.items) if section.items is not None else None,
        ))

    toc = None
    if len(sections) > TOC_MIN_SECTIONS:
        toc = [TocEntry(number=s.number, id=s.id, title=s.title) for s in sections]

    return AnalysisView(
        id=analysis.id,
        title=analysis.title,
        overview=analysis.overview,
        file_name=analysis.file_name,
        file_type=analysis.file_type,
        uploaded_at=analysis.uploaded_at,
        sections=sections,
        toc=toc,
        key_takeaways=list(analysis.key_takeaways),
    )


def format_file_size(size: int) -> str:
    """Human-readable size in 1024 steps, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {units[index]}"


def _as_utc(moment: datetime) -> datetime:
    return moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)


def format_relative_time(moment: datetime, now: Optional[datetime] = None) -> str:
    """'Just now', '{n}m ago', '{n}h ago', '{n}d ago', else the ISO date."""
    now = _as_utc(now or datetime.now(timezone.utc))
    moment = _as_utc(moment)
    minutes = int((now - moment).total_seconds() // 60)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return moment.date().isoformat()


def build_history_view(documents: Sequence[Document], now: Optional[datetime] = None) -> List[HistoryEntry]:
    """History list entries, in the order given (the store lists newest first)."""
    now = now or datetime.now(timezone.utc)
    entries = []
    for document in documents:
        entries.append(HistoryEntry(
            id=document.id,
            title=document.analysis.title if document.analysis else document.file_name,
            file_name=document.file_name,
            file_type=document.file_type,
            icon=FILE_TYPE_ICONS[document.file_type],
            status=document.status,
            badge=STATUS_BADGES.get(document.status),
            uploaded_at=document.uploaded_at,
            relative_time=format_relative_time(document.uploaded_at, now),
            file_size=format_file_size(document.file_size),
        ))
    return entries
