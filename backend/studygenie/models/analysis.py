"""
Schemas for the study-material analysis

The analysis is produced once from one model response and is immutable
afterwards. Wire names are camelCase (fileName, keyTakeaways, ...).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def as_utc(value: datetime) -> datetime:
    """Timestamps without a timezone are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SectionType(str, Enum):
    """The closed set of section kinds the UI knows how to render"""
    EXPLANATION = "explanation"
    KEY_POINTS = "keyPoints"
    FORMULA = "formula"
    STEP_BY_STEP = "stepByStep"
    EXAMPLE = "example"
    SUMMARY = "summary"
    DEFINITION = "definition"

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """True if value names one of the closed-set section types."""
        return isinstance(value, str) and value in cls._value2member_map_


class FileType(str, Enum):
    """Kind of uploaded file"""
    PDF = "pdf"
    IMAGE = "image"


class AnalysisSection(CamelModel):
    """One typed block of the breakdown"""
    model_config = ConfigDict(frozen=True)

    id: str
    # Not constrained to SectionType: unknown values from the model are kept
    # and rendered with the default template.
    type: str = SectionType.EXPLANATION.value
    title: str
    content: str = ""
    items: Optional[List[str]] = None


class DocumentAnalysis(CamelModel):
    """Structured, student-friendly breakdown of one uploaded document"""
    model_config = ConfigDict(frozen=True)

    id: str
    file_name: str
    file_type: FileType
    uploaded_at: datetime
    title: str
    overview: str
    sections: List[AnalysisSection]
    key_takeaways: List[str]

    @field_validator("uploaded_at")
    @classmethod
    def _uploaded_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def _section_ids_unique(self) -> "DocumentAnalysis":
        seen = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"duplicate section id: {section.id}")
            seen.add(section.id)
        return self
