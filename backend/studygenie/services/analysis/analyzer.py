"""
Study material analyzer - the model collaborator of the upload flow.

Sends the uploaded file as an inline part together with the study-material
instructions and returns the raw JSON object the model produced. Shaping
that object into a DocumentAnalysis is the normalizer's job.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from studygenie.config import ANALYSIS_MAX_OUTPUT_TOKENS, ANALYSIS_TIMEOUT_SECONDS
from studygenie.core import get_logger, AnalysisError
from studygenie.services.infrastructure.llm.prompting_engine import PromptingEngine, PromptConfig
from studygenie.services.infrastructure.llm.prompting_engine.prompts import (
    STUDY_ANALYSIS_SYSTEM,
    STUDY_ANALYSIS_USER,
)

logger = get_logger(__name__, component="analyzer")


class DocumentAnalyzer(ABC):
    """Produces a raw analysis object for one uploaded file."""

    @abstractmethod
    async def analyze(self, content: bytes, file_name: str, mime_type: str) -> Dict[str, Any]:
        """
        Analyze the file.

        Returns:
            The model's JSON object, unvalidated

        Raises:
            AnalysisError: the call failed, timed out or returned no JSON object
        """
        pass


class StudyMaterialAnalyzer(DocumentAnalyzer):
    """Gemini-backed analyzer. One attempt per upload, bounded by a timeout."""

    def __init__(
        self,
        engine: Optional[PromptingEngine] = None,
        timeout: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ):
        self._engine = engine
        self.timeout = timeout if timeout is not None else ANALYSIS_TIMEOUT_SECONDS
        self.max_output_tokens = max_output_tokens or ANALYSIS_MAX_OUTPUT_TOKENS

    @property
    def engine(self) -> PromptingEngine:
        # Built on first use so a missing credential fails the analysis, not the app
        if self._engine is None:
            self._engine = PromptingEngine("analysis")
        return self._engine

    def _build_file_part(self, content: bytes, mime_type: str) -> Any:
        return self.engine.types.Part.from_bytes(data=content, mime_type=mime_type)

    async def analyze(self, content: bytes, file_name: str, mime_type: str) -> Dict[str, Any]:
        prompt = STUDY_ANALYSIS_USER.format(file_name=file_name)
        config = PromptConfig(
            response_format="json",
            max_output_tokens=self.max_output_tokens,
            timeout=self.timeout,
            system_instruction=STUDY_ANALYSIS_SYSTEM.template,
        )

        result = await self.engine.generate(
            prompt=prompt,
            config=config,
            contents=[self._build_file_part(content, mime_type), prompt],
            context={"file_name": file_name, "mime_type": mime_type},
        )

        if not result.get("success"):
            raise AnalysisError(result.get("error") or "Failed to analyze document")

        if not result.get("response"):
            raise AnalysisError("No response from AI")

        parsed = result.get("parsed_json")
        if not isinstance(parsed, dict):
            logger.warning(
                "Model response held no JSON object",
                extra={"file_name": file_name, "response_length": len(result["response"])},
            )
            raise AnalysisError("AI response could not be parsed as JSON")

        logger.info(
            "Analysis received",
            extra={
                "file_name": file_name,
                "has_sections": isinstance(parsed.get("sections"), list),
                "usage": result.get("usage") or {},
            },
        )
        return parsed


_analyzer: Optional[DocumentAnalyzer] = None


def get_analyzer() -> DocumentAnalyzer:
    """Get the process-wide analyzer (FastAPI dependency)."""
    global _analyzer
    if _analyzer is None:
        _analyzer = StudyMaterialAnalyzer()
    return _analyzer
