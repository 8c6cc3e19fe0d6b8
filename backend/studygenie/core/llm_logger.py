"""
LLM Request/Response Logger

Logs every model interaction:
- Shortened request data (prompt text, config, attachment sizes)
- Response size, timing and token usage
- Errors

Usage:
    from studygenie.core.llm_logger import get_llm_logger

    llm_logger = get_llm_logger()
    request_id = llm_logger.log_request(model="gemini-2.5-flash", contents=[part, prompt])
    ...
    llm_logger.log_response(request_id, response)
"""

import time
import uuid
from dataclasses import dataclass, asdict
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional, Union

from .logging import get_logger


@dataclass
class LLMRequest:
    """Represents an LLM request"""
    request_id: str
    timestamp: str
    model: str
    prompt: str  # Shortened version
    prompt_length: int  # Full length
    attachment_count: int
    attachment_bytes: int
    config: Dict[str, Any]
    system_instruction: Optional[str] = None


class LLMLogger:
    """Logger for LLM API requests and responses with request/response correlation"""

    def __init__(self, max_prompt_length: int = 500, max_response_length: int = 500):
        self.max_prompt_length = max_prompt_length
        self.max_response_length = max_response_length
        self.logger = get_logger(__name__, component="llm_logger")
        self._active_requests: Dict[str, float] = {}

    @staticmethod
    def _truncate_text(text: Optional[str], max_length: Optional[int]) -> str:
        if text is None:
            return ""
        if max_length is None or len(text) <= max_length:
            return text
        return text[:max_length] + f"... [truncated, total: {len(text)} chars]"

    @staticmethod
    def _extract_prompt_text(contents: Union[str, List[Any]]) -> str:
        if isinstance(contents, str):
            return contents
        if isinstance(contents, list):
            return "\n".join(item for item in contents if isinstance(item, str))
        return str(contents)

    @staticmethod
    def _attachment_metadata(contents: Union[str, List[Any]]) -> Dict[str, int]:
        """Count non-text parts and the bytes they carry."""
        if not isinstance(contents, list):
            return {"attachment_count": 0, "attachment_bytes": 0}

        count = 0
        total = 0
        for item in contents:
            if isinstance(item, str):
                continue
            count += 1
            data = getattr(getattr(item, "inline_data", None), "data", None)
            if data is None:
                data = getattr(item, "data", None)
            if isinstance(data, (bytes, bytearray)):
                total += len(data)
        return {"attachment_count": count, "attachment_bytes": total}

    def log_request(
        self,
        model: str,
        contents: Union[str, List[Any]],
        config: Optional[Dict[str, Any]] = None,
        system_instruction: Optional[str] = None,
    ) -> str:
        """Log an LLM request and return the id used to correlate its response."""
        request_id = str(uuid.uuid4())
        system_instruction = system_instruction or (config or {}).get("system_instruction")
        full_prompt = self._extract_prompt_text(contents)

        request = LLMRequest(
            request_id=request_id,
            timestamp=datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            model=model,
            prompt=self._truncate_text(full_prompt, self.max_prompt_length),
            prompt_length=len(full_prompt),
            config={k: v for k, v in (config or {}).items() if k != "system_instruction"},
            system_instruction=self._truncate_text(system_instruction, 200) if system_instruction else None,
            **self._attachment_metadata(contents),
        )
        self._active_requests[request_id] = time.time()

        self.logger.info(
            f"LLM Request | Model: {model} | Prompt: {len(full_prompt)} chars",
            extra={"extra_data": {"event": "llm_request", **asdict(request)}},
        )
        return request_id

    def _pop_duration(self, request_id: str) -> float:
        start = self._active_requests.pop(request_id, None)
        return time.time() - start if start is not None else 0.0

    def log_response(self, request_id: str, response: Any) -> None:
        """Log a successful LLM response."""
        duration = self._pop_duration(request_id)
        try:
            text = response.text
        except (AttributeError, ValueError):
            # Vertex raises ValueError for blocked or empty candidates
            text = None
        if not isinstance(text, str):
            text = ""

        usage: Dict[str, Any] = {}
        usage_metadata = getattr(response, "usage_metadata", None)
        if usage_metadata is not None:
            usage = {
                "input_tokens": getattr(usage_metadata, "prompt_token_count", None),
                "output_tokens": getattr(usage_metadata, "candidates_token_count", None),
                "total_tokens": getattr(usage_metadata, "total_token_count", None),
            }

        self.logger.info(
            f"LLM Response | {len(text)} chars | {duration:.2f}s",
            extra={"extra_data": {
                "event": "llm_response",
                "request_id": request_id,
                "duration_seconds": duration,
                "response": self._truncate_text(text, self.max_response_length),
                "response_length": len(text),
                "usage": usage,
                "success": True,
            }},
        )

    def log_error(self, request_id: str, error: BaseException) -> None:
        """Log a failed LLM call."""
        duration = self._pop_duration(request_id)
        self.logger.error(
            f"LLM Error | {type(error).__name__}: {error}",
            extra={"extra_data": {
                "event": "llm_error",
                "request_id": request_id,
                "duration_seconds": duration,
                "error_type": type(error).__name__,
                "error": str(error),
                "success": False,
            }},
        )


_llm_logger: Optional[LLMLogger] = None


def get_llm_logger() -> LLMLogger:
    """Get the process-wide LLM logger instance"""
    global _llm_logger
    if _llm_logger is None:
        _llm_logger = LLMLogger()
    return _llm_logger
