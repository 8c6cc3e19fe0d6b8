"""
Base Prompting Engine

Provides core LLM interaction functionality with unified client handling,
timeouts and response parsing.
"""

import asyncio
from typing import Dict, Any, Optional, List, Union
from dataclasses import dataclass

from studygenie.config.models import get_model_config
from studygenie.core import get_logger
from studygenie.services.infrastructure.llm.gemini.client import (
    create_client,
    GenerationConfig as UnifiedGenerationConfig
)
from studygenie.services.infrastructure.parsing import parse_json_object

logger = get_logger(__name__, component="prompting_engine")


@dataclass
class PromptConfig:
    """Configuration for a prompt execution"""
    model_name: Optional[str] = None  # If None, uses config's model
    temperature: float = 1.0
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    max_output_tokens: Optional[int] = None
    timeout: Optional[float] = None
    response_format: str = "text"  # "text" or "json"
    system_instruction: Optional[str] = None


class PromptingEngine:
    """
    Centralized engine for all LLM interactions.

    Responsibilities:
    - Unified Gemini client management
    - Running the blocking SDK call off the event loop, with a timeout
    - Response parsing (text, JSON)
    """

    def __init__(self, config_key: str = "analysis", client: Any = None):
        """Initialize the prompting engine.

        Args:
            config_key: Key in model config (e.g., "analysis")
            client: Optional pre-built client (defaults to create_client())
        """
        self.config_key = config_key
        self.client = client or create_client()
        self.types = self.client.types

    def _get_config(self):
        return get_model_config(self.config_key)

    def _get_generation_config(
        self,
        prompt_config: PromptConfig
    ) -> Optional[UnifiedGenerationConfig]:
        """Build generation config from prompt config"""
        kwargs = {}

        if prompt_config.temperature != 1.0:
            kwargs["temperature"] = prompt_config.temperature

        if prompt_config.top_p is not None:
            kwargs["top_p"] = prompt_config.top_p

        if prompt_config.top_k is not None:
            kwargs["top_k"] = prompt_config.top_k

        if prompt_config.max_output_tokens is not None:
            kwargs["max_output_tokens"] = prompt_config.max_output_tokens

        if prompt_config.response_format == "json":
            kwargs["response_mime_type"] = "application/json"

        if prompt_config.system_instruction:
            kwargs["system_instruction"] = prompt_config.system_instruction

        return UnifiedGenerationConfig(**kwargs) if kwargs else None

    @staticmethod
    def _usage(response: Any) -> Dict[str, Any]:
        usage_metadata = getattr(response, "usage_metadata", None)
        if not usage_metadata:
            return {}
        return {
            "input_tokens": getattr(usage_metadata, "prompt_token_count", None),
            "output_tokens": getattr(usage_metadata, "candidates_token_count", None),
            "total_tokens": getattr(usage_metadata, "total_token_count", None),
        }

    async def generate(
        self,
        prompt: str,
        config: Optional[PromptConfig] = None,
        context: Optional[Dict[str, Any]] = None,
        model: Optional[str] = None,
        contents: Optional[Union[str, List[Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Generate a response from the LLM. The call is made exactly once.

        Args:
            prompt: The prompt text (sent alone when contents is not given)
            config: Optional prompt configuration
            context: Optional context echoed back in error results
            model: Optional model override
            contents: Full multi-part payload (e.g. [file_part, prompt])

        Returns:
            Dict containing:
                - success: bool
                - response: str (text response)
                - parsed_json: Dict or None (if response_format is "json")
                - json_parse_error: str (if JSON was requested but not found)
                - error: str (if failed)
                - usage: Dict (token usage info)
        """
        config = config or PromptConfig()
        model_name = model or config.model_name or self._get_config().model_name
        payload = contents if contents is not None else prompt
        gen_config = self._get_generation_config(config)

        try:
            call = asyncio.to_thread(
                self.client.models.generate_content,
                model=model_name,
                contents=payload,
                config=gen_config,
            )
            if config.timeout:
                response = await asyncio.wait_for(call, timeout=config.timeout)
            else:
                response = await call

        except asyncio.TimeoutError:
            logger.warning(
                f"Model call timed out after {config.timeout}s",
                extra={"model": model_name},
            )
            return {
                "success": False,
                "error": f"Model call timed out after {config.timeout:g} seconds",
                "error_type": "TimeoutError",
                "context": context,
            }

        except Exception as e:
            logger.warning(
                f"Model call failed: {e}",
                extra={"model": model_name, "error_type": type(e).__name__},
            )
            return {
                "success": False,
                "error": str(e) or type(e).__name__,
                "error_type": type(e).__name__,
                "context": context,
            }

        text_response = getattr(response, "text", None) or ""
        result = {
            "success": True,
            "response": text_response,
            "usage": self._usage(response),
            "raw_response": response,
        }

        if config.response_format == "json":
            result["parsed_json"] = parse_json_object(text_response)
            if result["parsed_json"] is None:
                result["json_parse_error"] = "Response did not contain a JSON object"

        return result
