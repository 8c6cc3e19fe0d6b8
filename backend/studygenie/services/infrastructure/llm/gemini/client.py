"""
Unified Gemini Client - Works with both Gemini API and Vertex AI

The client detects which backend to use from environment variables and
exposes the same `client.models.generate_content(...)` call for both.
"""

import os
from typing import Optional, Dict, Any, List, Union
from dataclasses import dataclass

from studygenie.core.llm_logger import get_llm_logger


@dataclass
class GenerationConfig:
    """Configuration for content generation"""
    temperature: float = 1.0
    top_p: float = 0.95
    top_k: int = 40
    max_output_tokens: int = 8192
    response_mime_type: Optional[str] = None
    system_instruction: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        config = {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "top_k": self.top_k,
            "max_output_tokens": self.max_output_tokens,
        }
        if self.response_mime_type:
            config["response_mime_type"] = self.response_mime_type
        if self.system_instruction:
            config["system_instruction"] = self.system_instruction
        return config


class UnifiedGeminiClient:
    """
    Unified client that works with both Gemini API and Vertex AI.

    Environment Variables:
        USE_VERTEX_AI: Set to 'true' to use Vertex AI instead of Gemini API
        GEMINI_API_KEY: API key for Gemini API (when USE_VERTEX_AI=false)
        GCP_PROJECT_ID: GCP project ID (when USE_VERTEX_AI=true)
        GCP_LOCATION: GCP region (default: us-central1, when USE_VERTEX_AI=true)

    Usage:
        client = UnifiedGeminiClient()
        part = client.types.Part.from_bytes(data=pdf_bytes, mime_type="application/pdf")
        response = client.models.generate_content(
            model="gemini-2.5-flash",
            contents=[part, "Explain this document"],
            config=GenerationConfig(response_mime_type="application/json"),
        )
    """

    def __init__(self, api_key: Optional[str] = None):
        self.use_vertex_ai = os.getenv("USE_VERTEX_AI", "false").lower() == "true"
        self.backend = None
        self.models = None
        self.types = None

        if self.use_vertex_ai:
            self._init_vertex_ai()
        else:
            self._init_gemini_api(api_key)

    def _init_gemini_api(self, api_key: Optional[str] = None):
        """Initialize Gemini API backend"""
        try:
            from google import genai
            from google.genai import types
        except ImportError as e:
            raise ImportError(
                "google-genai package not found. Install it with: pip install google-genai"
            ) from e

        api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable is required when USE_VERTEX_AI=false")

        self.backend = genai.Client(api_key=api_key)
        self.models = GeminiAPIModels(self.backend)
        self.types = types

    def _init_vertex_ai(self):
        """Initialize Vertex AI backend"""
        try:
            import vertexai
            from vertexai import generative_models
        except ImportError as e:
            raise ImportError(
                "google-cloud-aiplatform package not found. "
                "Install it with: pip install google-cloud-aiplatform"
            ) from e

        project_id = os.getenv("GCP_PROJECT_ID")
        location = os.getenv("GCP_LOCATION", "us-central1")

        if not project_id:
            raise ValueError("GCP_PROJECT_ID environment variable is required when USE_VERTEX_AI=true")

        vertexai.init(project=project_id, location=location)
        self.backend = vertexai
        self.models = VertexAIModels()
        self.types = _VertexTypes(generative_models)


class _VertexTypes:
    """Gemini-API-shaped `types` facade over vertexai.generative_models"""

    def __init__(self, generative_models):
        self.Part = _VertexPart(generative_models.Part)


class _VertexPart:
    def __init__(self, part_cls):
        self._part_cls = part_cls

    def from_bytes(self, data: bytes, mime_type: str):
        return self._part_cls.from_data(data=data, mime_type=mime_type)


class GeminiAPIModels:
    """Gemini API models interface (wraps google-genai)"""

    def __init__(self, client):
        self.client = client
        self.llm_logger = get_llm_logger()

    def generate_content(
        self,
        model: str,
        contents: Union[str, List[Any]],
        config: Optional[GenerationConfig] = None,
    ):
        """
        Generate content using Gemini API.

        Returns:
            Response object with .text property
        """
        from google.genai import types

        config = config or GenerationConfig()
        gen_config_dict = config.to_dict()

        request_id = self.llm_logger.log_request(
            model=model,
            contents=contents,
            config=gen_config_dict,
            system_instruction=config.system_instruction,
        )

        try:
            response = self.client.models.generate_content(
                model=model,
                contents=contents,
                config=types.GenerateContentConfig(**gen_config_dict),
            )
        except Exception as e:
            self.llm_logger.log_error(request_id, e)
            raise

        self.llm_logger.log_response(request_id, response)
        return response


class VertexAIModels:
    """Vertex AI models interface (wraps vertexai)"""

    # Vertex AI uses versioned model names
    MODEL_MAPPINGS = {
        "gemini-2.5-flash": "gemini-2.5-flash-002",
        "gemini-2.5-pro": "gemini-2.5-pro-002",
        "gemini-2.0-flash": "gemini-2.0-flash-001",
    }

    def __init__(self):
        self.llm_logger = get_llm_logger()

    def generate_content(
        self,
        model: str,
        contents: Union[str, List[Any]],
        config: Optional[GenerationConfig] = None,
    ):
        """
        Generate content using Vertex AI.

        Returns:
            Response object with .text property
        """
        from vertexai.generative_models import (
            GenerativeModel,
            GenerationConfig as VertexGenerationConfig,
        )

        config = config or GenerationConfig()
        model = self.MODEL_MAPPINGS.get(model, model)

        model_kwargs: Dict[str, Any] = {"model_name": model}
        if config.system_instruction:
            model_kwargs["system_instruction"] = config.system_instruction
        model_instance = GenerativeModel(**model_kwargs)

        gen_config_dict = {
            "temperature": config.temperature,
            "top_p": config.top_p,
            "top_k": config.top_k,
            "max_output_tokens": config.max_output_tokens,
        }
        if config.response_mime_type:
            gen_config_dict["response_mime_type"] = config.response_mime_type

        if isinstance(contents, str):
            contents = [contents]

        request_id = self.llm_logger.log_request(
            model=model,
            contents=contents,
            config=gen_config_dict,
            system_instruction=config.system_instruction,
        )

        try:
            response = model_instance.generate_content(
                contents,
                generation_config=VertexGenerationConfig(**gen_config_dict),
            )
        except Exception as error:
            self.llm_logger.log_error(request_id, error)
            raise

        self.llm_logger.log_response(request_id, response)
        return response


def create_client(api_key: Optional[str] = None) -> UnifiedGeminiClient:
    """Create a unified Gemini client configured for either API or Vertex AI"""
    return UnifiedGeminiClient(api_key=api_key)
