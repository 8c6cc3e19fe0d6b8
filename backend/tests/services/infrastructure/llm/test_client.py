"""
Tests for studygenie.services.infrastructure.llm.gemini.client

Tests the UnifiedGeminiClient which handles both Gemini API and Vertex AI.
"""

import os
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from studygenie.services.infrastructure.llm.gemini.client import (
    UnifiedGeminiClient,
    GenerationConfig,
    GeminiAPIModels,
    VertexAIModels,
    create_client,
)


class TestGenerationConfig:
    def test_defaults(self):
        config = GenerationConfig()
        assert config.temperature == 1.0
        assert config.to_dict() == {
            "temperature": 1.0,
            "top_p": 0.95,
            "top_k": 40,
            "max_output_tokens": 8192,
        }

    def test_optional_fields_included_when_set(self):
        config = GenerationConfig(
            max_output_tokens=4096,
            response_mime_type="application/json",
            system_instruction="Be helpful",
        )
        data = config.to_dict()
        assert data["max_output_tokens"] == 4096
        assert data["response_mime_type"] == "application/json"
        assert data["system_instruction"] == "Be helpful"


class TestBackendDetection:
    @patch("studygenie.services.infrastructure.llm.gemini.client.UnifiedGeminiClient._init_gemini_api")
    def test_detects_gemini_api(self, mock_init):
        with patch.dict(os.environ, {"USE_VERTEX_AI": "false"}):
            UnifiedGeminiClient(api_key="test-key")
            mock_init.assert_called_once_with("test-key")

    @patch("studygenie.services.infrastructure.llm.gemini.client.UnifiedGeminiClient._init_vertex_ai")
    def test_detects_vertex_ai(self, mock_init):
        with patch.dict(os.environ, {"USE_VERTEX_AI": "true"}):
            UnifiedGeminiClient()
            mock_init.assert_called_once()


class TestGeminiAPIImplementation:
    def test_init_gemini_api_success(self):
        with patch.dict(os.environ, {"USE_VERTEX_AI": "false", "GEMINI_API_KEY": "test-key"}):
            with patch("google.genai.Client") as mock_client_cls:
                client = create_client()

                mock_client_cls.assert_called_once_with(api_key="test-key")
                assert client.use_vertex_ai is False
                assert isinstance(client.models, GeminiAPIModels)

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with patch("google.genai.Client"):
            with pytest.raises(ValueError, match="GEMINI_API_KEY"):
                UnifiedGeminiClient()

    def test_generate_content_calls_backend(self):
        mock_backend = MagicMock()
        mock_backend.models.generate_content.return_value = SimpleNamespace(text="{}", usage_metadata=None)
        models = GeminiAPIModels(mock_backend)
        config = GenerationConfig(temperature=0.7, response_mime_type="application/json")

        with patch("google.genai.types.GenerateContentConfig") as mock_config:
            response = models.generate_content("model-1", ["Prompt"], config=config)

        assert response.text == "{}"
        mock_backend.models.generate_content.assert_called_once()
        assert mock_config.call_args.kwargs["response_mime_type"] == "application/json"
        assert mock_config.call_args.kwargs["temperature"] == 0.7

    def test_generate_content_propagates_errors(self):
        mock_backend = MagicMock()
        mock_backend.models.generate_content.side_effect = RuntimeError("quota exceeded")
        models = GeminiAPIModels(mock_backend)

        with patch("google.genai.types.GenerateContentConfig"):
            with pytest.raises(RuntimeError, match="quota exceeded"):
                models.generate_content("model-1", "Prompt")


class TestVertexAIImplementation:
    def test_init_vertex_ai_success(self):
        with patch.dict(os.environ, {"USE_VERTEX_AI": "true", "GCP_PROJECT_ID": "p1", "GCP_LOCATION": "l1"}):
            with patch("vertexai.init") as mock_init:
                client = UnifiedGeminiClient()

        mock_init.assert_called_once_with(project="p1", location="l1")
        assert isinstance(client.models, VertexAIModels)
        assert hasattr(client.types.Part, "from_bytes")

    def test_missing_project_raises(self, monkeypatch):
        monkeypatch.setenv("USE_VERTEX_AI", "true")
        monkeypatch.delenv("GCP_PROJECT_ID", raising=False)
        with patch("vertexai.init"):
            with pytest.raises(ValueError, match="GCP_PROJECT_ID"):
                UnifiedGeminiClient()

    def test_generate_content_maps_model_and_instruction(self):
        models = VertexAIModels()
        with patch("vertexai.generative_models.GenerativeModel") as mock_model_cls, \
             patch("vertexai.generative_models.GenerationConfig") as mock_gen_config:
            mock_model_cls.return_value.generate_content.return_value = SimpleNamespace(
                text="{}", usage_metadata=None
            )
            models.generate_content(
                "gemini-2.5-flash",
                "Prompt",
                config=GenerationConfig(system_instruction="Explain", response_mime_type="application/json"),
            )

        mock_model_cls.assert_called_once_with(model_name="gemini-2.5-flash-002", system_instruction="Explain")
        assert mock_gen_config.call_args.kwargs["response_mime_type"] == "application/json"
        args, _ = mock_model_cls.return_value.generate_content.call_args
        assert args[0] == ["Prompt"]
