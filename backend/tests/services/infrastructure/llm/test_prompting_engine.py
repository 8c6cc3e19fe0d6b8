"""
Tests for the prompting engine: generation config, timeouts and
JSON parsing of model responses.
"""

import time
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from studygenie.services.infrastructure.llm.prompting_engine import (
    PromptingEngine,
    PromptConfig,
    PromptTemplate,
)
from studygenie.services.infrastructure.llm.prompting_engine.prompts import (
    STUDY_ANALYSIS_SYSTEM,
    STUDY_ANALYSIS_USER,
)


def _engine(generate_content):
    client = MagicMock()
    client.models.generate_content.side_effect = generate_content
    return PromptingEngine("analysis", client=client), client


def _response(text, usage=None):
    return SimpleNamespace(text=text, usage_metadata=usage)


class TestGenerationConfig:
    def test_json_format_sets_mime_type(self):
        engine, _ = _engine(None)
        config = engine._get_generation_config(PromptConfig(
            response_format="json",
            max_output_tokens=4096,
            system_instruction="sys",
        ))
        assert config.response_mime_type == "application/json"
        assert config.max_output_tokens == 4096
        assert config.system_instruction == "sys"

    def test_defaults_produce_no_config(self):
        engine, _ = _engine(None)
        assert engine._get_generation_config(PromptConfig()) is None


@pytest.mark.asyncio
class TestGenerate:
    async def test_success_with_json(self):
        usage = SimpleNamespace(prompt_token_count=10, candidates_token_count=5, total_token_count=15)
        engine, client = _engine(lambda **kwargs: _response('```json\n{"title": "x"}\n```', usage))

        result = await engine.generate("prompt", PromptConfig(response_format="json"))

        assert result["success"] is True
        assert result["parsed_json"] == {"title": "x"}
        assert result["usage"]["total_tokens"] == 15
        assert client.models.generate_content.call_args.kwargs["contents"] == "prompt"

    async def test_uses_configured_model(self):
        engine, client = _engine(lambda **kwargs: _response("ok"))

        await engine.generate("prompt")

        assert client.models.generate_content.call_args.kwargs["model"] == engine._get_config().model_name

    async def test_contents_override_prompt(self):
        engine, client = _engine(lambda **kwargs: _response("ok"))
        part = object()

        await engine.generate("prompt", contents=[part, "prompt"])

        assert client.models.generate_content.call_args.kwargs["contents"] == [part, "prompt"]

    async def test_unparseable_json_flagged(self):
        engine, _ = _engine(lambda **kwargs: _response("Sorry, I cannot help."))

        result = await engine.generate("prompt", PromptConfig(response_format="json"))

        assert result["success"] is True
        assert result["parsed_json"] is None
        assert "json_parse_error" in result

    async def test_single_attempt_failure(self):
        engine, client = _engine([RuntimeError("backend down"), _response("ok")])

        result = await engine.generate("prompt")

        assert result["success"] is False
        assert result["error"] == "backend down"
        assert result["error_type"] == "RuntimeError"
        assert client.models.generate_content.call_count == 1

    async def test_timeout(self):
        def slow(**kwargs):
            time.sleep(0.3)
            return _response("late")

        engine, client = _engine(slow)

        result = await engine.generate("prompt", PromptConfig(timeout=0.05))

        assert result["success"] is False
        assert "timed out" in result["error"]
        assert client.models.generate_content.call_count == 1


class TestPrompts:
    def test_user_prompt_names_file(self):
        text = STUDY_ANALYSIS_USER.format(file_name="week3.pdf")
        assert "(week3.pdf)" in text

    def test_system_prompt_describes_section_types(self):
        text = STUDY_ANALYSIS_SYSTEM.template
        for section_type in ("explanation", "keyPoints", "formula", "stepByStep", "example", "summary", "definition"):
            assert section_type in text
        assert "keyTakeaways" in text

    def test_template_with_literal_braces(self):
        template = PromptTemplate(template='Return {"a": 1} for {name}')
        assert template.format(name="x") == 'Return {"a": 1} for x'
