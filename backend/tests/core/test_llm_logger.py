"""
Tests for the LLM request/response logger.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

from studygenie.core.llm_logger import LLMLogger, get_llm_logger


def test_truncate_text_with_none():
    assert LLMLogger._truncate_text(None, 100) == ""


def test_truncate_text_long():
    result = LLMLogger._truncate_text("x" * 20, 5)
    assert result.startswith("xxxxx...")
    assert "total: 20 chars" in result


def test_log_request_counts_attachments():
    logger = LLMLogger()
    logger.logger = MagicMock()
    part = SimpleNamespace(inline_data=SimpleNamespace(data=b"12345"))

    request_id = logger.log_request(model="m", contents=[part, "Explain this"])

    assert request_id in logger._active_requests
    payload = logger.logger.info.call_args.kwargs["extra"]["extra_data"]
    assert payload["attachment_count"] == 1
    assert payload["attachment_bytes"] == 5
    assert payload["prompt"] == "Explain this"


def test_log_request_hides_system_instruction_from_config():
    logger = LLMLogger()
    logger.logger = MagicMock()

    logger.log_request(model="m", contents="hi", config={"system_instruction": "long", "temperature": 1.0})

    payload = logger.logger.info.call_args.kwargs["extra"]["extra_data"]
    assert payload["config"] == {"temperature": 1.0}
    assert payload["system_instruction"] == "long"


def test_log_response_with_none_text():
    logger = LLMLogger()
    logger.logger = MagicMock()
    logger._active_requests["req"] = 100.0

    logger.log_response("req", SimpleNamespace(text=None, usage_metadata=None))

    payload = logger.logger.info.call_args.kwargs["extra"]["extra_data"]
    assert payload["response_length"] == 0
    assert "req" not in logger._active_requests


def test_log_response_with_exception_text():
    logger = LLMLogger()
    logger.logger = MagicMock()
    mock_response = MagicMock()
    type(mock_response).text = property(lambda x: (_ for _ in ()).throw(ValueError("blocked")))

    logger.log_response("unknown-req", mock_response)

    logger.logger.info.assert_called_once()


def test_log_response_usage():
    logger = LLMLogger()
    logger.logger = MagicMock()
    usage = SimpleNamespace(prompt_token_count=3, candidates_token_count=4, total_token_count=7)

    logger.log_response("req", SimpleNamespace(text="{}", usage_metadata=usage))

    payload = logger.logger.info.call_args.kwargs["extra"]["extra_data"]
    assert payload["usage"] == {"input_tokens": 3, "output_tokens": 4, "total_tokens": 7}


def test_log_error():
    logger = LLMLogger()
    logger.logger = MagicMock()

    logger.log_error("req", TimeoutError("slow"))

    payload = logger.logger.error.call_args.kwargs["extra"]["extra_data"]
    assert payload["error_type"] == "TimeoutError"


def test_singleton():
    assert get_llm_logger() is get_llm_logger()
