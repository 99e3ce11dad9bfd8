"""
Unit tests for llm_client module

Tests cover:
1. Initialization and status label
2. Request shape sent to the chat-completion API
3. ProviderError on SDK errors and malformed replies
"""

import pytest
from types import SimpleNamespace
from unittest.mock import Mock, patch

from openai import OpenAIError
from story_generator.clients.llm_client import LLMClient, ProviderError
from story_generator.utils.prompt_builder import SYSTEM_PROMPT


def make_response(content):
    """Build an object shaped like an OpenAI chat completion"""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def sdk_client():
    """Stub for the OpenAI SDK client"""
    return Mock()


@pytest.fixture
def llm(sdk_client):
    return LLMClient(api_key="sk-test", client=sdk_client)


# ============================================================================
# INITIALIZATION TESTS
# ============================================================================

class TestLLMClientInitialization:

    def test_defaults(self, llm):
        assert llm.model == "gpt-3.5-turbo"
        assert llm.max_tokens == 400
        assert llm.temperature == 0.4

    def test_requires_api_key(self):
        with pytest.raises(ValueError, match="API key"):
            LLMClient(api_key="")

    def test_status_label(self):
        assert LLMClient(api_key="sk-test", model="gpt-4o-mini").status_label() == "AI: ON (gpt-4o-mini)"

    def test_builds_sdk_client_without_retries(self):
        llm = LLMClient(api_key="sk-test", base_url="https://llm.internal/v1", timeout=5.0)

        with patch("openai.OpenAI") as openai_cls:
            openai_cls.return_value.chat.completions.create.return_value = make_response("Title: X")
            llm.complete("prompt")

        openai_cls.assert_called_once_with(
            api_key="sk-test",
            max_retries=0,
            base_url="https://llm.internal/v1",
            timeout=5.0
        )


# ============================================================================
# COMPLETE TESTS
# ============================================================================

class TestComplete:

    def test_returns_message_content(self, llm, sdk_client):
        sdk_client.chat.completions.create.return_value = make_response("Title: Add dark mode")

        assert llm.complete("prompt") == "Title: Add dark mode"

    def test_sends_system_and_user_messages(self, llm, sdk_client):
        sdk_client.chat.completions.create.return_value = make_response("Title: X")

        llm.complete("Build me a story")

        kwargs = sdk_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-3.5-turbo"
        assert kwargs["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "Build me a story"},
        ]
        assert kwargs["max_tokens"] == 400
        assert kwargs["temperature"] == 0.4

    def test_sdk_error_becomes_provider_error(self, llm, sdk_client):
        sdk_client.chat.completions.create.side_effect = OpenAIError("connection refused")

        with pytest.raises(ProviderError, match="connection refused") as exc_info:
            llm.complete("prompt")

        assert isinstance(exc_info.value.__cause__, OpenAIError)

    def test_no_choices(self, llm, sdk_client):
        sdk_client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        with pytest.raises(ProviderError, match="Malformed"):
            llm.complete("prompt")

    def test_missing_message(self, llm, sdk_client):
        sdk_client.chat.completions.create.return_value = SimpleNamespace(choices=[SimpleNamespace()])

        with pytest.raises(ProviderError, match="Malformed"):
            llm.complete("prompt")

    @pytest.mark.parametrize("content", [None, "", "   \n"])
    def test_empty_content(self, llm, sdk_client, content):
        sdk_client.chat.completions.create.return_value = make_response(content)

        with pytest.raises(ProviderError, match="empty"):
            llm.complete("prompt")
