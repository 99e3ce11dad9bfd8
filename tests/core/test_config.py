"""Tests for environment-driven settings"""
import pytest
from story_generator.clients.llm_client import LLMClient
from story_generator.core.config import Settings, DEFAULT_CORS_ORIGINS

ENV_VARS = [
    "OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "OPENAI_MAX_TOKENS",
    "OPENAI_TEMPERATURE", "OPENAI_TIMEOUT", "API_HOST", "API_PORT",
    "CORS_ORIGINS", "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Settings reads"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettingsFromEnv:

    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.openai_api_key is None
        assert settings.openai_model == "gpt-3.5-turbo"
        assert settings.max_tokens == 400
        assert settings.temperature == 0.4
        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 8000
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS
        assert settings.log_level == "INFO"
        assert settings.ai_enabled is False

    def test_reads_overrides(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "sk-test")
        clean_env.setenv("OPENAI_MODEL", "gpt-4o-mini")
        clean_env.setenv("OPENAI_MAX_TOKENS", "800")
        clean_env.setenv("OPENAI_TEMPERATURE", "0.1")
        clean_env.setenv("API_PORT", "9000")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.openai_api_key == "sk-test"
        assert settings.openai_model == "gpt-4o-mini"
        assert settings.max_tokens == 800
        assert settings.temperature == 0.1
        assert settings.api_port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.ai_enabled is True

    def test_blank_key_counts_as_absent(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", "   ")
        assert Settings.from_env().openai_api_key is None

    def test_extra_cors_origins_appended(self, clean_env):
        clean_env.setenv("CORS_ORIGINS", "https://tickets.example.com, http://localhost:3000")

        origins = Settings.from_env().cors_origins

        assert origins[:2] == DEFAULT_CORS_ORIGINS
        assert origins.count("http://localhost:3000") == 1
        assert "https://tickets.example.com" in origins

    def test_malformed_number(self, clean_env):
        clean_env.setenv("OPENAI_MAX_TOKENS", "lots")
        with pytest.raises(ValueError):
            Settings.from_env()


class TestBuildLLMClient:

    def test_no_key_returns_none(self):
        assert Settings().build_llm_client() is None

    def test_key_builds_client(self):
        settings = Settings(openai_api_key="sk-test", openai_model="gpt-4o-mini", max_tokens=123)

        client = settings.build_llm_client()

        assert isinstance(client, LLMClient)
        assert client.api_key == "sk-test"
        assert client.model == "gpt-4o-mini"
        assert client.max_tokens == 123
