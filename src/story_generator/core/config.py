"""
Runtime settings read from the environment.

Values come from the process environment, with a local .env file loaded by
the entry points through python-dotenv.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]  # React dev servers


def _env(name: str) -> Optional[str]:
    """Read an environment variable, treating blank values as absent."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class Settings:
    """Configuration for the provider client, API server and logging"""
    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_MODEL
    openai_base_url: Optional[str] = None
    max_tokens: int = 400
    temperature: float = 0.4
    timeout: float = 60.0
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        cors_origins = list(DEFAULT_CORS_ORIGINS)
        extra_origins = _env("CORS_ORIGINS")
        if extra_origins:
            for origin in extra_origins.split(","):
                origin = origin.strip()
                if origin and origin not in cors_origins:
                    cors_origins.append(origin)

        return cls(
            openai_api_key=_env("OPENAI_API_KEY"),
            openai_model=_env("OPENAI_MODEL") or DEFAULT_MODEL,
            openai_base_url=_env("OPENAI_BASE_URL"),
            max_tokens=int(_env("OPENAI_MAX_TOKENS") or 400),
            temperature=float(_env("OPENAI_TEMPERATURE") or 0.4),
            timeout=float(_env("OPENAI_TIMEOUT") or 60.0),
            api_host=_env("API_HOST") or "127.0.0.1",
            api_port=int(_env("API_PORT") or 8000),
            cors_origins=cors_origins,
            log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def ai_enabled(self) -> bool:
        return bool(self.openai_api_key)

    def build_llm_client(self):
        """
        Create the provider client, or None when no API key is configured.

        Without a key the generator runs in fallback-only mode and never
        touches the network.
        """
        if not self.ai_enabled:
            return None

        from story_generator.clients.llm_client import LLMClient
        return LLMClient(
            api_key=self.openai_api_key,
            model=self.openai_model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            base_url=self.openai_base_url,
            timeout=self.timeout,
        )
