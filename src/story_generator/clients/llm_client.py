"""
OpenAI LLM Client
Sends ticket prompts to a chat-completion endpoint and returns the raw reply text
"""

import logging
from typing import Optional

from story_generator.utils.prompt_builder import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when the completion provider cannot return usable text."""


class LLMClient:
    """Client for OpenAI chat-completion calls."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        max_tokens: int = 400,
        temperature: float = 0.4,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client=None
    ):
        """
        Initialize LLM client.

        Args:
            api_key: OpenAI API key, sent as a bearer token
            model: Chat model to use
            max_tokens: Upper bound on generated tokens
            temperature: Sampling temperature; low values keep the labels stable
            base_url: Optional OpenAI-compatible endpoint
            timeout: Request timeout in seconds
            client: Pre-built OpenAI client (tests pass a stub here)
        """
        if not api_key:
            raise ValueError("LLMClient requires an API key")

        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    def status_label(self) -> str:
        """Get a status label for the LLM."""
        return f"AI: ON ({self.model})"

    def _get_client(self):
        if self._client is None:
            from openai import OpenAI

            kwargs = dict(api_key=self.api_key, max_retries=0)
            if self.base_url:
                kwargs["base_url"] = self.base_url
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = OpenAI(**kwargs)
        return self._client

    def complete(self, prompt: str, system_prompt: str = SYSTEM_PROMPT) -> str:
        """
        Send a prompt and return the generated text.

        Args:
            prompt: User prompt built for the ticket type
            system_prompt: System message sent ahead of the prompt

        Returns:
            Raw text of the first choice

        Raises:
            ProviderError: On network or HTTP errors, or a reply without content
        """
        from openai import OpenAIError

        logger.debug("Requesting completion from %s (%d prompt chars)", self.model, len(prompt))
        try:
            resp = self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt}
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except OpenAIError as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderError("Malformed completion response: no message in first choice") from e

        if not content or not content.strip():
            raise ProviderError("Malformed completion response: empty message content")

        logger.debug("Completion returned %d characters", len(content))
        return content
