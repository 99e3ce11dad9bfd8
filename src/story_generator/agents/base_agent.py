"""
Base Agent Class
Provides the provider call and error translation shared by generator agents
"""

from typing import Tuple, Optional, Dict, Any
import logging

from story_generator.clients.llm_client import ProviderError

logger = logging.getLogger(__name__)


class BaseAgent:
    """Base class for agents that talk to the completion provider"""

    def __init__(self, llm=None):
        """
        Initialize the agent with an LLM client

        Args:
            llm: LLMClient instance, or None to run without a provider
        """
        self.llm = llm
        self.name = self.__class__.__name__

    @property
    def ai_enabled(self) -> bool:
        return self.llm is not None

    def run(self, context: Dict[str, Any], **kwargs) -> Tuple[Any, Optional[str]]:
        """
        Main execution method - must be implemented by subclasses

        Args:
            context: Dictionary containing all necessary context for the agent
            **kwargs: Additional keyword arguments

        Returns:
            Tuple of (result, error) where error is None on success
        """
        raise NotImplementedError(f"{self.name} must implement run()")

    def _call_llm(self, prompt: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Standard LLM call with error handling

        Args:
            prompt: User prompt with the task embedded

        Returns:
            Tuple of (result, error) where error is None on success
        """
        if self.llm is None:
            return None, self._format_error("No LLM client configured")

        try:
            return self.llm.complete(prompt), None
        except ProviderError as e:
            logger.warning("%s provider call failed: %s", self.name, e)
            return None, self._format_error(f"LLM call failed: {e}")

    def _format_error(self, error_msg: str) -> str:
        """
        Format error message with agent name

        Args:
            error_msg: Raw error message

        Returns:
            Formatted error message
        """
        return f"[{self.name}] {error_msg}"
