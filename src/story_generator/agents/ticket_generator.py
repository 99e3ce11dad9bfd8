"""
Ticket Generator Agent
Turns a free-text task or bug description into a Story or Bug ticket
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union
import logging

from .base_agent import BaseAgent
from story_generator.core.models import TicketRecord, TicketType
from story_generator.utils.fallback import generate_fallback
from story_generator.utils.prompt_builder import build_prompt
from story_generator.utils.response_parser import parse_response
from story_generator.utils.text_cleaner import clean_task_text, sanitize_prompt_input

logger = logging.getLogger(__name__)

GENERATION_ERROR_MESSAGE = "Failed to generate story. Please check your OpenAI API key and network."

SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation request"""
    ticket: Optional[TicketRecord] = None
    source: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "ticket": self.ticket.to_dict() if self.ticket is not None else None,
            "source": self.source,
            "error": self.error,
        }


class TicketGeneratorAgent(BaseAgent):
    """
    Generates Jira tickets with the LLM when one is configured and falls
    back to templated tickets otherwise. A provider failure is reported
    through ``GenerationResult.error`` but still yields a fallback ticket.
    """

    def __init__(self, llm=None, sanitize_input: bool = True):
        super().__init__(llm)
        self.sanitize_input = sanitize_input

    def run(self, context: Dict[str, Any], **kwargs) -> Tuple[Optional[Dict], Optional[str]]:
        """
        Generate a single ticket

        Args:
            context: Dictionary containing:
                - task: Free-text task or bug description
                - type: "Story" (default) or "Bug"

        Returns:
            Tuple of (ticket_dict, error_message); ticket_dict is None for an
            empty task
        """
        try:
            ticket_type = TicketType.from_value(context.get('type') or TicketType.STORY)
        except ValueError as e:
            return None, self._format_error(str(e))

        result = self.generate(context.get('task', ''), ticket_type)
        ticket = result.ticket.to_dict() if result.ticket is not None else None
        return ticket, result.error

    def generate(self, task: str, ticket_type: Union[TicketType, str]) -> GenerationResult:
        """
        Generate a ticket for a task

        Args:
            task: Free-text task or bug description
            ticket_type: Story or Bug

        Returns:
            GenerationResult; empty when the task is blank
        """
        ticket_type = TicketType.from_value(ticket_type)
        task = clean_task_text(task)
        if not task:
            logger.debug("Empty task, nothing to generate")
            return GenerationResult()

        if not self.ai_enabled:
            logger.info("No LLM configured, using fallback %s", ticket_type.value)
            return GenerationResult(generate_fallback(task, ticket_type), SOURCE_FALLBACK)

        prompt_task = sanitize_prompt_input(task) if self.sanitize_input else task
        raw_text, error = self._call_llm(build_prompt(prompt_task, ticket_type))

        if error:
            logger.warning("Falling back to template %s: %s", ticket_type.value, error)
            return GenerationResult(
                generate_fallback(task, ticket_type),
                SOURCE_FALLBACK,
                GENERATION_ERROR_MESSAGE,
            )

        logger.info("Generated %s from LLM reply (%d chars)", ticket_type.value, len(raw_text))
        return GenerationResult(parse_response(raw_text, ticket_type, task), SOURCE_AI)
