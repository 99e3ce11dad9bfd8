"""Jira Story Generator"""

from .core.models import (
    TicketType,
    StoryTicket,
    BugTicket,
    ticket_from_dict
)

from .clients.llm_client import LLMClient, ProviderError

__version__ = "1.0.0"

__all__ = [
    'TicketType',
    'StoryTicket',
    'BugTicket',
    'ticket_from_dict',
    'LLMClient',
    'ProviderError',
]
