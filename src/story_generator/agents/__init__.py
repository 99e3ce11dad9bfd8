"""
Story Generator Agents
Agents that turn free-text requests into Jira tickets
"""

from .base_agent import BaseAgent
from .ticket_generator import TicketGeneratorAgent, GenerationResult, GENERATION_ERROR_MESSAGE

__all__ = [
    'BaseAgent',
    'TicketGeneratorAgent',
    'GenerationResult',
    'GENERATION_ERROR_MESSAGE',
]
