"""
Core data models for the Jira Story Generator.

A generated ticket is either a StoryTicket or a BugTicket. Both are frozen
dataclasses so a record cannot change once the parser or the fallback
generator has produced it.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple, Union
from enum import Enum


class TicketType(Enum):
    """Kinds of Jira ticket the generator produces"""
    STORY = "Story"
    BUG = "Bug"

    @classmethod
    def from_value(cls, value: Union[str, "TicketType"]) -> "TicketType":
        """
        Resolve a ticket type from its name, case-insensitively.

        Args:
            value: "Story", "bug", a TicketType member, ...

        Returns:
            The matching TicketType

        Raises:
            ValueError: If the value names no known ticket type
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"Unknown ticket type: '{value}'. Expected 'Story' or 'Bug'")


@dataclass(frozen=True)
class StoryTicket:
    """A user story with acceptance criteria in bullet and Gherkin form"""
    title: str
    description: str
    acceptance_bullets: Tuple[str, ...] = field(default_factory=tuple)
    acceptance_gherkin: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def kind(self) -> TicketType:
        return TicketType.STORY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "type": self.kind.value,
            "title": self.title,
            "description": self.description,
            "acceptance_bullets": list(self.acceptance_bullets),
            "acceptance_gherkin": list(self.acceptance_gherkin),
        }


@dataclass(frozen=True)
class BugTicket:
    """A bug report with reproduction steps and expected/actual results"""
    title: str
    description: str
    steps: Tuple[str, ...] = field(default_factory=tuple)
    expected_result: str = ""
    actual_result: str = ""

    @property
    def kind(self) -> TicketType:
        return TicketType.BUG

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "type": self.kind.value,
            "title": self.title,
            "description": self.description,
            "steps": list(self.steps),
            "expected": self.expected_result,
            "actual": self.actual_result,
        }


TicketRecord = Union[StoryTicket, BugTicket]


def _text_items(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, Iterable):
        raise ValueError(f"Expected a list of strings, got {type(value).__name__}")
    return tuple(str(item) for item in value)


def ticket_from_dict(data: Dict[str, Any]) -> TicketRecord:
    """
    Rebuild a ticket record from its serialized form.

    Accepts the output of ``to_dict()`` as well as the camelCase keys
    (``acceptanceBullets``, ``acceptanceGherkin``) a browser client sends.

    Args:
        data: Dictionary with at least a ``type`` key

    Returns:
        StoryTicket or BugTicket

    Raises:
        ValueError: If the type is missing or unknown
    """
    if not isinstance(data, dict):
        raise ValueError("Ticket payload must be an object")
    if not data.get("type"):
        raise ValueError("Ticket payload is missing 'type'")

    kind = TicketType.from_value(data["type"])
    title = str(data.get("title") or "")
    description = str(data.get("description") or "")

    if kind is TicketType.BUG:
        return BugTicket(
            title=title,
            description=description,
            steps=_text_items(data.get("steps")),
            expected_result=str(data.get("expected") or data.get("expected_result") or ""),
            actual_result=str(data.get("actual") or data.get("actual_result") or ""),
        )

    return StoryTicket(
        title=title,
        description=description,
        acceptance_bullets=_text_items(
            data.get("acceptance_bullets", data.get("acceptanceBullets"))
        ),
        acceptance_gherkin=_text_items(
            data.get("acceptance_gherkin", data.get("acceptanceGherkin"))
        ),
    )
