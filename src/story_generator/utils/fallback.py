"""
Offline ticket synthesis.

Used when no API key is configured or the provider call fails, so the user
always gets a complete ticket. The default criteria are shared with the
response parser, which substitutes them when the model omits a section.
"""
from typing import Tuple

from story_generator.core.models import BugTicket, StoryTicket, TicketRecord, TicketType


def default_description(task: str) -> str:
    return f"As a user, I want to {task}, so that I can achieve my goal."


def default_bullets(task: str) -> Tuple[str, ...]:
    """The three bullet criteria substituted for a short or missing list."""
    return (
        f"The feature allows the user to {task.lower()}.",
        "The implementation meets the described requirements.",
        "All edge cases are handled.",
    )


def default_gherkin(task: str) -> Tuple[str, ...]:
    """The Given/When/Then lines substituted for a short or missing scenario."""
    feature = task.lower()
    return (
        f"Given the user wants to {feature},",
        "When the user performs the necessary actions,",
        f"Then the system should allow the user to {feature} successfully.",
    )


def generate_fallback(task: str, ticket_type: TicketType) -> TicketRecord:
    """
    Build a placeholder ticket from the task text alone.

    Args:
        task: Trimmed task or bug description
        ticket_type: Story or Bug

    Returns:
        Fully populated StoryTicket or BugTicket
    """
    if ticket_type is TicketType.BUG:
        return BugTicket(
            title=f"Bug: {task}",
            description=f"There is a bug related to: {task}",
            steps=("Step 1 to reproduce the bug.", "Step 2 to reproduce the bug."),
            expected_result="The feature works as intended.",
            actual_result="The bug occurs as described.",
        )
    if ticket_type is TicketType.STORY:
        return StoryTicket(
            title=f"Implement: {task}",
            description=default_description(task),
            acceptance_bullets=default_bullets(task) + ("The feature is tested and documented.",),
            acceptance_gherkin=default_gherkin(task),
        )
    raise TypeError(f"Unsupported ticket type: {ticket_type!r}")
