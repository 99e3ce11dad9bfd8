"""String formatting utilities for copy and export"""
import re

from story_generator.core.models import BugTicket, StoryTicket, TicketRecord


def format_ticket(ticket: TicketRecord, show_gherkin: bool = False) -> str:
    """
    Render a ticket as plain text using the same labels the parser reads.

    Args:
        ticket: StoryTicket or BugTicket
        show_gherkin: For stories, render the Gherkin block instead of the
            bullet list

    Returns:
        Text suitable for the clipboard or a .txt export

    Example:
        >>> print(format_ticket(BugTicket("Crash", "App crashes", ("Open app",), "Opens", "Crashes")))
        Title: Crash
        Description: App crashes
        Steps to Reproduce:
        1. Open app
        Expected Result:
        Opens
        Actual Result:
        Crashes
    """
    if ticket is None:
        return ""
    if not isinstance(ticket, (BugTicket, StoryTicket)):
        raise TypeError(f"Unsupported ticket record: {type(ticket).__name__}")

    header = f"Title: {ticket.title}\nDescription: {ticket.description}\n"

    if isinstance(ticket, BugTicket):
        steps = "\n".join(f"{i}. {step}" for i, step in enumerate(ticket.steps, 1))
        return (
            header
            + "Steps to Reproduce:\n"
            + steps
            + f"\nExpected Result:\n{ticket.expected_result}\n"
            + f"Actual Result:\n{ticket.actual_result}"
        )

    if show_gherkin:
        return header + "Acceptance Criteria (Gherkin):\n" + "\n".join(ticket.acceptance_gherkin)
    return header + "Acceptance Criteria (bullets):\n" + "\n".join(
        f"- {bullet}" for bullet in ticket.acceptance_bullets
    )


def export_filename(title: str) -> str:
    """
    Build the export file name for a ticket title.

    Every character outside A-Z, a-z and 0-9 becomes an underscore.

    Example:
        >>> export_filename("Bug: Login fails!")
        'bug__login_fails_.txt'
    """
    return re.sub(r"[^a-z0-9]", "_", title or "", flags=re.IGNORECASE).lower() + ".txt"
