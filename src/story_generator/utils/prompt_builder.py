"""
Prompt templates for ticket generation.

The prompts spell out the exact section labels that response_parser looks
for, so the two modules must change together.
"""
from story_generator.core.models import TicketType

SYSTEM_PROMPT = "You are a helpful assistant."

BUG_TEMPLATE = """You are a Jira expert. Given the following bug report, generate a Jira bug in this format:

Title: <short title>
Description: <detailed bug description>
Steps to Reproduce:
1. ...
2. ...
Expected Result:
...
Actual Result:
...

Bug: {task}"""

STORY_TEMPLATE = """You are a Jira expert. Given the following task, generate a Jira story in this format:

Title: <short title>
Description: As a <role>, I want <feature>, so that <benefit>.
Acceptance Criteria (bullets):
- ...
- ...
- ...
Acceptance Criteria (Gherkin):
Given ...
When ...
Then ...

ALWAYS use the 'As a <role>, I want <feature>, so that <benefit>.' format for the description.
ALWAYS provide at least 3 acceptance criteria in both bullet and Gherkin formats.

Task: {task}"""


def build_prompt(task: str, ticket_type: TicketType) -> str:
    """
    Build the user prompt for a ticket type.

    Args:
        task: Trimmed task or bug description
        ticket_type: Story or Bug

    Returns:
        Prompt text embedding the task
    """
    if ticket_type is TicketType.BUG:
        return BUG_TEMPLATE.format(task=task)
    if ticket_type is TicketType.STORY:
        return STORY_TEMPLATE.format(task=task)
    raise TypeError(f"Unsupported ticket type: {ticket_type!r}")
