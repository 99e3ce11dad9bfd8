"""
Parser for free-text ticket replies from the LLM.

The reply is walked line by line as a small state machine. Header lines
(``Title:``, ``Steps to Reproduce``, ``Acceptance Criteria (Gherkin)``, ...)
move the parser between states; every other line is handed to the body
handler of the current state. Parsing never fails: missing Story sections
are replaced with the default criteria from ``fallback``.
"""
import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from story_generator.core.models import BugTicket, StoryTicket, TicketRecord, TicketType
from story_generator.utils.fallback import default_bullets, default_description, default_gherkin

logger = logging.getLogger(__name__)

MIN_STORY_CRITERIA = 3


class ParserState(Enum):
    """Section of the reply the parser is currently reading"""
    NONE = "none"
    STEPS = "steps"
    EXPECTED = "expected"
    ACTUAL = "actual"
    BULLETS = "bullets"
    GHERKIN = "gherkin"


# Single-line fields: matched as a prefix, value taken from the same line,
# state reset to NONE.
FIELD_LABELS: Tuple[Tuple[str, str], ...] = (
    ("title:", "title"),
    ("description:", "description"),
)

# Section headers per ticket type: matched as a substring, first match wins.
SECTION_TRANSITIONS: Dict[TicketType, Tuple[Tuple[str, ParserState], ...]] = {
    TicketType.BUG: (
        ("steps to reproduce", ParserState.STEPS),
        ("expected result", ParserState.EXPECTED),
        ("actual result", ParserState.ACTUAL),
    ),
    TicketType.STORY: (
        ("acceptance criteria (bullets)", ParserState.BULLETS),
        ("acceptance criteria (gherkin)", ParserState.GHERKIN),
    ),
}

STEP_PREFIX = re.compile(r"^\d+\.\s*")
GHERKIN_KEYWORDS = ("given", "when", "then")


class _ParsedFields:
    """Accumulators filled while walking the reply"""

    def __init__(self):
        self.title = ""
        self.description = ""
        self.steps: List[str] = []
        self.expected: List[str] = []
        self.actual: List[str] = []
        self.bullets: List[str] = []
        self.gherkin: List[str] = []


def _read_step(fields: _ParsedFields, text: str) -> None:
    match = STEP_PREFIX.match(text)
    if match:
        fields.steps.append(text[match.end():].strip())


def _read_expected(fields: _ParsedFields, text: str) -> None:
    if text:
        fields.expected.append(text)


def _read_actual(fields: _ParsedFields, text: str) -> None:
    if text:
        fields.actual.append(text)


def _read_bullet(fields: _ParsedFields, text: str) -> None:
    if text.startswith("- "):
        fields.bullets.append(text[2:].strip())


def _read_gherkin(fields: _ParsedFields, text: str) -> None:
    if text.lower().startswith(GHERKIN_KEYWORDS):
        fields.gherkin.append(text)


BODY_HANDLERS: Dict[ParserState, Callable[[_ParsedFields, str], None]] = {
    ParserState.STEPS: _read_step,
    ParserState.EXPECTED: _read_expected,
    ParserState.ACTUAL: _read_actual,
    ParserState.BULLETS: _read_bullet,
    ParserState.GHERKIN: _read_gherkin,
}


def match_field(line: str) -> Optional[Tuple[str, str]]:
    """
    Match a single-line field such as ``Title: Add dark mode``.

    Returns:
        (field_name, value) or None when the line is not a field line
    """
    text = line.lstrip()
    lowered = text.lower()
    for label, name in FIELD_LABELS:
        if lowered.startswith(label):
            return name, text[len(label):].strip()
    return None


def match_section(line: str, ticket_type: TicketType) -> Optional[ParserState]:
    """Return the state a section header line opens, or None."""
    lowered = line.lower()
    for label, state in SECTION_TRANSITIONS[ticket_type]:
        if label in lowered:
            return state
    return None


def _walk(raw_text: str, ticket_type: TicketType) -> _ParsedFields:
    # Field lines reset to NONE, section headers open their section, any
    # other line is body text for the current state.
    fields = _ParsedFields()
    state = ParserState.NONE

    for line in raw_text.splitlines():
        field_match = match_field(line)
        if field_match is not None:
            name, value = field_match
            setattr(fields, name, value)
            state = ParserState.NONE
            continue

        section = match_section(line, ticket_type)
        if section is not None:
            if section is not state:
                logger.debug("Parser state %s -> %s", state.value, section.value)
            state = section
            continue

        handler = BODY_HANDLERS.get(state)
        if handler is not None:
            handler(fields, line.strip())

    return fields


def parse_response(raw_text: str, ticket_type: TicketType, original_task: str) -> TicketRecord:
    """
    Parse an LLM reply into a ticket record.

    Args:
        raw_text: Reply text from the provider
        ticket_type: Story or Bug
        original_task: Trimmed task the prompt was built from, used for
            Story fallbacks

    Returns:
        StoryTicket or BugTicket; never raises for any input text
    """
    fields = _walk(raw_text or "", ticket_type)

    if ticket_type is TicketType.BUG:
        return BugTicket(
            title=fields.title,
            description=fields.description,
            steps=tuple(fields.steps),
            expected_result=" ".join(fields.expected).strip(),
            actual_result=" ".join(fields.actual).strip(),
        )

    if ticket_type is TicketType.STORY:
        description = fields.description
        if not description:
            description = default_description(original_task)

        bullets = tuple(fields.bullets)
        if len(bullets) < MIN_STORY_CRITERIA:
            logger.info("Reply had %d bullet criteria, using defaults", len(bullets))
            bullets = default_bullets(original_task)

        gherkin = tuple(fields.gherkin)
        if len(gherkin) < MIN_STORY_CRITERIA:
            logger.info("Reply had %d Gherkin lines, using defaults", len(gherkin))
            gherkin = default_gherkin(original_task)

        return StoryTicket(
            title=fields.title,
            description=description,
            acceptance_bullets=bullets,
            acceptance_gherkin=gherkin,
        )

    raise TypeError(f"Unsupported ticket type: {ticket_type!r}")
