"""
Jira Ticket Generator
Turns a task or bug description into a Jira Story or Bug and prints it,
optionally exporting the text to a .txt file named after the ticket title
"""

import argparse
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from story_generator.agents import TicketGeneratorAgent
from story_generator.core.config import Settings
from story_generator.core.models import TicketType
from story_generator.utils.formatters import format_ticket, export_filename

# Load environment
load_dotenv()


def generate_and_print(
    agent: TicketGeneratorAgent,
    task: str,
    ticket_type: TicketType,
    show_gherkin: bool = False,
    export_dir: Optional[str] = None
) -> Optional[str]:
    """
    Generate one ticket, print it and optionally export it.

    Args:
        agent: Configured TicketGeneratorAgent
        task: Task or bug description
        ticket_type: Story or Bug
        show_gherkin: Print Gherkin criteria instead of bullets (stories only)
        export_dir: Directory to write the .txt export to, or None

    Returns:
        Path of the exported file, or None
    """
    result = agent.generate(task, ticket_type)

    if result.ticket is None:
        print("\n⚠️  Nothing to generate: the description is empty.")
        return None

    if result.error:
        print(f"\n❌ {result.error}")
        print("   Showing a template ticket instead.")

    text = format_ticket(result.ticket, show_gherkin)

    print("\n" + "-" * 80)
    print(text)
    print("-" * 80)

    if export_dir is None:
        return None

    os.makedirs(export_dir, exist_ok=True)
    path = os.path.join(export_dir, export_filename(result.ticket.title))
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    print(f"\n💾 Exported to {path}")
    return path


def main():
    """Main function."""
    parser = argparse.ArgumentParser(
        description='Jira Ticket Generator - Turn a task description into a Jira Story or Bug',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python generate_ticket.py                                   # Interactive mode
  python generate_ticket.py "Add dark mode to settings"       # Story
  python generate_ticket.py "App crashes on login" --type Bug --export
        """
    )
    parser.add_argument(
        'task',
        nargs='?',
        help='Task or bug description. If not provided, will prompt interactively.'
    )
    parser.add_argument(
        '--type',
        default='Story',
        choices=[t.value for t in TicketType],
        help='Ticket type to generate (default: Story)'
    )
    parser.add_argument(
        '--gherkin',
        action='store_true',
        help='Show acceptance criteria in Gherkin format (stories only)'
    )
    parser.add_argument(
        '--export',
        nargs='?',
        const='.',
        default=None,
        metavar='DIR',
        help='Write the ticket to DIR/<title>.txt (default DIR: current directory)'
    )

    args = parser.parse_args()

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "=" * 80)
    print("🤖 JIRA TICKET GENERATOR")
    print("=" * 80)

    llm = settings.build_llm_client()
    if llm:
        print(f"\n✅ {llm.status_label()}")
    else:
        print("\n⚠️  OpenAI API key not found in .env file - using template tickets")

    agent = TicketGeneratorAgent(llm)
    ticket_type = TicketType.from_value(args.type)

    task = args.task
    if not task:
        print("\nDescribe the bug:" if ticket_type is TicketType.BUG else "\nDescribe your task:")
        task = input("> ").strip()

    generate_and_print(agent, task, ticket_type, args.gherkin, args.export)

    if not args.task:
        print("\n" + "-" * 80)
        another = input("\nGenerate another ticket? (y/n): ").strip().lower()
        if another == 'y':
            main()
        else:
            print("\n👋 Done!")
    else:
        print("\n👋 Done!")


if __name__ == "__main__":
    main()
