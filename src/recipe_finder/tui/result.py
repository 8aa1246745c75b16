"""
RESULT block display for the final recipe, token usage, and errors.
"""

from typing import Optional

from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from .console import AgentConsole, get_console


def print_result(
    content: str,
    *,
    title: Optional[str] = None,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Print the final answer as a RESULT block.

    The recipe finder answers in markdown, so content is rendered as such.

    Args:
        content: Result markdown
        title: Custom title (overrides default "[RESULT]")
        console: Console to use (defaults to global console)
    """
    console = console or get_console()
    console.print_block(Markdown(content), "result", title)


def print_usage(
    input_tokens: int,
    output_tokens: int,
    *,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Print a token usage summary.

    Args:
        input_tokens: Total input tokens
        output_tokens: Total output tokens
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("Input tokens", f"{input_tokens:,}")
    table.add_row("Output tokens", f"{output_tokens:,}")
    table.add_row("Total", f"{input_tokens + output_tokens:,}")

    console.print_block(table, "result", "[USAGE]")


def print_error(
    error_message: str,
    *,
    error_type: Optional[str] = None,
    suggestion: Optional[str] = None,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Print an error result block.

    Args:
        error_message: The error message
        error_type: Type/category of error
        suggestion: Suggestion for resolution
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    content = Text()
    content.append("❌ Error", style="bold red")
    if error_type:
        content.append(f" ({error_type})", style="dim red")
    content.append("\n\n")
    content.append(error_message)

    if suggestion:
        content.append("\n\n")
        content.append("💡 ", style="bold")
        content.append(suggestion, style="italic")

    console.print_block(content, "result", border_style="red")
