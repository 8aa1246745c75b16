"""
THOUGHT block display for agent text.

Agent narration between tool calls is shown in blue blocks.
"""

from typing import Optional

from rich.markdown import Markdown
from rich.text import Text

from .console import AgentConsole, get_console


def print_thought(
    content: str,
    *,
    title: Optional[str] = None,
    as_markdown: bool = False,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Print a THOUGHT block displaying agent text.

    Args:
        content: The text to display
        title: Custom title (overrides default "[THOUGHT]")
        as_markdown: Render content as markdown
        console: Console to use (defaults to global console)
    """
    console = console or get_console()
    formatted = Markdown(content) if as_markdown else Text(content)
    console.print_block(formatted, "thought", title)
