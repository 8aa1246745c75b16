"""
ACTION block display for browser tool calls.

The stream only reports tool names, so blocks show the short tool name
with an icon per kind of browser action.
"""

from typing import Optional

from rich.text import Text

from ..chrome_devtools import tool_display_name
from .console import AgentConsole, get_console

TOOL_ICONS = {
    "navigate_page": "🌐",
    "new_page": "🌐",
    "click": "👆",
    "hover": "🎯",
    "fill": "⌨️",
    "fill_form": "⌨️",
    "press_key": "⌨️",
    "take_snapshot": "🔍",
    "take_screenshot": "📸",
    "wait_for": "⏳",
}


def print_tool_call(
    tool_name: str,
    *,
    compact: bool = False,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Print a tool call notice.

    Args:
        tool_name: Full tool name (e.g. mcp__chrome-devtools__click)
        compact: Print a single dim line instead of a panel
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    short_name = tool_display_name(tool_name)
    icon = TOOL_ICONS.get(short_name, "🔧")

    if compact:
        console.print(f"[dim]{icon} {short_name}[/dim]")
        return

    content = Text()
    content.append(f"{icon} Tool: ", style="bold")
    content.append(short_name, style="bold green")
    if short_name != tool_name:
        content.append(f"\n{tool_name}", style="dim")

    console.print_block(content, "action")
