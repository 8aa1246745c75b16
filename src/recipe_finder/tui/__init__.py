"""
Rich TUI Interface Module

Terminal output for the recipe finder CLI, built on the Rich library.

Components:
- AgentConsole: Main console wrapper with themed output
- TUIConfig: Configuration for colors and display options
- THOUGHT/ACTION/RESULT block display functions
"""

from recipe_finder.tui.console import (
    AgentConsole,
    BlockType,
    TUIConfig,
    create_console,
    get_console,
)
from recipe_finder.tui.thought import print_thought
from recipe_finder.tui.action import print_tool_call
from recipe_finder.tui.result import (
    print_error,
    print_result,
    print_usage,
)

__all__ = [
    # Console infrastructure
    "AgentConsole",
    "BlockType",
    "TUIConfig",
    "create_console",
    "get_console",
    # Block functions
    "print_thought",
    "print_tool_call",
    "print_result",
    "print_error",
    "print_usage",
]
