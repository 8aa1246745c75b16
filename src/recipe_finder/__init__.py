"""
Recipe Finder

Browser-driving agent that finds recipes on AllRecipes.com using the
Claude Agent SDK and the chrome-devtools MCP server.
"""

from .agent import (
    AgentEvent,
    DoneEvent,
    ResultEvent,
    TextEvent,
    ToolEvent,
    UsageEvent,
    get_options,
    iter_events,
    stream_agent,
)
from .chrome_devtools import (
    ALLOWED_TOOLS,
    CHROME_DEVTOOLS_MCP_CONFIG,
    build_chrome_devtools_args,
    chrome_devtools_server_config,
)
from .config import AgentConfig
from .prompts import SYSTEM_PROMPT

__version__ = "0.1.0"

__all__ = [
    # Agent
    "get_options",
    "iter_events",
    "stream_agent",
    # Events
    "AgentEvent",
    "TextEvent",
    "ToolEvent",
    "UsageEvent",
    "ResultEvent",
    "DoneEvent",
    # Browser tool process
    "ALLOWED_TOOLS",
    "CHROME_DEVTOOLS_MCP_CONFIG",
    "build_chrome_devtools_args",
    "chrome_devtools_server_config",
    # Configuration
    "AgentConfig",
    "SYSTEM_PROMPT",
]
