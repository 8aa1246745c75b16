"""
Chrome DevTools MCP Configuration

Describes how the agent runtime launches the browser-control tool process
(chrome-devtools-mcp, started through npx over stdio) and which of its
tools the agent may call.

Tool naming convention: mcp__<server_name>__<tool_name>
Example: mcp__chrome-devtools__click, mcp__chrome-devtools__take_snapshot
"""

import os
from typing import Mapping, Optional

from claude_agent_sdk.types import McpStdioServerConfig

MCP_SERVER_NAME = "chrome-devtools"

# Chromium location inside the deployment image; CHROME_PATH equal to this
# path marks a container run.
CONTAINER_CHROME_PATH = "/usr/bin/chromium"

BASE_ARGS: tuple[str, ...] = (
    "-y",
    "chrome-devtools-mcp@latest",
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
)

# Container Chromium runs as root without a GPU or a large /dev/shm
CONTAINER_ARGS: tuple[str, ...] = (
    f"--executable-path={CONTAINER_CHROME_PATH}",
    "--chrome-arg=--no-sandbox",
    "--chrome-arg=--disable-setuid-sandbox",
    "--chrome-arg=--disable-dev-shm-usage",
    "--chrome-arg=--disable-gpu",
)

_TOOL_NAMES = (
    "click",
    "fill",
    "fill_form",
    "hover",
    "press_key",
    "navigate_page",
    "new_page",
    "list_pages",
    "select_page",
    "close_page",
    "wait_for",
    "take_screenshot",
    "take_snapshot",
)

ALLOWED_TOOLS: list[str] = [f"mcp__{MCP_SERVER_NAME}__{name}" for name in _TOOL_NAMES]


def is_container(env: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when CHROME_PATH points at the container Chromium."""
    if env is None:
        env = os.environ
    return env.get("CHROME_PATH") == CONTAINER_CHROME_PATH


def build_chrome_devtools_args(env: Optional[Mapping[str, str]] = None) -> list[str]:
    """
    Build the npx argument list for chrome-devtools-mcp.

    Locally the tool auto-detects an installed Chrome. In the container the
    explicit Chromium path is passed together with the sandbox flags that a
    root, GPU-less environment needs.

    Args:
        env: Environment to inspect (default: os.environ)

    Returns:
        Fresh list of command-line arguments
    """
    args = list(BASE_ARGS)
    if is_container(env):
        args.extend(CONTAINER_ARGS)
    return args


def chrome_devtools_server_config(
    env: Optional[Mapping[str, str]] = None,
) -> McpStdioServerConfig:
    """
    Create the stdio MCP server record for ClaudeAgentOptions.mcp_servers.

    Example:
        >>> options = ClaudeAgentOptions(
        ...     mcp_servers={MCP_SERVER_NAME: chrome_devtools_server_config()},
        ...     allowed_tools=ALLOWED_TOOLS,
        ... )
    """
    return {
        "type": "stdio",
        "command": "npx",
        "args": build_chrome_devtools_args(env),
    }


CHROME_DEVTOOLS_MCP_CONFIG: McpStdioServerConfig = chrome_devtools_server_config()


def tool_display_name(tool_name: str) -> str:
    """Strip the mcp__<server>__ prefix from a tool name, if present."""
    if tool_name.startswith("mcp__"):
        parts = tool_name.split("__", 2)
        if len(parts) == 3 and parts[2]:
            return parts[2]
    return tool_name
